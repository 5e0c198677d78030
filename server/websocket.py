"""Live console feed over WebSocket.

Each client first gets the boot sequence replayed at the boot delay, then a
``log`` event for every console entry published after a request.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

from fastapi import WebSocket

from decaysearch.console import ConsoleLog, LogEntry

log = logging.getLogger(__name__)


class ConsoleFeed:
    """Fans console entries out to every connected client."""

    def __init__(self) -> None:
        self._clients: list[WebSocket] = []

    @property
    def client_count(self) -> int:
        return len(self._clients)

    async def connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self._clients.append(websocket)

    def disconnect(self, websocket: WebSocket) -> None:
        if websocket in self._clients:
            self._clients.remove(websocket)

    async def replay_boot(
        self, websocket: WebSocket, steps: list[tuple[str, str]], delay: float
    ) -> None:
        """Send *steps* to one client, *delay* seconds apart, then ``ready``."""
        for message, type_ in steps:
            await self._send(websocket, "boot", {"message": message, "type": type_})
            await asyncio.sleep(delay)
        await self._send(websocket, "ready", {})

    async def publish(self, console_log: ConsoleLog, after: int) -> list[LogEntry]:
        """Broadcast every entry in *console_log* newer than id *after*."""
        entries = console_log.since(after)
        for entry in entries:
            await self._broadcast("log", entry.to_dict())
        return entries

    async def _send(self, websocket: WebSocket, event: str, data: dict[str, Any]) -> None:
        await websocket.send_text(json.dumps({"event": event, **data}))

    async def _broadcast(self, event: str, data: dict[str, Any]) -> None:
        for ws in list(self._clients):
            try:
                await self._send(ws, event, data)
            except Exception:
                log.debug("Console client disconnected")
                self.disconnect(ws)


feed = ConsoleFeed()
