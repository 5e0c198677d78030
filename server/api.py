"""FastAPI REST server for decaysearch."""

from __future__ import annotations

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware

import decaysearch
from decaysearch.config import DecaySearchConfig
from decaysearch.console import BOOT_SEQUENCE, Console, format_vector_label
from decaysearch.core.types import GenerationParams
from decaysearch.exceptions import EmptyQueryError
from server.models import (
    BootStep,
    HealthResponse,
    LogEntryResponse,
    VectorItem,
    VectorsRequest,
    VectorsResponse,
)
from server.websocket import feed

load_dotenv()

app = FastAPI(
    title="decaysearch",
    description="Heuristic decay search-vector generator.",
    version=decaysearch.__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:5173"],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# ------------------------------------------------------------------
# Shared console
# ------------------------------------------------------------------

_console: Console | None = None


def _get_console() -> Console:
    """Return (or lazily create) the server console, already booted."""
    global _console
    if _console is None:
        _console = Console(config=DecaySearchConfig.from_env())
        _console.boot(animate=False)
    return _console


def _params(body: VectorsRequest, console: Console) -> GenerationParams:
    defaults = console.config
    return GenerationParams(
        vector_count=body.vector_count if body.vector_count is not None else defaults.vector_count,
        density=body.density if body.density is not None else defaults.density,
        page_offset=body.page_offset if body.page_offset is not None else defaults.page_offset,
    )


# ------------------------------------------------------------------
# Health
# ------------------------------------------------------------------


@app.get("/v1/health", response_model=HealthResponse)
def health():
    console = _get_console()
    return HealthResponse(status="ok", version=decaysearch.__version__, ready=not console.booting)


# ------------------------------------------------------------------
# Generation
# ------------------------------------------------------------------


@app.post("/v1/vectors", response_model=VectorsResponse)
async def generate_vectors(body: VectorsRequest):
    if body.launch:
        raise HTTPException(
            422, "launch is not supported on the server; open the primary vector client-side"
        )
    console = _get_console()
    last_id = console.log.last_id
    try:
        result = console.execute(body.query, _params(body, console), launch=False)
    except EmptyQueryError:
        raise HTTPException(422, "Query is empty")
    if result is None:
        raise HTTPException(503, "Console is still booting")

    await feed.publish(console.log, last_id)

    return VectorsResponse(
        term=result.term,
        params=result.params,
        urls=result.urls,
        vectors=[
            VectorItem(label=format_vector_label(i), url=url) for i, url in enumerate(result.urls)
        ],
        primary=result.primary,
        diagnostics=result.diagnostics,
    )


# ------------------------------------------------------------------
# Console
# ------------------------------------------------------------------


@app.get("/v1/boot", response_model=list[BootStep])
def boot_sequence():
    return [BootStep(message=message, type=type_) for message, type_ in BOOT_SEQUENCE]


@app.get("/v1/console", response_model=list[LogEntryResponse])
def console_log():
    return [entry.to_dict() for entry in _get_console().log.snapshot()]


@app.websocket("/v1/ws/console")
async def ws_console(websocket: WebSocket):
    console = _get_console()
    await feed.connect(websocket)
    try:
        await feed.replay_boot(websocket, BOOT_SEQUENCE, console.config.boot_delay)
        while True:
            await websocket.receive_text()  # keep alive
    except WebSocketDisconnect:
        feed.disconnect(websocket)


# ------------------------------------------------------------------
# Entrypoint
# ------------------------------------------------------------------


def run():
    import uvicorn

    uvicorn.run("server.api:app", host="0.0.0.0", port=8200, reload=True)


if __name__ == "__main__":
    run()
