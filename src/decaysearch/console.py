"""Console: the caller layer around the core.

Runs one request end to end: sanitize, syntax-check, build, then fire the
open-URL effect for the primary vector. Every step is mirrored into a
timestamped console log, and a boot sequence is replayed into the same log
on a timer before the console accepts input.
"""

from __future__ import annotations

import itertools
import logging
import threading
import webbrowser
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Callable

from decaysearch.config import DecaySearchConfig
from decaysearch.core.builder import build_vectors
from decaysearch.core.sanitize import sanitize
from decaysearch.core.syntax import is_balanced, process_term
from decaysearch.core.types import Diagnostic, DiagnosticKind, GenerationParams, GenerationResult
from decaysearch.exceptions import EmptyQueryError, InvalidParamsError

log = logging.getLogger(__name__)

Opener = Callable[[str], bool]

ENTRY_TYPES = ("system", "user", "info", "warning", "success")

BOOT_SEQUENCE: list[tuple[str, str]] = [
    ("SYSTEM_RELOAD: VERCEL CLOUD DEPLOYMENT CONTEXT...", "system"),
    ("HEURISTIC ENGINE v2.5.0 LOADED [STABLE]...", "system"),
    ("DECAY ALGORITHM SYNCHRONIZED. CPU_CORE: ACTIVE.", "system"),
    ("READY. AWAITING OPERATOR INPUT.", "success"),
]

SANITIZED_TEXT = "SANITIZER: NON-PRINTABLE CHARS REMOVED"
UNBALANCED_TEXT = "SYNTAX_ALERT: UNBALANCED SCOPES DETECTED - AUTO_ESCAPE ACTIVE"
POPUP_BLOCKED_TEXT = "BROWSER_BLOCK: POPUP PREVENTED. MANUAL LAUNCH REQUIRED."


def format_vector_label(index: int) -> str:
    """``0`` -> ``V_00``."""
    return f"V_{index:02d}"


@dataclass
class LogEntry:
    """A single console line."""

    id: int
    timestamp: str
    message: str
    type: str = "info"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class ConsoleLog:
    """Append-only list of timestamped, classified console entries."""

    entries: list[LogEntry] = field(default_factory=list)
    clock: Callable[[], datetime] = datetime.now

    def __post_init__(self) -> None:
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def add(self, message: str, type: str = "info") -> LogEntry:
        if type not in ENTRY_TYPES:
            raise ValueError(f"Unknown entry type {type!r}")
        with self._lock:
            entry = LogEntry(
                id=next(self._ids),
                timestamp=self.clock().strftime("%H:%M:%S"),
                message=message,
                type=type,
            )
            self.entries.append(entry)
        return entry

    def since(self, entry_id: int) -> list[LogEntry]:
        """Entries logged after *entry_id*."""
        with self._lock:
            return [e for e in self.entries if e.id > entry_id]

    def snapshot(self) -> list[LogEntry]:
        with self._lock:
            return list(self.entries)

    @property
    def last_id(self) -> int:
        with self._lock:
            return self.entries[-1].id if self.entries else 0

    def clear(self) -> None:
        with self._lock:
            self.entries.clear()


class BootSequence:
    """Replays *steps* into a :class:`ConsoleLog`, one per *delay* seconds.

    Each step schedules the next with a :class:`threading.Timer` until the
    sequence is exhausted. ``cancel()`` stops the pending step.
    """

    def __init__(
        self,
        console_log: ConsoleLog,
        steps: list[tuple[str, str]] | None = None,
        *,
        delay: float = 0.4,
    ) -> None:
        self._log = console_log
        self._steps = list(BOOT_SEQUENCE if steps is None else steps)
        self._delay = delay
        self._timer: threading.Timer | None = None
        self._finished = threading.Event()
        self._cancelled = False

    @property
    def done(self) -> bool:
        return self._finished.is_set()

    def start(self) -> BootSequence:
        self._run(0)
        return self

    def run_now(self) -> None:
        """Emit every remaining step immediately (no timer)."""
        for message, type_ in self._steps:
            self._log.add(message, type_)
        self._finished.set()

    def _run(self, idx: int) -> None:
        if self._cancelled:
            return
        if idx >= len(self._steps):
            self._finished.set()
            log.debug("Boot sequence complete")
            return
        message, type_ = self._steps[idx]
        self._log.add(message, type_)
        self._timer = threading.Timer(self._delay, self._run, args=(idx + 1,))
        self._timer.daemon = True
        self._timer.start()

    def cancel(self) -> None:
        """Stop the pending step; the sequence counts as finished."""
        self._cancelled = True
        if self._timer is not None:
            self._timer.cancel()
        self._finished.set()

    def wait(self, timeout: float | None = None) -> bool:
        return self._finished.wait(timeout)


class Console:
    """The search panel without the panel.

    >>> console = Console(opener=lambda url: True)
    >>> boot = console.boot(animate=False)
    >>> result = console.execute("privacy policy")
    >>> len(result.urls)
    10
    """

    def __init__(
        self,
        config: DecaySearchConfig | None = None,
        *,
        opener: Opener | None = None,
        console_log: ConsoleLog | None = None,
    ):
        self._config = config or DecaySearchConfig()
        self._opener = opener or webbrowser.open_new_tab
        self.log = console_log or ConsoleLog()
        self._boot: BootSequence | None = None

    @property
    def config(self) -> DecaySearchConfig:
        return self._config

    # ------------------------------------------------------------------
    # Boot
    # ------------------------------------------------------------------

    def boot(self, *, animate: bool = True) -> BootSequence:
        self._boot = BootSequence(self.log, delay=self._config.boot_delay)
        if animate:
            self._boot.start()
        else:
            self._boot.run_now()
        return self._boot

    @property
    def booting(self) -> bool:
        return self._boot is not None and not self._boot.done

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate(self, raw: str, params: GenerationParams | None = None) -> GenerationResult:
        """Run the full pipeline for *raw* without opening anything.

        Raises :class:`EmptyQueryError` when nothing is left after sanitizing and
        :class:`InvalidParamsError` for out-of-range *params*.
        """
        if params is None:
            params = self._config.params
        if not params.in_range:
            raise InvalidParamsError(params)
        clean = sanitize(raw)
        if not clean:
            raise EmptyQueryError(raw)

        diagnostics: list[Diagnostic] = []
        if clean != raw:
            diagnostics.append(Diagnostic(kind=DiagnosticKind.sanitized, text=SANITIZED_TEXT))
        if not is_balanced(clean):
            diagnostics.append(
                Diagnostic(kind=DiagnosticKind.unbalanced_syntax, text=UNBALANCED_TEXT)
            )
        term = process_term(clean)

        urls, build_diagnostics = build_vectors(
            term,
            params,
            endpoint=self._config.endpoint,
            density_risk_threshold=self._config.density_risk_threshold,
        )
        return GenerationResult(
            term=term,
            params=params,
            urls=urls,
            diagnostics=diagnostics + build_diagnostics,
        )

    def execute(
        self,
        raw: str,
        params: GenerationParams | None = None,
        *,
        launch: bool | None = None,
    ) -> GenerationResult | None:
        """Generate vectors for *raw*, log the run and open the primary vector.

        Returns ``None`` while the boot sequence is still running.
        """
        if self.booting:
            log.debug("Ignoring execute while booting")
            return None
        if not raw.strip():
            raise EmptyQueryError(raw)

        shown = raw.encode("utf-8", "replace").decode("utf-8")
        self.log.add(f"CMD: EXEC_V_SEARCH [{shown}]", "user")
        result = self.generate(raw, params)
        log.info(
            "Generated %d vectors (density=%d, start=%d)",
            len(result.urls),
            result.params.density,
            result.params.start,
        )
        for diag in result.diagnostics:
            log.warning("%s: %s", diag.kind.value, diag.text)
            self.log.add(diag.text, "warning")

        self.log.add(f"COMPUTATION SUCCESS: {len(result.urls)} VECTORS READY", "success")

        if launch is None:
            launch = self._config.auto_launch
        if launch:
            self.log.add("REDIRECTING TO PRIMARY VECTOR...", "info")
            if not self._open(result.primary):
                blocked = Diagnostic(kind=DiagnosticKind.popup_blocked, text=POPUP_BLOCKED_TEXT)
                result.diagnostics.append(blocked)
                self.log.add(blocked.text, "warning")
        return result

    def _open(self, url: str | None) -> bool:
        if url is None:
            return False
        try:
            opened = self._opener(url)
        except webbrowser.Error as exc:
            log.warning("Could not open primary vector: %s", exc)
            return False
        if not opened:
            log.warning("Host refused to open primary vector")
        return bool(opened)
