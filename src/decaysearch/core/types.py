"""Core Pydantic models for decaysearch."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Caller-side bounds. The builder documents them but does not enforce them;
# callers clamp (or validate) before invoking it.
VECTOR_COUNT_RANGE = (1, 20)
DENSITY_RANGE = (128, 1024)
PAGE_OFFSET_RANGE = (0, 9)


def _clamp(value: int, bounds: tuple[int, int]) -> int:
    low, high = bounds
    return max(low, min(high, int(value)))


class DiagnosticKind(str, Enum):
    """Categories of advisory notices."""

    sanitized = "sanitized"
    unbalanced_syntax = "unbalanced-syntax"
    density_risk = "density-risk"
    popup_blocked = "popup-blocked"


class Diagnostic(BaseModel):
    """A classified, non-fatal notice produced during generation."""

    model_config = ConfigDict(frozen=True)

    kind: DiagnosticKind
    text: str


class GenerationParams(BaseModel):
    """Numeric knobs for one generation request.

    ``vector_count`` in [1, 20], ``density`` in [128, 1024] and
    ``page_offset`` in [0, 9]. Values are taken as given; use
    :meth:`clamped` to pull caller input into range.
    """

    model_config = ConfigDict(frozen=True)

    vector_count: int = 10
    density: int = 257
    page_offset: int = 0

    @classmethod
    def clamped(cls, vector_count: int, density: int, page_offset: int) -> GenerationParams:
        return cls(
            vector_count=_clamp(vector_count, VECTOR_COUNT_RANGE),
            density=_clamp(density, DENSITY_RANGE),
            page_offset=_clamp(page_offset, PAGE_OFFSET_RANGE),
        )

    @property
    def in_range(self) -> bool:
        """True when every field is inside its caller-side bounds."""
        return self == self.clamped(self.vector_count, self.density, self.page_offset)

    @property
    def start(self) -> int:
        """Result offset for the ``start`` URL parameter (10 results per page)."""
        return self.page_offset * 10


class GenerationResult(BaseModel):
    """Ordered vectors plus the diagnostics collected while building them."""

    term: str
    params: GenerationParams
    urls: list[str] = Field(default_factory=list)
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    @property
    def primary(self) -> str | None:
        """The vector intended for automatic navigation."""
        return self.urls[0] if self.urls else None

    def has(self, kind: DiagnosticKind) -> bool:
        return any(d.kind == kind for d in self.diagnostics)
