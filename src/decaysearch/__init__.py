"""decaysearch: one phrase in, a spread of decayed search vectors out."""

from decaysearch.config import DecaySearchConfig
from decaysearch.console import Console
from decaysearch.core import (
    Diagnostic,
    DiagnosticKind,
    GenerationParams,
    GenerationResult,
    build_vectors,
    is_balanced,
    process_term,
    sanitize,
)

__version__ = "2.5.0"
__all__ = [
    "Console",
    "DecaySearchConfig",
    "Diagnostic",
    "DiagnosticKind",
    "GenerationParams",
    "GenerationResult",
    "build_vectors",
    "is_balanced",
    "process_term",
    "sanitize",
]
