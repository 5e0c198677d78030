"""decaysearch core types and query generation."""

from decaysearch.core.builder import build_vectors
from decaysearch.core.sanitize import sanitize
from decaysearch.core.syntax import is_balanced, process_term
from decaysearch.core.types import Diagnostic, DiagnosticKind, GenerationParams, GenerationResult

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "GenerationParams",
    "GenerationResult",
    "build_vectors",
    "is_balanced",
    "process_term",
    "sanitize",
]
