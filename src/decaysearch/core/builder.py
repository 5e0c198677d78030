"""Decayed-iteration query builder.

Each vector index gets fewer ``site:`` clauses than the one before it; the
per-index reduction (the decay factor) shrinks as the phrase gains words.
Early vectors are long and specific, later ones short and broad.
"""

from __future__ import annotations

from urllib.parse import quote

from decaysearch.core.types import Diagnostic, DiagnosticKind, GenerationParams

DEFAULT_ENDPOINT = "https://www.google.com/search"
SITE_TEMPLATE = "site:*.*.%NUM%.* |"
DECAY_BASE = 32
DENSITY_RISK_THRESHOLD = 600

# encodeURIComponent leaves these unescaped
_URI_COMPONENT_SAFE = "-_.!~*'()"


def word_count(term: str) -> int:
    """Count tokens split on a single space; empty segments count too."""
    return len(term.split(" "))


def decay_factor(term: str) -> int:
    return max(DECAY_BASE - word_count(term), 1)


def iterations_for(index: int, density: int, decay: int) -> int:
    """Number of ``site:`` clauses in vector *index*, floored at 1."""
    return max(density - index * decay, 1)


def build_clause(iterations: int) -> str:
    """Join *iterations* site patterns and drop the final character."""
    assert iterations >= 1, f"iterations must be positive, got {iterations}"
    clause = "".join(SITE_TEMPLATE.replace("%NUM%", str(ii)) for ii in range(iterations))
    return clause[:-1]


def build_url(final_query: str, page_offset: int, endpoint: str = DEFAULT_ENDPOINT) -> str:
    encoded = quote(final_query, safe=_URI_COMPONENT_SAFE)
    return f"{endpoint}?q={encoded}&start={page_offset * 10}"


def build_vectors(
    term: str,
    params: GenerationParams,
    *,
    endpoint: str = DEFAULT_ENDPOINT,
    density_risk_threshold: int = DENSITY_RISK_THRESHOLD,
) -> tuple[list[str], list[Diagnostic]]:
    """Build ``params.vector_count`` search URLs for an already-processed *term*.

    *term* is embedded verbatim, so it should have been through
    :func:`~decaysearch.core.sanitize.sanitize` and
    :func:`~decaysearch.core.syntax.process_term` first. Never raises for
    in-range parameters; the only diagnostic produced here is
    ``density-risk``.
    """
    diagnostics: list[Diagnostic] = []
    if params.density > density_risk_threshold:
        diagnostics.append(
            Diagnostic(
                kind=DiagnosticKind.density_risk,
                text="HTTP_414_RISK: URL DENSITY EXCEEDS RECOMMENDED LIMITS",
            )
        )

    decay = decay_factor(term)
    urls: list[str] = []
    for i in range(params.vector_count):
        clause = build_clause(iterations_for(i, params.density, decay))
        final_query = f"({term}) ({clause})"
        urls.append(build_url(final_query, params.page_offset, endpoint))
    return urls, diagnostics
