"""Input normalization for raw search phrases."""

from __future__ import annotations

import re

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_SINGLE_QUOTES = re.compile("[\u2018\u2019]")
_DOUBLE_QUOTES = re.compile("[\u201c\u201d]")
_SURROGATES = re.compile("[\ud800-\udfff]")


def sanitize(raw: str) -> str:
    """Return *raw* stripped of control characters with curly quotes straightened.

    Removes U+0000-U+001F, U+007F and lone surrogates (U+D800-U+DFFF, which
    cannot be UTF-8 encoded into a URL), maps U+2018/U+2019 to ``'`` and
    U+201C/U+201D to ``"``, then trims surrounding whitespace. Total and
    idempotent; the result may be empty.
    """
    text = _CONTROL_CHARS.sub("", raw)
    text = _SURROGATES.sub("", text)
    text = _SINGLE_QUOTES.sub("'", text)
    text = _DOUBLE_QUOTES.sub('"', text)
    # str.strip(): keeps U+FEFF, drops U+0085 (JS trim does the reverse)
    return text.strip()
