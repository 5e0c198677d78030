"""Parenthesis balance checking and repair."""

from __future__ import annotations

import re

_PARENS = re.compile(r"([()])")


def is_balanced(text: str) -> bool:
    """True when every ``(`` in *text* is closed and no ``)`` comes unmatched.

    Other bracket types are ignored.
    """
    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def process_term(term: str) -> str:
    """Return *term* as-is if balanced, else with every parenthesis backslash-escaped."""
    if is_balanced(term):
        return term
    return _PARENS.sub(r"\\\1", term)
