"""Block prefix grammar.

Each prefix kind is recognised by a small matcher function that receives a
line and a start column and returns the column just past the token, or
``None``. Kinds are tried in ``GRAMMAR`` order and the first success wins:
the checkbox token is a superset of the bullet token, so it must come first.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

FENCE = "```"

TokenMatcher = Callable[[str, int], Optional[int]]


class PrefixKind(str, Enum):
    """Recognised block prefix kinds."""

    CHECKBOX = "checkbox"
    BULLET = "bullet"
    NUMBER = "number"
    HEADING = "heading"
    QUOTE = "quote"
    FENCE = "fence"


def match_checkbox(text: str, pos: int) -> Optional[int]:
    """``- [`` + any single character + ``]``."""

    if text.startswith("- [", pos) and len(text) > pos + 4 and text[pos + 4] == "]":
        return pos + 5
    return None


def match_bullet(text: str, pos: int) -> Optional[int]:
    if pos < len(text) and text[pos] in "-*+":
        return pos + 1
    return None


def _is_ascii_digit(char: str) -> bool:
    return "0" <= char <= "9"


def match_number(text: str, pos: int) -> Optional[int]:
    """One or more digits followed by ``.`` or ``)``."""

    end = pos
    while end < len(text) and _is_ascii_digit(text[end]):
        end += 1
    if end == pos or end >= len(text) or text[end] not in ".)":
        return None
    return end + 1


def match_heading(text: str, pos: int) -> Optional[int]:
    end = pos
    while end < len(text) and text[end] == "#":
        end += 1
    if 1 <= end - pos <= 6:
        return end
    return None


def match_quote(text: str, pos: int) -> Optional[int]:
    if text.startswith(">", pos):
        return pos + 1
    return None


def match_fence(text: str, pos: int) -> Optional[int]:
    if text.startswith(FENCE, pos):
        return pos + len(FENCE)
    return None


GRAMMAR: tuple[tuple[PrefixKind, TokenMatcher], ...] = (
    (PrefixKind.CHECKBOX, match_checkbox),
    (PrefixKind.BULLET, match_bullet),
    (PrefixKind.NUMBER, match_number),
    (PrefixKind.HEADING, match_heading),
    (PrefixKind.QUOTE, match_quote),
    (PrefixKind.FENCE, match_fence),
)

PARAGRAPH_KINDS: tuple[PrefixKind, ...] = (
    PrefixKind.CHECKBOX,
    PrefixKind.BULLET,
    PrefixKind.NUMBER,
    PrefixKind.HEADING,
    PrefixKind.QUOTE,
)

# Checkbox cannot override: it is typed on top of a bullet and would double-apply.
OVERRIDABLE_KINDS: tuple[PrefixKind, ...] = (
    PrefixKind.CHECKBOX,
    PrefixKind.BULLET,
    PrefixKind.NUMBER,
)
OVERRIDING_KINDS: tuple[PrefixKind, ...] = (PrefixKind.BULLET, PrefixKind.NUMBER)

_MATCHERS = dict(GRAMMAR)


def matchers_for(
    kinds: tuple[PrefixKind, ...],
) -> tuple[tuple[PrefixKind, TokenMatcher], ...]:
    """Return ``(kind, matcher)`` pairs for ``kinds``, keeping grammar order."""

    return tuple((kind, _MATCHERS[kind]) for kind, _ in GRAMMAR if kind in kinds)


def leading_whitespace(text: str) -> int:
    """Length of the run of whitespace at the start of ``text``."""

    count = 0
    for char in text:
        if not char.isspace():
            break
        count += 1
    return count


__all__ = [
    "FENCE",
    "GRAMMAR",
    "OVERRIDABLE_KINDS",
    "OVERRIDING_KINDS",
    "PARAGRAPH_KINDS",
    "PrefixKind",
    "TokenMatcher",
    "leading_whitespace",
    "match_bullet",
    "match_checkbox",
    "match_fence",
    "match_heading",
    "match_number",
    "match_quote",
    "matchers_for",
]
