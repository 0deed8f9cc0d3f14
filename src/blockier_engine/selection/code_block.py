"""Locate the fenced code block surrounding a cursor.

Fence parity decides whether the cursor is inside a block. A fence carrying
a language tag can only open a block, so it always sets the state to
"inside"; a bare fence is ambiguous and toggles the state.
"""

from __future__ import annotations

from typing import Optional

from blockier_engine.grammar import FENCE

from .models import Position, Selection

LineRange = tuple[int, int]


def _text_between(document, start: Position, end: Position) -> str:
    if start.line == end.line:
        return document.get_line(start.line)[start.ch : end.ch]
    parts = [document.get_line(start.line)[start.ch :]]
    for index in range(start.line + 1, end.line):
        parts.append(document.get_line(index))
    parts.append(document.get_line(end.line)[: end.ch])
    return "\n".join(parts)


def is_inside_fence(document, line: int) -> bool:
    """Scan the lines above ``line`` and report the final fence state."""

    inside = False
    for index in range(line):
        text = document.get_line(index)
        found = text.find(FENCE)
        if found < 0:
            continue
        if len(text[found:].strip()) > len(FENCE):
            inside = True
        else:
            inside = not inside
    return inside


def locate_code_block(
    document, anchor: Position, head: Optional[Position] = None
) -> Optional[LineRange]:
    """Return the inclusive interior ``(first, last)`` line range, or ``None``."""

    head = head or anchor
    start, end = Selection(anchor, head).ordered()
    if FENCE in _text_between(document, start, end):
        return None
    # on a fence line itself: ambiguous, treat as outside
    if FENCE in document.get_line(anchor.line):
        return None
    if not is_inside_fence(document, start.line):
        return None

    opening = start.line
    while FENCE not in document.get_line(opening):
        if opening <= 0:
            return None
        opening -= 1

    last_line = document.line_count - 1
    closing = end.line
    while not document.get_line(closing).endswith(FENCE):
        if closing >= last_line:
            return None
        closing += 1

    return opening + 1, closing - 1


def code_block_selection(document, interior: LineRange) -> Selection:
    first, last = interior
    return Selection(
        Position(first, 0), Position(last, len(document.get_line(last)))
    )


__all__ = [
    "LineRange",
    "code_block_selection",
    "is_inside_fence",
    "locate_code_block",
]
