"""Position and selection value types."""

from __future__ import annotations

from typing import NamedTuple, Sequence


class Position(NamedTuple):
    """Zero-based ``(line, ch)`` location; tuples order by line then ch."""

    line: int
    ch: int


class Selection(NamedTuple):
    """Direction-sensitive range; ``anchor == head`` is a caret."""

    anchor: Position
    head: Position

    @classmethod
    def caret(cls, line: int, ch: int) -> "Selection":
        position = Position(line, ch)
        return cls(position, position)

    @classmethod
    def between(cls, start: tuple[int, int], end: tuple[int, int]) -> "Selection":
        return cls(Position(*start), Position(*end))

    @property
    def is_caret(self) -> bool:
        return self.anchor == self.head

    def ordered(self) -> tuple[Position, Position]:
        """Return ``(start, end)`` in document order."""

        if self.anchor <= self.head:
            return self.anchor, self.head
        return self.head, self.anchor

    def spans_lines(self) -> bool:
        return self.anchor.line != self.head.line


def selections_equal(left: Sequence[Selection], right: Sequence[Selection]) -> bool:
    """Pairwise anchor/head equality; a swapped anchor and head is not equal."""

    if len(left) != len(right):
        return False
    return all(a == b for a, b in zip(left, right))


__all__ = ["Position", "Selection", "selections_equal"]
