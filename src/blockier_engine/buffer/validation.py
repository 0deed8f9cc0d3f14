"""Bounds checks for positions handed to the in-memory host."""

from __future__ import annotations

from blockier_engine.selection import Position

from .document import BufferDocument


class BufferValidationError(RuntimeError):
    """Raised when a caller passes a position outside the document."""

    def __init__(self, message: str, *, position: Position | None = None) -> None:
        super().__init__(message)
        self.position = position


def ensure_position(document: BufferDocument, position: Position) -> Position:
    line, ch = position
    if line < 0 or line >= document.line_count:
        raise BufferValidationError("Line out of range", position=position)
    if ch < 0 or ch > len(document.get_line(line)):
        raise BufferValidationError("Column out of range", position=position)
    return Position(line, ch)
