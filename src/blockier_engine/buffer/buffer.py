"""In-memory editor host used by tests, the CLI demo and embedders."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from blockier_engine.runtime import telemetry
from blockier_engine.selection import Position, Selection

from .document import BufferDocument
from .validation import BufferValidationError, ensure_position


@dataclass(slots=True)
class BufferView:
    version: int
    text: str
    selections: tuple[Selection, ...]


class Buffer:
    """Multi-selection text buffer implementing ``EditorHost``."""

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
        selections: Optional[Sequence[Selection]] = None,
        in_table: Optional[bool] = False,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self._selections: list[Selection] = list(
            selections or [Selection.caret(0, 0)]
        )
        self.in_table = in_table
        self.container_selects = 0

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "Buffer":
        return cls(name=name, document=BufferDocument.from_text(text))

    @classmethod
    def from_lines(cls, lines: Sequence[str], *, name: str = "default") -> "Buffer":
        return cls(name=name, document=BufferDocument.from_lines(lines))

    def snapshot(self) -> BufferView:
        return BufferView(
            version=self.document.version,
            text=self.document.text,
            selections=tuple(self._selections),
        )

    @property
    def text(self) -> str:
        return self.document.text

    @property
    def line_count(self) -> int:
        return self.document.line_count

    def get_line(self, index: int) -> str:
        if index < 0 or index >= self.document.line_count:
            raise BufferValidationError("Line out of range")
        return self.document.get_line(index)

    def get_cursor(self) -> Position:
        return self._selections[0].head

    def set_cursor(self, position: Position) -> None:
        position = ensure_position(self.document, Position(*position))
        self._selections = [Selection(position, position)]

    def list_selections(self) -> Sequence[Selection]:
        return tuple(self._selections)

    def set_selections(self, selections: Sequence[Selection]) -> None:
        if not selections:
            raise BufferValidationError("At least one selection is required")
        checked = [
            Selection(
                ensure_position(self.document, Position(*selection[0])),
                ensure_position(self.document, Position(*selection[1])),
            )
            for selection in selections
        ]
        self._selections = checked

    def get_range(self, start: Position, end: Position) -> str:
        start = ensure_position(self.document, start)
        end = ensure_position(self.document, end)
        if start > end:
            start, end = end, start
        text = self.document.text
        return text[_offset(self.document, start) : _offset(self.document, end)]

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        start = ensure_position(self.document, start)
        end = ensure_position(self.document, end)
        if start > end:
            start, end = end, start
        with telemetry.span(
            "buffer::replace_range",
            component="buffer",
            metadata={"buffer": self.name},
        ):
            old = self.document
            start_offset = _offset(old, start)
            end_offset = _offset(old, end)
            offsets = [
                (_offset(old, selection.anchor), _offset(old, selection.head))
                for selection in self._selections
            ]
            before = old.text
            self.document = old.with_text(
                before[:start_offset] + text + before[end_offset:]
            )
            self._selections = [
                Selection(
                    _position_at(
                        self.document, _shift(anchor, start_offset, end_offset, text)
                    ),
                    _position_at(
                        self.document, _shift(head, start_offset, end_offset, text)
                    ),
                )
                for anchor, head in offsets
            ]

    def insert_text(self, text: str) -> None:
        """Type ``text`` at the primary cursor, leaving the cursor after it."""

        cursor = self.get_cursor()
        self.replace_range(text, cursor, cursor)
        offset = _offset(self.document, cursor) + len(text)
        self.set_cursor(_position_at(self.document, offset))

    def table_context(self) -> Optional[bool]:
        return self.in_table

    def select_nearest_container(self) -> None:
        self.container_selects += 1
        last = self.document.line_count - 1
        self._selections = [
            Selection(
                Position(0, 0), Position(last, len(self.document.get_line(last)))
            )
        ]


def _offset(document: BufferDocument, position: Position) -> int:
    offset = 0
    for index in range(position.line):
        offset += len(document.get_line(index)) + 1  # newline
    return offset + position.ch


def _position_at(document: BufferDocument, offset: int) -> Position:
    running = 0
    for index, line in enumerate(document.snapshot()):
        if offset <= running + len(line):
            return Position(index, offset - running)
        running += len(line) + 1
    last = document.line_count - 1
    return Position(last, len(document.get_line(last)))


def _shift(offset: int, start: int, end: int, text: str) -> int:
    """Map an offset across replacing ``[start, end)`` with ``text``."""

    if offset <= start:
        return offset
    if offset < end:
        return start + len(text)
    return offset + len(text) - (end - start)


__all__ = ["Buffer", "BufferView"]
