"""``EditorHost`` implementation over a Textual ``TextArea``."""

from __future__ import annotations

from typing import Optional, Sequence

from textual.widgets import TextArea
from textual.widgets.text_area import Selection as TextSelection

from blockier_engine.selection import Position, Selection


class TextAreaHost:
    """Single-selection host; ``TextArea`` has no multi-cursor support."""

    def __init__(self, area: TextArea) -> None:
        self.area = area

    @property
    def line_count(self) -> int:
        return self.area.document.line_count

    def get_line(self, index: int) -> str:
        return self.area.document.get_line(index)

    def get_cursor(self) -> Position:
        return Position(*self.area.selection.end)

    def set_cursor(self, position: Position) -> None:
        self.area.selection = TextSelection.cursor(tuple(position))

    def list_selections(self) -> Sequence[Selection]:
        start, end = self.area.selection
        return (Selection(Position(*start), Position(*end)),)

    def set_selections(self, selections: Sequence[Selection]) -> None:
        anchor, head = selections[0]
        self.area.selection = TextSelection(tuple(anchor), tuple(head))

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        self.area.replace(text, tuple(start), tuple(end))

    def get_range(self, start: Position, end: Position) -> str:
        return self.area.get_text_range(tuple(start), tuple(end))

    def table_context(self) -> Optional[bool]:
        # plain text area: tables are never rendered
        return False

    def select_nearest_container(self) -> None:
        self.area.select_all()


__all__ = ["TextAreaHost"]
