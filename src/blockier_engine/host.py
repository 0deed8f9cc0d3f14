"""Protocols describing what the engine needs from a host editor."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from blockier_engine.selection.models import Position, Selection


class LineSource(Protocol):
    """Read-only line access, all the pure core functions depend on."""

    @property
    def line_count(self) -> int: ...

    def get_line(self, index: int) -> str: ...


class EditorHost(LineSource, Protocol):
    """Text surface the command entry points drive.

    Hosts apply each call atomically; the engine never keeps references to
    host state between invocations.
    """

    def get_cursor(self) -> Position:
        """Return the head of the primary selection."""
        ...

    def set_cursor(self, position: Position) -> None: ...

    def list_selections(self) -> Sequence[Selection]: ...

    def set_selections(self, selections: Sequence[Selection]) -> None:
        """Replace every active selection."""
        ...

    def replace_range(self, text: str, start: Position, end: Position) -> None: ...

    def get_range(self, start: Position, end: Position) -> str: ...

    def table_context(self) -> Optional[bool]:
        """Whether the native selection sits in a table; ``None`` if unknown."""
        ...

    def select_nearest_container(self) -> None:
        """Host fallback selecting the closest editable container."""
        ...


__all__ = ["EditorHost", "LineSource"]
