"""Line storage for the in-memory host."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence


@dataclass(slots=True)
class BufferDocument:
    """List-of-lines text model; every edit returns a new document."""

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0

    @classmethod
    def from_text(cls, text: str) -> "BufferDocument":
        return cls(_lines=text.split("\n"))

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> "BufferDocument":
        return cls(_lines=list(lines) or [""])

    def snapshot(self) -> Sequence[str]:
        return tuple(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def with_text(self, text: str) -> "BufferDocument":
        """Return a document holding ``text`` with the version bumped."""

        return BufferDocument(_lines=text.split("\n"), version=self.version + 1)
