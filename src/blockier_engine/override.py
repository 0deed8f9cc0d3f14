"""Replace a block's prefix by typing a new one after it.

Typing ``1. -`` and pressing space turns the numbered item into a bullet.
The handler runs on the line as it was before the space was inserted, so an
override fires only when the ``<existing> <new>`` pattern ends exactly at
the cursor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from blockier_engine.config import BlockierSettings
from blockier_engine.grammar import (
    OVERRIDABLE_KINDS,
    OVERRIDING_KINDS,
    leading_whitespace,
    matchers_for,
)
from blockier_engine.host import EditorHost
from blockier_engine.runtime import telemetry
from blockier_engine.selection import Position

_EXISTING = matchers_for(OVERRIDABLE_KINDS)
_NEW = matchers_for(OVERRIDING_KINDS)


@dataclass(frozen=True, slots=True)
class OverrideMatch:
    whitespace: str
    existing: str
    new: str

    @property
    def length(self) -> int:
        return len(self.whitespace) + len(self.existing) + 1 + len(self.new)

    @property
    def existing_span(self) -> tuple[int, int]:
        start = len(self.whitespace)
        return start, start + len(self.existing)


@dataclass(frozen=True, slots=True)
class Edit:
    """Replacement the host applies in one step."""

    start: Position
    end: Position
    text: str


def match_override(line: str) -> Optional[OverrideMatch]:
    """Match ``<whitespace><existing> <new>`` at the start of ``line``."""

    indent = leading_whitespace(line)
    for _, existing in _EXISTING:
        existing_end = existing(line, indent)
        if existing_end is None or not line.startswith(" ", existing_end):
            continue
        for _, new in _NEW:
            new_end = new(line, existing_end + 1)
            if new_end is not None:
                return OverrideMatch(
                    whitespace=line[:indent],
                    existing=line[indent:existing_end],
                    new=line[existing_end + 1 : new_end],
                )
    return None


def try_override(line: str, cursor_ch: int, *, line_index: int = 0) -> Optional[Edit]:
    match = match_override(line)
    if match is None or match.length != cursor_ch:
        return None
    if match.existing == match.new:
        return None
    start, end = match.existing_span
    return Edit(
        start=Position(line_index, start),
        end=Position(line_index, end),
        text=match.new,
    )


def try_replace(host: EditorHost, settings: BlockierSettings) -> Optional[Edit]:
    """Keystroke hook: apply a prefix override at the host cursor, if any."""

    if not settings.replace_blocks:
        return None
    cursor = host.get_cursor()
    edit = try_override(host.get_line(cursor.line), cursor.ch, line_index=cursor.line)
    if edit is None:
        return None
    with telemetry.span(
        "replace::block",
        component="replace",
        metadata={"line": cursor.line, "text": edit.text},
    ):
        host.replace_range(edit.text, edit.start, edit.end)
    telemetry.record_event(
        "replace.block", level="debug", data={"line": cursor.line, "new": edit.text}
    )
    return edit


__all__ = [
    "Edit",
    "OverrideMatch",
    "match_override",
    "try_override",
    "try_replace",
]
