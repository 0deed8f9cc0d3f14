"""Expand selections to cover whole blocks.

A selection confined to one line grows to the end of that line and starts
right after the line's block prefix (``- ``, ``1. ``, ``## ``, ...), so the
prefix is left out. Selections spanning several lines grow to full lines,
prefixes included.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, Optional, Sequence

from blockier_engine.config import BlockierSettings
from blockier_engine.grammar import prefix_length
from blockier_engine.runtime import telemetry

from .code_block import code_block_selection, locate_code_block
from .models import Position, Selection, selections_equal

if TYPE_CHECKING:
    from blockier_engine.host import EditorHost, LineSource

SelectStatus = Literal["container", "code_block", "lines"]


@dataclass(frozen=True, slots=True)
class SelectOutcome:
    """What ``run_select_block`` did to the host."""

    status: SelectStatus
    selections: tuple[Selection, ...] = ()
    reason: Optional[str] = None


def expand_selection(
    document: LineSource, selection: Selection, avoid_prefixes: bool
) -> Selection:
    start, end = selection.ordered()

    if start.line != end.line or not avoid_prefixes:
        return Selection(
            Position(start.line, 0),
            Position(end.line, len(document.get_line(end.line))),
        )

    line = document.get_line(start.line)
    return Selection(
        Position(start.line, prefix_length(line)),
        Position(start.line, len(line)),
    )


def expand_selections(
    document: LineSource, selections: Sequence[Selection], avoid_prefixes: bool
) -> list[Selection]:
    return [
        expand_selection(document, selection, avoid_prefixes)
        for selection in selections
    ]


def _fallback(host: EditorHost, reason: str) -> SelectOutcome:
    telemetry.record_event("select.fallback", data={"reason": reason})
    host.select_nearest_container()
    return SelectOutcome(status="container", reason=reason)


def run_select_block(host: EditorHost, settings: BlockierSettings) -> SelectOutcome:
    """Select the block(s) under the host's selections."""

    with telemetry.span("select::block", component="select") as handle:
        in_table = host.table_context()
        if in_table is None or in_table:
            reason = "table" if in_table else "no_context"
            handle.add_metadata("status", reason)
            return _fallback(host, reason)

        current = tuple(host.list_selections())
        handle.add_metadata("selections", len(current))

        updated: Optional[tuple[Selection, ...]] = None
        status: SelectStatus = "lines"
        if settings.select_full_code_block and len(current) == 1:
            anchor, head = current[0]
            interior = locate_code_block(host, anchor, head)
            if interior is not None:
                updated = (code_block_selection(host, interior),)
                status = "code_block"

        if updated is None:
            updated = tuple(
                expand_selections(
                    host, current, settings.select_block_avoids_prefixes
                )
            )

        if settings.select_all_if_unchanged and selections_equal(current, updated):
            handle.add_metadata("status", "unchanged")
            return _fallback(host, "unchanged")

        host.set_selections(updated)
        handle.add_metadata("status", status)
        telemetry.record_event(
            "select.block", level="debug", data={"status": status, "count": len(updated)}
        )
        return SelectOutcome(status=status, selections=updated)


__all__ = [
    "SelectOutcome",
    "expand_selection",
    "expand_selections",
    "run_select_block",
]
