"""Command and keystroke actions: select block, replace prefix."""

from __future__ import annotations

from blockier_engine.override import try_replace
from blockier_engine.selection import run_select_block

from .base import ActionResult, EngineContext


def select_block(context: EngineContext) -> ActionResult:
    outcome = run_select_block(context.host, context.settings)
    context.bus.emit(
        "select.block",
        {
            "status": outcome.status,
            "selections": outcome.selections,
            "reason": outcome.reason,
        },
    )
    return ActionResult(applied=True, status=f"select_{outcome.status}")


def replace_block(context: EngineContext) -> ActionResult:
    """Run before a space is inserted; overrides the line prefix if typed."""

    edit = try_replace(context.host, context.settings)
    if edit is None:
        return ActionResult(applied=False, status="noop")
    context.bus.emit(
        "replace.block",
        {"line": edit.start.line, "range": (edit.start, edit.end), "text": edit.text},
    )
    return ActionResult(applied=True, status="replace_block", message=edit.text)


__all__ = ["replace_block", "select_block"]
