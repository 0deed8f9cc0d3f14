"""Actions driving the checkbox and callout suggestion popups."""

from __future__ import annotations

from typing import MutableMapping, cast

from blockier_engine.suggest import (
    SuggestionTrigger,
    apply_callout_suggestion,
    apply_checkbox_suggestion,
    suggestions_for,
)

from .base import ActionResult, EngineContext


def _suggest_state(context: EngineContext) -> MutableMapping[str, object]:
    return cast(
        MutableMapping[str, object], context.extras.setdefault("suggest_state", {})
    )


def refresh_suggestions(context: EngineContext) -> ActionResult:
    """Open, update or close the popup for the current cursor."""

    state = _suggest_state(context)
    found = suggestions_for(context.host, context.settings)
    if found is None:
        if state:
            state.clear()
            context.bus.emit("suggest.close")
        return ActionResult(applied=False, status="no_suggestions")

    trigger, candidates, kind = found
    state.update({"trigger": trigger, "candidates": candidates, "kind": kind})
    context.bus.emit(
        "suggest.open", {"kind": kind, "query": trigger.query, "candidates": candidates}
    )
    return ActionResult(applied=True, status=f"suggest_{kind}", message=trigger.query)


def accept_suggestion(context: EngineContext, value: str) -> ActionResult:
    state = _suggest_state(context)
    trigger = state.get("trigger")
    if not isinstance(trigger, SuggestionTrigger):
        return ActionResult(applied=False, status="no_suggestions")

    if state.get("kind") == "callout":
        cursor = apply_callout_suggestion(context.host, trigger, value)
    else:
        cursor = apply_checkbox_suggestion(context.host, trigger, value)
    state.clear()
    context.bus.emit("suggest.accept", {"value": value, "cursor": cursor})
    return ActionResult(applied=True, status="suggest_accept", message=value)


__all__ = ["accept_suggestion", "refresh_suggestions"]
