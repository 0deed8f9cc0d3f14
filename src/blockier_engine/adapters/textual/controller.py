"""Bridges Textual key events to engine actions and UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from blockier_engine.actions import (
    ActionResult,
    EngineContext,
    accept_suggestion,
    refresh_suggestions,
    replace_block,
    select_block,
)


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the adapter uses to update Textual widgets."""

    update_status: Callable[[str], None] = _noop
    show_suggestions: Callable[[list[str]], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualBlockierAdapter:
    """Maps host key presses onto select/replace/suggest actions."""

    def __init__(
        self,
        context: EngineContext,
        hooks: TextualUIHooks,
        *,
        select_keys: Iterable[str] = ("ctrl+a",),
    ) -> None:
        self.context = context
        self.hooks = hooks
        self.select_keys = frozenset(select_keys)
        self._subscribe_events()

    def handle_key(
        self, key: str, *, character: Optional[str] = None
    ) -> Optional[ActionResult]:
        """Dispatch a key press that has not reached the document yet.

        Returns ``None`` when the key is not one the engine reacts to.
        """

        self._log_state("key ->", key=key, character=character)
        if key in self.select_keys:
            result = select_block(self.context)
        elif key == "space" or character == " ":
            result = replace_block(self.context)
        else:
            return None
        self._after_result(result)
        return result

    def after_edit(self) -> ActionResult:
        """Re-evaluate suggestion triggers once the host applied a keystroke."""

        result = refresh_suggestions(self.context)
        if not result.applied:
            self.hooks.show_suggestions([])
        return result

    def accept(self, value: str) -> ActionResult:
        result = accept_suggestion(self.context, value)
        self._after_result(result)
        self.hooks.show_suggestions([])
        return result

    def _after_result(self, result: ActionResult) -> None:
        self.hooks.update_status(result.message or result.status)
        self._log_state(
            "result <-",
            applied=result.applied,
            status=result.status,
            message=result.message,
        )

    def _subscribe_events(self) -> None:
        bus = self.context.bus
        for event in (
            "select.block",
            "replace.block",
            "suggest.open",
            "suggest.close",
            "suggest.accept",
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)
        if name == "suggest.open" and isinstance(payload, dict):
            self.hooks.show_suggestions(list(payload.get("candidates", [])))
        elif name == "suggest.close":
            self.hooks.show_suggestions([])

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix, *(f"{key}={value!r}" for key, value in snapshot.items())]
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        host = self.context.host
        return {
            "cursor": tuple(host.get_cursor()),
            "selections": len(host.list_selections()),
        }


__all__ = ["TextualBlockierAdapter", "TextualUIHooks"]
