"""Shared context and result types for engine actions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from blockier_engine.config import BlockierSettings
from blockier_engine.host import EditorHost


@dataclass(slots=True)
class ActionResult:
    """Outcome reported back to the adapter."""

    applied: bool
    status: str = "ok"
    message: Optional[str] = None


class EventBus:
    """Synchronous publish/subscribe used to notify adapters of edits."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class EngineContext:
    """Everything an action needs for one invocation."""

    host: EditorHost
    settings: BlockierSettings = field(default_factory=BlockierSettings)
    bus: EventBus = field(default_factory=EventBus)
    extras: Dict[str, object] = field(default_factory=dict)


__all__ = ["ActionResult", "EngineContext", "EventBus"]
