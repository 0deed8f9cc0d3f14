"""Entry points adapters invoke in response to host events."""

from .base import ActionResult, EngineContext, EventBus
from .blocks import replace_block, select_block
from .suggestions import accept_suggestion, refresh_suggestions

__all__ = [
    "ActionResult",
    "EngineContext",
    "EventBus",
    "accept_suggestion",
    "refresh_suggestions",
    "replace_block",
    "select_block",
]
