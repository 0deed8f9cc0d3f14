"""Textual integration: host wrapper, adapter controller and demo app."""

from .controller import TextualBlockierAdapter, TextualUIHooks

__all__ = ["TextualBlockierAdapter", "TextualUIHooks"]
