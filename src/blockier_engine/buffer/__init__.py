"""In-memory host editor."""

from .buffer import Buffer, BufferView
from .document import BufferDocument
from .validation import BufferValidationError, ensure_position

__all__ = [
    "Buffer",
    "BufferDocument",
    "BufferValidationError",
    "BufferView",
    "ensure_position",
]
