"""UI-agnostic block selection and prefix override engine."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "config",
    "grammar",
    "host",
    "override",
    "runtime",
    "selection",
    "suggest",
]

__version__ = "0.1.0"
