"""Block prefix grammar and line classification."""

from .classifier import PrefixMatch, classify_line, prefix_length
from .tokens import (
    FENCE,
    GRAMMAR,
    OVERRIDABLE_KINDS,
    OVERRIDING_KINDS,
    PARAGRAPH_KINDS,
    PrefixKind,
    leading_whitespace,
    matchers_for,
)

__all__ = [
    "FENCE",
    "GRAMMAR",
    "OVERRIDABLE_KINDS",
    "OVERRIDING_KINDS",
    "PARAGRAPH_KINDS",
    "PrefixKind",
    "PrefixMatch",
    "classify_line",
    "leading_whitespace",
    "matchers_for",
    "prefix_length",
]
