"""Line classifier: find the structural prefix at the start of a line."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from .tokens import (
    PARAGRAPH_KINDS,
    PrefixKind,
    leading_whitespace,
    match_fence,
    matchers_for,
)

_PARAGRAPH_GRAMMAR = matchers_for(PARAGRAPH_KINDS)


@dataclass(frozen=True, slots=True)
class PrefixMatch:
    """Prefix detected on a single line.

    ``length`` is the column where the block content starts. For paragraph
    prefixes it covers indentation, token and the separating space; fence
    openers report 0 because the code-block locator owns fenced content.
    """

    kind: PrefixKind
    token: str
    length: int
    indent: int = 0
    info: str = ""

    @property
    def style(self) -> Literal["paragraph", "fence"]:
        return "fence" if self.kind is PrefixKind.FENCE else "paragraph"


def classify_line(line: str) -> Optional[PrefixMatch]:
    indent = leading_whitespace(line)
    for kind, matcher in _PARAGRAPH_GRAMMAR:
        end = matcher(line, indent)
        if end is None or not line.startswith(" ", end):
            continue
        return PrefixMatch(
            kind=kind,
            token=line[indent:end],
            length=end + 1,
            indent=indent,
        )

    end = match_fence(line, 0)
    if end is not None:
        info = line[end:].strip()
        # a bare fence (or trailing whitespace only) closes a block
        if info:
            return PrefixMatch(
                kind=PrefixKind.FENCE, token=line[:end], length=0, info=info
            )
    return None


def prefix_length(line: str) -> int:
    """Column where the content of ``line`` starts (0 without a prefix)."""

    match = classify_line(line)
    return match.length if match else 0


__all__ = ["PrefixMatch", "classify_line", "prefix_length"]
