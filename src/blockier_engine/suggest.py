"""Trigger detection and insertion for checkbox and callout suggestions.

Rendering the popup is the host's job. This module decides when a popup
should open (``- [`` or ``> [!`` typed at the start of a line), orders the
candidates and writes the chosen one back into the line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Sequence

from blockier_engine.config import BlockierSettings
from blockier_engine.host import EditorHost
from blockier_engine.runtime import telemetry
from blockier_engine.selection import Position

EDITING_CHECKBOX = re.compile(r"^\s*- \[(.?)$")
EDITING_CALLOUT = re.compile(r"^\s*> \[!([\w-]*)$")


@dataclass(frozen=True, slots=True)
class SuggestionTrigger:
    """Span of the partially typed token the popup replaces."""

    start: Position
    end: Position
    query: str


def _trigger(
    pattern: re.Pattern[str], line: str, cursor: Position
) -> Optional[SuggestionTrigger]:
    match = pattern.match(line[: cursor.ch])
    if match is None:
        return None
    query = match.group(1)
    return SuggestionTrigger(
        start=Position(cursor.line, cursor.ch - len(query)),
        end=cursor,
        query=query,
    )


def checkbox_trigger(line: str, cursor: Position) -> Optional[SuggestionTrigger]:
    return _trigger(EDITING_CHECKBOX, line, cursor)


def callout_trigger(line: str, cursor: Position) -> Optional[SuggestionTrigger]:
    return _trigger(EDITING_CALLOUT, line, cursor)


def checkbox_candidates(settings: BlockierSettings) -> list[str]:
    return list(settings.checkbox_variants)


def callout_candidates(settings: BlockierSettings) -> list[str]:
    entries = (entry.strip() for entry in settings.callout_suggestions.split(","))
    return [entry for entry in entries if entry]


def reorder_candidates(candidates: Sequence[str], query: str) -> list[str]:
    """Move an exact ``query`` match to the front; otherwise keep the order."""

    if not query or query not in candidates:
        return list(candidates)
    return [query, *(candidate for candidate in candidates if candidate != query)]


def _insert_choice(
    host: EditorHost, trigger: SuggestionTrigger, value: str, *, kind: str
) -> Position:
    with telemetry.span(
        "suggest::apply",
        component="suggest",
        metadata={"kind": kind, "value": value, "query": trigger.query},
    ):
        host.replace_range(value + "] ", trigger.start, trigger.end)
        cursor = Position(trigger.start.line, trigger.start.ch + len(value) + 2)
        host.set_cursor(cursor)

        # picking while the cursor sat in ``[|]`` leaves the old bracket behind
        following = Position(cursor.line, cursor.ch + 1)
        if cursor.ch < len(host.get_line(cursor.line)):
            if host.get_range(cursor, following) == "]":
                host.replace_range("", cursor, following)
    return cursor


def apply_checkbox_suggestion(
    host: EditorHost, trigger: SuggestionTrigger, value: str
) -> Position:
    """Complete ``- [`` with ``value + "] "``; returns the new cursor."""

    return _insert_choice(host, trigger, value, kind="checkbox")


def apply_callout_suggestion(
    host: EditorHost, trigger: SuggestionTrigger, value: str
) -> Position:
    return _insert_choice(host, trigger, value, kind="callout")


def suggestions_for(
    host: EditorHost, settings: BlockierSettings
) -> Optional[tuple[SuggestionTrigger, list[str], str]]:
    """Return ``(trigger, candidates, kind)`` for the host cursor, if any.

    Only enabled suggestion kinds are considered.
    """

    cursor = host.get_cursor()
    line = host.get_line(cursor.line)
    if settings.show_checkbox_suggestions:
        trigger = checkbox_trigger(line, cursor)
        if trigger is not None:
            candidates = reorder_candidates(checkbox_candidates(settings), trigger.query)
            return trigger, candidates, "checkbox"
    if settings.show_callout_suggestions:
        trigger = callout_trigger(line, cursor)
        if trigger is not None:
            candidates = reorder_candidates(callout_candidates(settings), trigger.query)
            return trigger, candidates, "callout"
    return None


__all__ = [
    "EDITING_CALLOUT",
    "EDITING_CHECKBOX",
    "SuggestionTrigger",
    "apply_callout_suggestion",
    "apply_checkbox_suggestion",
    "callout_candidates",
    "callout_trigger",
    "checkbox_candidates",
    "checkbox_trigger",
    "reorder_candidates",
    "suggestions_for",
]
