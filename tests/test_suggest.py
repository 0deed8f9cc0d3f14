from __future__ import annotations

import pytest

from blockier_engine.buffer import Buffer
from blockier_engine.config import BlockierSettings
from blockier_engine.selection import Position
from blockier_engine.suggest import (
    apply_callout_suggestion,
    apply_checkbox_suggestion,
    callout_candidates,
    callout_trigger,
    checkbox_candidates,
    checkbox_trigger,
    reorder_candidates,
    suggestions_for,
)


def make_buffer(line: str, ch: int) -> Buffer:
    buffer = Buffer.from_lines([line])
    buffer.set_cursor(Position(0, ch))
    return buffer


def test_checkbox_trigger_without_query() -> None:
    trigger = checkbox_trigger("- [", Position(0, 3))

    assert trigger is not None
    assert trigger.query == ""
    assert trigger.start == Position(0, 3)
    assert trigger.end == Position(0, 3)


def test_checkbox_trigger_with_query() -> None:
    trigger = checkbox_trigger("  - [x", Position(0, 6))

    assert trigger is not None
    assert trigger.query == "x"
    assert trigger.start == Position(0, 5)


def test_checkbox_trigger_only_reads_up_to_cursor() -> None:
    trigger = checkbox_trigger("- []", Position(0, 3))

    assert trigger is not None
    assert trigger.query == ""


@pytest.mark.parametrize(("line", "ch"), [("- [xy", 5), ("text - [", 8), ("- x", 3)])
def test_checkbox_trigger_misses(line: str, ch: int) -> None:
    assert checkbox_trigger(line, Position(0, ch)) is None


def test_callout_trigger() -> None:
    trigger = callout_trigger("> [!no", Position(0, 6))

    assert trigger is not None
    assert trigger.query == "no"
    assert trigger.start == Position(0, 4)
    assert callout_trigger("> [no", Position(0, 5)) is None


def test_reorder_moves_exact_match_first() -> None:
    assert reorder_candidates(["a", "x", "b"], "x") == ["x", "a", "b"]
    assert reorder_candidates(["a", "x", "b"], "") == ["a", "x", "b"]
    assert reorder_candidates(["a", "x", "b"], "z") == ["a", "x", "b"]


def test_candidate_lists_come_from_settings() -> None:
    settings = BlockierSettings(checkbox_variants=" x/", callout_suggestions=" note, ,tip ")

    assert checkbox_candidates(settings) == [" ", "x", "/"]
    assert callout_candidates(settings) == ["note", "tip"]


def test_apply_checkbox_removes_stray_bracket() -> None:
    buffer = make_buffer("- []", 3)
    trigger = checkbox_trigger(buffer.get_line(0), buffer.get_cursor())
    assert trigger is not None

    cursor = apply_checkbox_suggestion(buffer, trigger, "x")

    assert buffer.text == "- [x] "
    assert cursor == Position(0, 6)
    assert buffer.get_cursor() == Position(0, 6)


def test_apply_checkbox_replaces_query() -> None:
    buffer = make_buffer("- [x", 4)
    trigger = checkbox_trigger(buffer.get_line(0), buffer.get_cursor())
    assert trigger is not None

    cursor = apply_checkbox_suggestion(buffer, trigger, "/")

    assert buffer.text == "- [/] "
    assert cursor == Position(0, 6)


def test_apply_callout_suggestion() -> None:
    buffer = make_buffer("> [!no", 6)
    trigger = callout_trigger(buffer.get_line(0), buffer.get_cursor())
    assert trigger is not None

    cursor = apply_callout_suggestion(buffer, trigger, "note")

    assert buffer.text == "> [!note] "
    assert cursor == Position(0, 10)


def test_suggestions_for_respects_settings() -> None:
    buffer = make_buffer("- [x", 4)

    assert suggestions_for(buffer, BlockierSettings()) is None

    found = suggestions_for(buffer, BlockierSettings(show_checkbox_suggestions=True))
    assert found is not None
    trigger, candidates, kind = found
    assert kind == "checkbox"
    assert trigger.query == "x"
    assert candidates[0] == "x"


def test_suggestions_for_callouts() -> None:
    buffer = make_buffer("> [!", 4)

    found = suggestions_for(buffer, BlockierSettings(show_callout_suggestions=True))

    assert found is not None
    _, candidates, kind = found
    assert kind == "callout"
    assert candidates[0] == "note"
