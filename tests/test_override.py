from __future__ import annotations

import pytest

from blockier_engine.buffer import Buffer
from blockier_engine.config import BlockierSettings
from blockier_engine.override import Edit, match_override, try_override, try_replace
from blockier_engine.selection import Position


def test_override_fires_at_exact_cursor() -> None:
    edit = try_override("- 1. ", 4)

    assert edit == Edit(start=Position(0, 0), end=Position(0, 1), text="1.")


@pytest.mark.parametrize("cursor", [3, 5])
def test_override_ignores_off_by_one_cursor(cursor: int) -> None:
    assert try_override("- 1. ", cursor) is None


@pytest.mark.parametrize(("line", "cursor"), [("- -", 3), ("1. 1.", 5), ("  * *", 5)])
def test_identical_tokens_are_noop(line: str, cursor: int) -> None:
    match = match_override(line)

    assert match is not None
    assert match.length == cursor
    assert try_override(line, cursor) is None


def test_number_to_bullet() -> None:
    edit = try_override("1. -", 4, line_index=3)

    assert edit == Edit(start=Position(3, 0), end=Position(3, 2), text="-")


def test_checkbox_is_overridable() -> None:
    match = match_override("- [x] 1.")

    assert match is not None
    assert match.existing == "- [x]"
    assert match.new == "1."
    assert try_override("- [x] 1.", 8) == Edit(
        start=Position(0, 0), end=Position(0, 5), text="1."
    )


def test_indented_override_keeps_whitespace() -> None:
    match = match_override("  * -")

    assert match is not None
    assert match.whitespace == "  "
    assert match.existing_span == (2, 3)
    assert try_override("  * -", 5) == Edit(
        start=Position(0, 2), end=Position(0, 3), text="-"
    )


def test_checkbox_cannot_be_the_new_token() -> None:
    match = match_override("1. - [x]")

    assert match is not None
    assert match.new == "-"
    assert try_override("1. - [x]", 8) is None


@pytest.mark.parametrize("line", ["# -", "> 1.", "text - ", "-1. x", ""])
def test_non_overridable_lines(line: str) -> None:
    assert match_override(line) is None


def test_try_replace_edits_host_before_space_lands() -> None:
    buffer = Buffer.from_lines(["1. -"])
    buffer.set_cursor(Position(0, 4))

    edit = try_replace(buffer, BlockierSettings())

    assert edit is not None
    assert buffer.text == "- -"
    assert buffer.get_cursor() == Position(0, 3)

    buffer.insert_text(" ")

    assert buffer.text == "- - "


def test_try_replace_respects_setting() -> None:
    buffer = Buffer.from_lines(["- 1."])
    buffer.set_cursor(Position(0, 4))

    assert try_replace(buffer, BlockierSettings(replace_blocks=False)) is None
    assert buffer.text == "- 1."


def test_try_replace_uses_cursor_line() -> None:
    buffer = Buffer.from_lines(["intro", "  + 2)"])
    buffer.set_cursor(Position(1, 6))

    edit = try_replace(buffer, BlockierSettings())

    assert edit == Edit(start=Position(1, 2), end=Position(1, 3), text="2)")
    assert buffer.get_line(1) == "  2) 2)"
