from __future__ import annotations

import pytest

from blockier_engine.grammar import (
    GRAMMAR,
    PrefixKind,
    classify_line,
    leading_whitespace,
    prefix_length,
)
from blockier_engine.grammar.tokens import (
    match_checkbox,
    match_heading,
    match_number,
)


@pytest.mark.parametrize(
    ("line", "kind", "length"),
    [
        ("- item", PrefixKind.BULLET, 2),
        ("* item", PrefixKind.BULLET, 2),
        ("+ item", PrefixKind.BULLET, 2),
        ("1. item", PrefixKind.NUMBER, 3),
        ("10) item", PrefixKind.NUMBER, 4),
        ("# Title", PrefixKind.HEADING, 2),
        ("###### Deep", PrefixKind.HEADING, 7),
        ("> quoted", PrefixKind.QUOTE, 2),
        ("- [ ] task", PrefixKind.CHECKBOX, 6),
        ("- [x] done", PrefixKind.CHECKBOX, 6),
        ("  - nested", PrefixKind.BULLET, 4),
        ("\t1. tabbed", PrefixKind.NUMBER, 4),
        ("-  two spaces", PrefixKind.BULLET, 2),
    ],
)
def test_paragraph_prefixes(line: str, kind: PrefixKind, length: int) -> None:
    match = classify_line(line)

    assert match is not None
    assert match.kind is kind
    assert match.length == length
    assert match.style == "paragraph"


@pytest.mark.parametrize(
    "line",
    [
        "",
        "plain text",
        "-item",
        "1.5 apples",
        "####### too deep",
        "#hashtag",
        "```",
        "``` ",
        "  ```python",
    ],
)
def test_lines_without_prefix(line: str) -> None:
    assert classify_line(line) is None
    assert prefix_length(line) == 0


@pytest.mark.parametrize("indent", ["", "  ", "    ", "\t"])
@pytest.mark.parametrize("token", ["-", "*", "+", "1.", "42)", "#", "###", ">", "- [ ]", "- [/]"])
def test_prefix_length_covers_indent_token_and_space(indent: str, token: str) -> None:
    line = f"{indent}{token} content"

    assert prefix_length(line) == len(indent) + len(token) + 1


def test_checkbox_wins_over_bullet() -> None:
    match = classify_line("- [x] done")

    assert match is not None
    assert match.kind is PrefixKind.CHECKBOX
    assert match.token == "- [x]"


def test_checkbox_without_space_falls_back_to_bullet() -> None:
    match = classify_line("- [x]done")

    assert match is not None
    assert match.kind is PrefixKind.BULLET
    assert match.length == 2


def test_fence_with_language_reports_zero_length() -> None:
    match = classify_line("```python")

    assert match is not None
    assert match.kind is PrefixKind.FENCE
    assert match.style == "fence"
    assert match.length == 0
    assert match.info == "python"


def test_grammar_order() -> None:
    kinds = [kind for kind, _ in GRAMMAR]

    assert kinds == [
        PrefixKind.CHECKBOX,
        PrefixKind.BULLET,
        PrefixKind.NUMBER,
        PrefixKind.HEADING,
        PrefixKind.QUOTE,
        PrefixKind.FENCE,
    ]


def test_token_matchers_report_end_column() -> None:
    assert match_checkbox("  - [?] x", 2) == 7
    assert match_checkbox("- [", 0) is None
    assert match_number("123. x", 0) == 4
    assert match_number(". x", 0) is None
    assert match_heading("### x", 0) == 3


def test_leading_whitespace() -> None:
    assert leading_whitespace(" \t x") == 3
    assert leading_whitespace("x") == 0
    assert leading_whitespace("   ") == 3
