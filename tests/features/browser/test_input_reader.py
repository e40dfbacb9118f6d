"""Tests for selection parsing and reading."""

from __future__ import annotations

import pytest

from fakes import ScriptedTerminal
from filepeek.features.browser.usecases import InputReader, build_menu, parse_selection


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1", 1),
        ("3", 3),
        (" 2 ", 2),
        ("03", 3),
    ],
)
def test_parse_selection_accepts_in_range_integers(raw: str, expected: int) -> None:
    assert parse_selection(raw, 3) == expected


@pytest.mark.parametrize(
    "raw",
    ["", "0", "4", "-1", "+1", "1.0", "one", "1 2", "1_0", "٣", "y"],
)
def test_parse_selection_rejects_everything_else(raw: str) -> None:
    assert parse_selection(raw, 3) is None


def test_read_selection_maps_number_to_option() -> None:
    """Each accepted number returns the option carrying that index."""

    options = build_menu(["a.txt", "b.txt"])
    for index in range(1, len(options) + 1):
        reader = InputReader(ScriptedTerminal([str(index)]))
        selected = reader.read_selection(options)
        assert selected is options[index - 1]
        assert selected.index == index


def test_read_selection_returns_none_for_invalid_reply() -> None:
    terminal = ScriptedTerminal(["9"])
    reader = InputReader(terminal)

    assert reader.read_selection(build_menu(["a.txt"])) is None
    assert len(terminal.prompts) == 1
