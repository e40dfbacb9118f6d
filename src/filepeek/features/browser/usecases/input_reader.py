"""Read and validate a menu selection."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final, final

from filepeek.features.browser.domain.models import MenuOption

from .ports import Terminal

SELECTION_PROMPT: Final[str] = "Choose an option: "


def parse_selection(raw: str, option_count: int) -> int | None:
    """Return the chosen 1-based index, or None when ``raw`` is not a valid choice.

    Only base-10 integers within ``1..option_count`` are accepted; surrounding
    whitespace is ignored.
    """
    text = raw.strip()
    # int() would also accept "+3", "1_0" and non-ASCII digits
    if not text.isascii() or not text.isdigit():
        return None
    value = int(text, 10)
    if 1 <= value <= option_count:
        return value
    return None


@final
class InputReader:
    """Prompt once and map the reply to an option of the current menu."""

    def __init__(self, terminal: Terminal, prompt: str = SELECTION_PROMPT) -> None:
        self._terminal = terminal
        self._prompt = prompt

    def read_selection(self, options: Sequence[MenuOption]) -> MenuOption | None:
        """Ask for a number and return the matching option, or None if invalid."""

        raw = self._terminal.ask(self._prompt)
        index = parse_selection(raw, len(options))
        if index is None:
            return None
        return options[index - 1]


__all__ = ["InputReader", "SELECTION_PROMPT", "parse_selection"]
