"""
Summary: Ports the browser use cases depend on.
Why: Keep the loop free of Rich and filesystem details so tests can script it.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from filepeek.features.browser.domain.models import LogEntry, MenuOption


@runtime_checkable
class MenuProvider(Protocol):
    """Capability that produces the current menu on demand."""

    def get_options(self) -> list[MenuOption]:
        """Return freshly numbered options for this loop pass."""
        ...


@runtime_checkable
class Terminal(Protocol):
    """Console surface used for messages, warnings and prompts."""

    def say(self, message: str) -> None:
        """Write a line to the regular output stream."""
        ...

    def echo(self, line: str) -> None:
        """Write a line of file content verbatim."""
        ...

    def warn(self, message: str) -> None:
        """Write a line to the warning stream."""
        ...

    def ask(self, prompt: str) -> str:
        """Prompt and return the raw reply."""
        ...


@runtime_checkable
class MenuView(Protocol):
    """Renders the option list."""

    def render(self, options: list[MenuOption]) -> None:
        """Display ``options``."""
        ...


@runtime_checkable
class ActionRecorder(Protocol):
    """Best-effort sink for dispatched actions."""

    def record(self, success: bool, action: str) -> LogEntry:
        """Persist one action and return the entry that was written."""
        ...


__all__ = ["ActionRecorder", "MenuProvider", "MenuView", "Terminal"]
