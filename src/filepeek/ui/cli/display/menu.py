"""src/filepeek/ui/cli/display/menu.py
What: Print the numbered option list between a fixed header and footer.
Why: Keep menu formatting out of the selection loop.
"""

from __future__ import annotations

from typing import Final, final

from rich.console import Console
from rich.text import Text

from filepeek.features.browser.domain.models import MenuOption, OptionKind

MENU_HEADER: Final[str] = "Select a file to print"
MENU_FOOTER: Final[str] = "Enter the number of an option"


@final
class MenuRenderer:
    """Handles menu display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render(self, options: list[MenuOption]) -> None:
        """Print header, one ``<index>) <label>`` line per option, and footer."""

        self.console.print()
        self.console.rule(MENU_HEADER, style="cyan")
        for option in options:
            self.console.print(self._format_option(option))
        self.console.rule(MENU_FOOTER, style="dim")

    @staticmethod
    def _format_option(option: MenuOption) -> Text:
        text = Text()
        _ = text.append(f"{option.index:>3}) ", style="bold cyan")
        label_style = "white" if option.kind is OptionKind.FILE else "bold magenta"
        _ = text.append(option.label, style=label_style)
        return text


__all__ = ["MENU_FOOTER", "MENU_HEADER", "MenuRenderer"]
