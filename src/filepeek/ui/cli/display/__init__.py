"""Display management for CLI interface."""

from filepeek.ui.cli.display.menu import MenuRenderer
from filepeek.ui.cli.display.terminal import RichTerminal

__all__ = ["MenuRenderer", "RichTerminal"]
