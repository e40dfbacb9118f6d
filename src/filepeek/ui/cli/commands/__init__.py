"""Command execution package for CLI."""

from filepeek.ui.cli.commands.browse import BrowseCommand

__all__ = ["BrowseCommand"]
