"""Command line interface package."""

from filepeek.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
