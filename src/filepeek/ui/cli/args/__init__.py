"""Command line argument handling package."""

from filepeek.ui.cli.args.options import BrowseArgs
from filepeek.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "BrowseArgs"]
