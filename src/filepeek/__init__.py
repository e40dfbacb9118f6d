"""filepeek: browse a directory from a numbered menu and print files with line numbers."""

__version__ = "0.1.0"
