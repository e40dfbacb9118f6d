"""
Summary: Browser use cases from directory listing to the main loop.
Why: Expose one import path for the CLI wiring and tests.
"""

from .dispatcher import ActionDispatcher, match_confirmation
from .file_lister import list_files
from .file_printer import FileContentPrinter, read_numbered_lines
from .input_reader import InputReader, parse_selection
from .menu_builder import DirectoryMenuProvider, build_menu
from .ports import ActionRecorder, MenuProvider, MenuView, Terminal
from .session import BrowserSession

__all__ = [
    "ActionDispatcher",
    "ActionRecorder",
    "BrowserSession",
    "DirectoryMenuProvider",
    "FileContentPrinter",
    "InputReader",
    "MenuProvider",
    "MenuView",
    "Terminal",
    "build_menu",
    "list_files",
    "match_confirmation",
    "parse_selection",
    "read_numbered_lines",
]
