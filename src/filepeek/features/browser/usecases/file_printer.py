"""Print a file's lines prefixed with 1-based line numbers."""

from __future__ import annotations

from pathlib import Path
from typing import final

from filepeek.platform.logging import BrowserEvent, logger

from .ports import Terminal

_LINE_ENDINGS = "\r\n"


def read_numbered_lines(path: Path) -> list[str]:
    """Return ``"<n>) <line>"`` for every line of ``path`` in order.

    Raises:
        OSError: If the file cannot be opened or read.
        UnicodeDecodeError: If the file is not valid UTF-8 text.
    """
    with open(path, encoding="utf-8") as handle:
        return [
            f"{number}) {line.rstrip(_LINE_ENDINGS)}"
            for number, line in enumerate(handle, start=1)
        ]


@final
class FileContentPrinter:
    """Writes numbered file content to the terminal."""

    def __init__(self, terminal: Terminal) -> None:
        self._terminal = terminal

    def print_file(self, path: Path) -> bool:
        """Print ``path`` with line numbers.

        Returns:
            bool: False when the file was missing or unreadable; a warning
            naming it has been shown and nothing else printed.
        """
        try:
            lines = read_numbered_lines(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(
                "Failed to read file: %s",
                e,
                extra={"browser_event": BrowserEvent.PRINT_FAILED, "path": str(path)},
            )
            self._terminal.warn(f"File not found or unreadable: {path}")
            return False

        for line in lines:
            self._terminal.echo(line)
        return True


__all__ = ["FileContentPrinter", "read_numbered_lines"]
