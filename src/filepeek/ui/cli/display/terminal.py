"""Rich-backed implementation of the browser terminal port."""

from __future__ import annotations

from typing import TextIO, final

from rich.console import Console
from rich.text import Text


@final
class RichTerminal:
    """Writes messages to stdout, warnings to stderr, and reads prompts."""

    console: Console
    error_console: Console

    def __init__(
        self,
        console: Console | None = None,
        error_console: Console | None = None,
        input_stream: TextIO | None = None,
    ) -> None:
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)
        self._input_stream = input_stream

    def say(self, message: str) -> None:
        self.console.print(Text(message), soft_wrap=True)

    def echo(self, line: str) -> None:
        """Write ``line`` to stdout byte for byte, bypassing Rich rendering."""

        stream = self.console.file
        _ = stream.write(line + "\n")
        stream.flush()

    def warn(self, message: str) -> None:
        self.error_console.print(Text(message, style="yellow"), soft_wrap=True)

    def ask(self, prompt: str) -> str:
        """Read one line; EOFError and KeyboardInterrupt propagate to the caller."""

        reply = self.console.input(Text(prompt, style="bold"), stream=self._input_stream)
        # readline() signals end of input with "" where input() raises
        if self._input_stream is not None and not reply:
            raise EOFError("input stream exhausted")
        return reply.rstrip("\n")


__all__ = ["RichTerminal"]
