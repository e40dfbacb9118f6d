"""src/filepeek/ui/cli/commands/browse.py
What: Wire settings, Rich consoles and browser use cases into one session.
Why: Keep construction out of the loop so tests can swap any collaborator.
"""

from __future__ import annotations

from typing import TextIO, final

from rich.console import Console

from filepeek.features.browser.adapters import ActionLog
from filepeek.features.browser.domain.models import SessionResult
from filepeek.features.browser.usecases import (
    ActionDispatcher,
    BrowserSession,
    DirectoryMenuProvider,
    FileContentPrinter,
    InputReader,
)
from filepeek.ui.cli.args.options import BrowseArgs
from filepeek.ui.cli.display import MenuRenderer, RichTerminal


@final
class BrowseCommand:
    """Run one interactive browsing session."""

    def __init__(
        self,
        args: BrowseArgs,
        *,
        console: Console | None = None,
        error_console: Console | None = None,
        input_stream: TextIO | None = None,
    ) -> None:
        self.args = args
        settings = args.settings
        self.terminal = RichTerminal(
            console=console,
            error_console=error_console,
            input_stream=input_stream,
        )
        self.action_log = ActionLog(settings.action_log_dir)
        self.session = BrowserSession(
            settings=settings,
            provider=DirectoryMenuProvider(settings),
            view=MenuRenderer(self.terminal.console),
            reader=InputReader(self.terminal),
            dispatcher=ActionDispatcher(
                settings=settings,
                terminal=self.terminal,
                printer=FileContentPrinter(self.terminal),
                action_log=self.action_log,
            ),
            terminal=self.terminal,
        )

    def execute(self) -> SessionResult:
        """Run the session until it finishes."""

        return self.session.run()
