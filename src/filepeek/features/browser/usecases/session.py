"""src/filepeek/features/browser/usecases/session.py
What: Drive the render/read/dispatch loop until an action finishes it.
Why: Own the per-pass menu state so nothing else holds a stale menu.
"""

from __future__ import annotations

from typing import Final, final

from filepeek.config.settings import FAREWELL, BrowserSettings
from filepeek.features.browser.domain.models import LoopState, OptionKind, SessionResult
from filepeek.platform.logging import BrowserEvent, logger

from .dispatcher import ActionDispatcher
from .input_reader import InputReader
from .ports import MenuProvider, MenuView, Terminal

INVALID_SELECTION_MESSAGE: Final[str] = "Please choose a valid number."


@final
class BrowserSession:
    """Interactive selection loop over a menu provider."""

    def __init__(
        self,
        settings: BrowserSettings,
        provider: MenuProvider,
        view: MenuView,
        reader: InputReader,
        dispatcher: ActionDispatcher,
        terminal: Terminal,
    ) -> None:
        self._settings = settings
        self._provider = provider
        self._view = view
        self._reader = reader
        self._dispatcher = dispatcher
        self._terminal = terminal

    def run(self) -> SessionResult:
        """Run until exit or a confirmed print.

        Returns without entering the loop when the menu offers no files.
        """
        target_dir = self._settings.target_dir
        initial = self._provider.get_options()
        if not any(option.kind is OptionKind.FILE for option in initial):
            logger.debug(
                "No selectable files",
                extra={"browser_event": BrowserEvent.SESSION_NO_FILES, "path": str(target_dir)},
            )
            self._terminal.warn(f"No files found in {target_dir}")
            self._terminal.say(FAREWELL)
            return SessionResult(entered_loop=False)

        logger.debug(
            "Session started",
            extra={"browser_event": BrowserEvent.SESSION_START, "path": str(target_dir)},
        )
        state = LoopState.RUNNING
        actions = 0
        while state is LoopState.RUNNING:
            # Rebuilt every pass so directory changes show up on the next render
            options = self._provider.get_options()
            self._view.render(options)
            logger.debug(
                "Rendered %d options",
                len(options),
                extra={"browser_event": BrowserEvent.MENU_RENDERED},
            )

            selected = self._reader.read_selection(options)
            if selected is None:
                logger.debug(
                    "Invalid selection",
                    extra={"browser_event": BrowserEvent.SELECTION_INVALID},
                )
                self._terminal.warn(INVALID_SELECTION_MESSAGE)
                continue

            outcome = self._dispatcher.dispatch(selected)
            actions += 1
            state = outcome.state

        self._terminal.say(FAREWELL)
        logger.debug(
            "Session finished after %d action(s)",
            actions,
            extra={"browser_event": BrowserEvent.SESSION_FINISH},
        )
        return SessionResult(entered_loop=True, actions=actions)


__all__ = ["BrowserSession", "INVALID_SELECTION_MESSAGE"]
