"""src/filepeek/features/browser/usecases/dispatcher.py
What: Execute the behaviour bound to a selected menu option.
Why: Hold the exit/greet/print transitions and the confirmation sub-loop in one place.
"""

from __future__ import annotations

from pathlib import Path
from typing import Final, final

from filepeek.config.settings import GREETING, BrowserSettings
from filepeek.features.browser.domain.models import (
    ConfirmationAnswer,
    DispatchOutcome,
    LoopState,
    MenuOption,
    OptionKind,
)
from filepeek.platform.logging import BrowserEvent, logger

from .file_printer import FileContentPrinter
from .ports import ActionRecorder, Terminal

EXIT_ACTION: Final[str] = "exit"
GREET_ACTION: Final[str] = "say hello"

_YES_REPLIES: Final[frozenset[str]] = frozenset({"y", "yes"})
_NO_REPLIES: Final[frozenset[str]] = frozenset({"n", "no"})


def match_confirmation(reply: str) -> ConfirmationAnswer | None:
    """Classify a confirmation reply, ignoring case and surrounding whitespace."""

    normalized = reply.strip().lower()
    if normalized in _YES_REPLIES:
        return ConfirmationAnswer.YES
    if normalized in _NO_REPLIES:
        return ConfirmationAnswer.NO
    return None


def print_action_label(path: Path) -> str:
    """Action-log label for a confirmed print of ``path``."""

    return f"print file {path}"


@final
class ActionDispatcher:
    """Runs one selected option and reports the resulting loop state."""

    def __init__(
        self,
        settings: BrowserSettings,
        terminal: Terminal,
        printer: FileContentPrinter,
        action_log: ActionRecorder,
    ) -> None:
        self._settings = settings
        self._terminal = terminal
        self._printer = printer
        self._action_log = action_log

    def dispatch(self, option: MenuOption) -> DispatchOutcome:
        """Execute ``option`` and return the next loop state."""

        logger.debug(
            "Dispatching option %d (%s)",
            option.index,
            option.label,
            extra={"browser_event": BrowserEvent.ACTION_DISPATCHED},
        )
        match option.kind:
            case OptionKind.EXIT:
                entry = self._action_log.record(True, EXIT_ACTION)
                return DispatchOutcome(state=LoopState.FINISHED, log_entry=entry)
            case OptionKind.GREET:
                self._terminal.say(GREETING)
                entry = self._action_log.record(True, GREET_ACTION)
                return DispatchOutcome(state=LoopState.RUNNING, log_entry=entry)
            case OptionKind.FILE:
                if option.file_name is None:
                    raise ValueError(f"File option {option.index} has no file name")
                return self._print_with_confirmation(self._settings.resolve_file(option.file_name))

    def confirm(self, path: Path) -> ConfirmationAnswer:
        """Prompt until the reply is a recognised yes or no."""

        prompt = f"print file {path}? [y/n] "
        while True:
            answer = match_confirmation(self._terminal.ask(prompt))
            if answer is not None:
                return answer

    def _print_with_confirmation(self, path: Path) -> DispatchOutcome:
        if self.confirm(path) is ConfirmationAnswer.NO:
            logger.debug(
                "Print declined",
                extra={"browser_event": BrowserEvent.PRINT_DECLINED, "path": str(path)},
            )
            return DispatchOutcome(state=LoopState.RUNNING)

        # A confirmed print ends the session even when the file could not be read
        printed = self._printer.print_file(path)
        entry = self._action_log.record(printed, print_action_label(path))
        return DispatchOutcome(state=LoopState.FINISHED, log_entry=entry)


__all__ = [
    "ActionDispatcher",
    "EXIT_ACTION",
    "GREET_ACTION",
    "match_confirmation",
    "print_action_label",
]
