"""src/filepeek/features/browser/domain/models.py
What: Value objects and enums describing menu options and loop state.
Why: Keep the session, dispatcher and renderers speaking one vocabulary.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Final

LOG_TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"


class OptionKind(StrEnum):
    """What a menu option does when dispatched."""

    EXIT = "exit"
    GREET = "greet"
    FILE = "file"


class LoopState(StrEnum):
    """State of the main selection loop."""

    RUNNING = "running"
    FINISHED = "finished"


class ConfirmationAnswer(StrEnum):
    """Recognised replies to the print confirmation prompt."""

    YES = "yes"
    NO = "no"


@dataclass(slots=True, frozen=True)
class MenuOption:
    """One numbered entry of the menu.

    ``file_name`` is set only for ``OptionKind.FILE`` entries.
    """

    index: int
    label: str
    kind: OptionKind
    file_name: str | None = None


@dataclass(slots=True, frozen=True)
class LogEntry:
    """A single line of the append-only action log."""

    timestamp: datetime
    success: bool
    action: str

    def format(self) -> str:
        """Render as ``<timestamp> | <success> | <action>``."""

        return f"{self.timestamp.strftime(LOG_TIMESTAMP_FORMAT)} | {self.success} | {self.action}"


@dataclass(slots=True, frozen=True)
class DispatchOutcome:
    """Loop state after a dispatch plus the log entry it produced, if any."""

    state: LoopState
    log_entry: LogEntry | None = None


@dataclass(slots=True, frozen=True)
class SessionResult:
    """Summary of one browser session."""

    entered_loop: bool
    actions: int = 0


__all__ = [
    "ConfirmationAnswer",
    "DispatchOutcome",
    "LOG_TIMESTAMP_FORMAT",
    "LogEntry",
    "LoopState",
    "MenuOption",
    "OptionKind",
    "SessionResult",
]
