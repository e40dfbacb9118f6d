"""Domain types for the interactive browser."""

from .models import (
    ConfirmationAnswer,
    DispatchOutcome,
    LogEntry,
    LoopState,
    MenuOption,
    OptionKind,
    SessionResult,
)

__all__ = [
    "ConfirmationAnswer",
    "DispatchOutcome",
    "LogEntry",
    "LoopState",
    "MenuOption",
    "OptionKind",
    "SessionResult",
]
