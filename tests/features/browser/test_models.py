"""Tests for browser value objects."""

from datetime import datetime

from filepeek.features.browser.domain import LogEntry, LoopState, OptionKind


def test_log_entry_format() -> None:
    entry = LogEntry(timestamp=datetime(2023, 12, 31, 23, 59, 58), success=False, action="exit")

    assert entry.format() == "2023-12-31 23:59:58 | False | exit"


def test_enums_use_readable_values() -> None:
    assert LoopState.RUNNING == "running"
    assert LoopState.FINISHED == "finished"
    assert [kind.value for kind in OptionKind] == ["exit", "greet", "file"]
