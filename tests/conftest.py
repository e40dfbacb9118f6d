"""Shared pytest fixtures for browser tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from fakes import RecordingMenuView, ScriptedTerminal
from filepeek.config.settings import BrowserSettings


@pytest.fixture
def terminal() -> ScriptedTerminal:
    """Provide an empty scripted terminal; tests append replies as needed."""

    return ScriptedTerminal()


@pytest.fixture
def menu_view() -> RecordingMenuView:
    """Provide a menu view that records renders."""

    return RecordingMenuView()


@pytest.fixture
def browse_dir(tmp_path: Path) -> Path:
    """Create a directory holding ``test1.txt`` with a single line."""

    directory = tmp_path / "browse"
    directory.mkdir()
    _ = (directory / "test1.txt").write_text("Hello World\n", encoding="utf-8")
    return directory


@pytest.fixture
def settings(browse_dir: Path, tmp_path: Path) -> BrowserSettings:
    """Settings pointing at ``browse_dir`` with the action log kept outside it."""

    return BrowserSettings(
        target_dir=browse_dir,
        excluded_names=frozenset(),
        log_dir=tmp_path / "action-logs",
    )
