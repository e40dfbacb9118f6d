"""Tests for CLI functionality."""

from __future__ import annotations

import io
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from filepeek.ui.cli import CommandProcessor, main


@pytest.fixture(autouse=True)
def mock_setup_logger(mocker: MockerFixture) -> MagicMock:
    """Keep CLI tests from writing the diagnostic log under the repository."""

    return mocker.patch("filepeek.ui.cli.args.parser.setup_logger")


@pytest.fixture
def mock_logger(mocker: MockerFixture) -> MagicMock:
    """Create a mock logger.

    Args:
        mocker: Pytest mocker fixture.

    Returns:
        MagicMock: Mock logger instance.
    """
    return mocker.patch("filepeek.ui.cli.cli.logger")


def _cli_args(target: Path, tmp_path: Path) -> list[str]:
    return ["--target-dir", str(target), "--config", str(tmp_path / "absent.toml")]


def test_process_command_prints_confirmed_file(
    browse_dir: Path,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Selecting the file and confirming prints it with line numbers."""

    monkeypatch.setattr("sys.stdin", io.StringIO("3\ny\n"))

    CommandProcessor.process_command(_cli_args(browse_dir, tmp_path))

    captured = capsys.readouterr()
    assert "3) test1.txt" in captured.out
    assert "1) Hello World" in captured.out
    assert "Goodbye!" in captured.out
    log_lines = (browse_dir / "logs" / "actions.log").read_text(encoding="utf-8").splitlines()
    assert len(log_lines) == 1
    assert " | True | print file " in log_lines[0]


def test_process_command_reports_empty_directory(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """An empty directory exits normally without showing the menu."""

    empty = tmp_path / "empty"
    empty.mkdir()

    CommandProcessor.process_command(_cli_args(empty, tmp_path))

    captured = capsys.readouterr()
    assert "No files found" in captured.err
    assert "Exit" not in captured.out
    assert "Goodbye!" in captured.out


def test_process_command_exits_130_on_end_of_input(
    browse_dir: Path,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    mock_logger: MagicMock,
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(""))

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(_cli_args(browse_dir, tmp_path))

    assert excinfo.value.code == 130
    mock_logger.info.assert_called_once()


def test_process_command_exits_1_on_unexpected_error(
    browse_dir: Path,
    tmp_path: Path,
    mocker: MockerFixture,
    mock_logger: MagicMock,
) -> None:
    _ = mocker.patch("filepeek.ui.cli.cli.BrowseCommand", side_effect=RuntimeError("boom"))

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(_cli_args(browse_dir, tmp_path))

    assert excinfo.value.code == 1
    mock_logger.error.assert_called_once()



def test_process_command_logs_session_summary(
    browse_dir: Path,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    mock_logger: MagicMock,
) -> None:
    """The finished session is summarised at debug level with its config file."""

    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1\n"))

    CommandProcessor.process_command(_cli_args(browse_dir, tmp_path))

    mock_logger.debug.assert_called_once_with(
        "Session over (config %s): %s, %d action(s)",
        tmp_path / "absent.toml",
        "menu shown",
        2,
    )


def test_process_command_summarises_empty_directory(
    tmp_path: Path,
    mock_logger: MagicMock,
) -> None:
    empty = tmp_path / "empty"
    empty.mkdir()

    CommandProcessor.process_command(_cli_args(empty, tmp_path))

    args = mock_logger.debug.call_args.args
    assert args[2:] == ("no files to offer", 0)

def test_main_returns_zero(mocker: MockerFixture) -> None:
    process = mocker.patch("filepeek.ui.cli.cli.CommandProcessor.process_command")

    assert main() == 0
    process.assert_called_once_with()
