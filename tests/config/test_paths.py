"""Tests for configuration path resolution helpers."""

from pathlib import Path

import pytest

from filepeek.config.paths import (
    default_app_log_file,
    default_config_path,
    default_log_dir,
    default_target_dir,
    resolve_overridable_path,
    system_directory,
)


def test_default_config_path_lives_under_repo_config(portable_repo_root: Path) -> None:
    assert default_config_path() == (portable_repo_root / "config" / "config.toml").resolve()


def test_default_app_log_file(portable_repo_root: Path) -> None:
    assert default_app_log_file() == (portable_repo_root / "logs" / "filepeek.log").resolve()


def test_env_overrides_config_path(portable_repo_root: Path) -> None:
    custom = portable_repo_root / "elsewhere.toml"

    assert default_config_path({"FILEPEEK_CONFIG": str(custom)}) == custom.resolve()


def test_default_target_dir_falls_back_to_system_directory(portable_repo_root: Path) -> None:
    _ = portable_repo_root
    assert default_target_dir({}) == system_directory().resolve()


def test_default_target_dir_honours_environment(tmp_path: Path) -> None:
    assert default_target_dir({"FILEPEEK_TARGET_DIR": f"  {tmp_path}  "}) == tmp_path.resolve()


def test_default_log_dir_is_under_target(tmp_path: Path) -> None:
    assert default_log_dir(tmp_path) == tmp_path / "logs"


@pytest.mark.parametrize("blank", ["", "   "])
def test_blank_environment_value_is_ignored(tmp_path: Path, blank: str) -> None:
    resolved = resolve_overridable_path(
        explicit_path=None,
        env={"VAR": blank},
        env_var="VAR",
        default_factory=lambda: tmp_path,
    )

    assert resolved == tmp_path.resolve()


def test_explicit_path_wins(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=tmp_path / "explicit",
        env={"VAR": str(tmp_path / "env")},
        env_var="VAR",
        default_factory=lambda: tmp_path / "default",
    )

    assert resolved == (tmp_path / "explicit").resolve()
