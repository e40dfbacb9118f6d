"""Tests for loading the TOML configuration file."""

from pathlib import Path

import pytest

from filepeek.config.config import Config
from filepeek.core.errors import ConfigError


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    config = Config.load(tmp_path / "absent.toml")

    assert config == Config()


def test_load_reads_known_keys(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    _ = path.write_text(
        'target_dir = "/srv/docs"\n'
        'excluded_names = ["a.txt", "b.txt"]\n'
        'log_dir = ""\n',
        encoding="utf-8",
    )

    config = Config.load(path)

    assert config.target_dir == Path("/srv/docs")
    assert config.excluded_names == ["a.txt", "b.txt"]
    assert config.log_dir is None
    assert config.app_log_file is None


def test_unknown_keys_are_ignored(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    _ = path.write_text('colour = "blue"\n', encoding="utf-8")

    assert Config.load(path) == Config()


def test_malformed_toml_raises_config_error(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    _ = path.write_text("target_dir = [unterminated\n", encoding="utf-8")

    with pytest.raises(ConfigError) as excinfo:
        _ = Config.load(path)

    assert excinfo.value.path == path


@pytest.mark.parametrize(
    "content",
    [
        "target_dir = 3\n",
        'excluded_names = "a.txt"\n',
        "excluded_names = [1, 2]\n",
    ],
)
def test_wrongly_typed_values_raise_config_error(tmp_path: Path, content: str) -> None:
    path = tmp_path / "config.toml"
    _ = path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        _ = Config.load(path)
