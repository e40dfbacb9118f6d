"""Configuration management for filepeek."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from filepeek.config.paths import default_config_path
from filepeek.core.errors import ConfigError
from filepeek.platform.logging import logger


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Values read from the optional TOML configuration file."""

    # Directory listed by the menu
    target_dir: Path | None = _path_field()

    # File names hidden from the menu; None keeps the built-in set
    excluded_names: list[str] | None = None

    # Directory receiving the append-only action log
    log_dir: Path | None = _path_field()

    # Diagnostic log file for the application logger
    app_log_file: Path | None = _path_field()

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from ``path`` or the default location.

        A missing file yields an all-defaults instance.

        Raises:
            ConfigError: If the file cannot be read or parsed, or holds
                values of the wrong type.
        """
        config_file = path if path is not None else default_config_path()

        if not config_file.exists():
            logger.debug("No configuration file at %s; using defaults", config_file)
            return cls()

        try:
            with open(config_file, "rb") as f:
                raw = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(config_file, str(e)) from e

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            logger.warning(
                "Ignoring unknown configuration keys in %s: %s",
                config_file,
                ", ".join(unknown),
            )

        values = {key: value for key, value in raw.items() if key in known}
        for key in ("target_dir", "log_dir", "app_log_file"):
            if key in values and not isinstance(values[key], str):
                raise ConfigError(config_file, f"'{key}' must be a string path")

        excluded = values.get("excluded_names")
        if excluded is not None and (
            not isinstance(excluded, list) or not all(isinstance(name, str) for name in excluded)
        ):
            raise ConfigError(config_file, "'excluded_names' must be an array of strings")

        logger.debug("Configuration loaded from %s", config_file)
        return cls(**values)


__all__ = ["Config"]
