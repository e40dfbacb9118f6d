"""Exception hierarchy for filepeek."""

from __future__ import annotations

from pathlib import Path


class FilepeekError(Exception):
    """Base class for errors raised by filepeek itself."""


class ConfigError(FilepeekError):
    """Raised when a configuration file exists but cannot be used."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid configuration file {path}: {reason}")
        self.path: Path = path
        self.reason: str = reason


__all__ = ["ConfigError", "FilepeekError"]
