"""Shared path utilities for configuration, browsing and log locations.

This module centralizes how the application discovers default locations.

Policy (portable by default):
- Config: repository-root ``<repo_root>/config/config.toml`` unless
  overridden by ``FILEPEEK_CONFIG``.
- Target directory: a fixed system directory unless overridden by
  ``FILEPEEK_TARGET_DIR``.
- Action log: ``<target_dir>/logs``.
- Application log: repository-root ``<repo_root>/logs/filepeek.log``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final

ENV_CONFIG_PATH: Final[str] = "FILEPEEK_CONFIG"
ENV_TARGET_DIR: Final[str] = "FILEPEEK_TARGET_DIR"

_POSIX_SYSTEM_DIR: Final[Path] = Path("/etc")
_WINDOWS_SYSTEM_DIR: Final[Path] = Path("C:/Windows/System32/drivers/etc")
_ACTION_LOG_DIR_NAME: Final[str] = "logs"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Detect the repository root by walking up parents.

    Looks for markers like ``pyproject.toml`` or ``.git``.

    Args:
        start: Starting path. Defaults to this file's directory.

    Returns:
        Path: Detected repository root, or the current working directory
        if no marker is found.
    """
    here = (start or Path(__file__).resolve()).parent
    for p in [here, *here.parents]:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    return Path.cwd()


def system_directory() -> Path:
    """Return the fixed system directory browsed when nothing else is configured."""

    return _WINDOWS_SYSTEM_DIR if os.name == "nt" else _POSIX_SYSTEM_DIR


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the main TOML config file.

    Portable layout: ``<repo_root>/config/config.toml``.
    """
    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=ENV_CONFIG_PATH,
        default_factory=lambda: _detect_repo_root() / "config" / "config.toml",
    )


def default_target_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the directory browsed when neither CLI nor config names one."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=ENV_TARGET_DIR,
        default_factory=system_directory,
    )


def default_log_dir(target_dir: Path) -> Path:
    """Get the default action-log directory for ``target_dir``."""

    return target_dir / _ACTION_LOG_DIR_NAME


def default_app_log_file() -> Path:
    """Get the default diagnostic log file path."""

    return (_detect_repo_root() / "logs" / "filepeek.log").resolve()


__all__ = [
    "ENV_CONFIG_PATH",
    "ENV_TARGET_DIR",
    "default_app_log_file",
    "default_config_path",
    "default_log_dir",
    "default_target_dir",
    "resolve_overridable_path",
    "system_directory",
]
