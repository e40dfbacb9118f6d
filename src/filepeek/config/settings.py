"""Where: src/filepeek/config/settings.py
What: Runtime settings struct handed to every browser component.
Why: Replace shared globals with one explicit, immutable value.
Assumptions: - CLI values win over config values, which win over defaults.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from filepeek.config.config import Config
from filepeek.config.paths import default_log_dir, default_target_dir

# Names hidden from the menu when neither CLI nor config provides a set.
DEFAULT_EXCLUDED_NAMES: Final[frozenset[str]] = frozenset(
    {"desktop.ini", "Thumbs.db", ".DS_Store"}
)

# File created inside the action-log directory.
ACTION_LOG_FILE_NAME: Final[str] = "actions.log"

GREETING: Final[str] = "Hello!"
FAREWELL: Final[str] = "Goodbye!"


@dataclass(slots=True, frozen=True)
class BrowserSettings:
    """Explicit configuration shared by the lister, dispatcher and action log."""

    target_dir: Path
    excluded_names: frozenset[str] = DEFAULT_EXCLUDED_NAMES
    log_dir: Path | None = None

    @property
    def action_log_dir(self) -> Path:
        """Directory the action log is appended in."""

        return self.log_dir if self.log_dir is not None else default_log_dir(self.target_dir)

    def resolve_file(self, file_name: str) -> Path:
        """Join ``file_name`` onto the browsed directory."""

        return self.target_dir / file_name

    @classmethod
    def resolve(
        cls,
        *,
        config: Config,
        target_dir: Path | None = None,
        excluded_names: Iterable[str] | None = None,
        log_dir: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> "BrowserSettings":
        """Merge CLI values, config values and defaults into settings."""

        resolved_target = target_dir or config.target_dir or default_target_dir(env)

        if excluded_names is not None:
            excluded = frozenset(excluded_names)
        elif config.excluded_names is not None:
            excluded = frozenset(config.excluded_names)
        else:
            excluded = DEFAULT_EXCLUDED_NAMES

        return cls(
            target_dir=Path(resolved_target).expanduser(),
            excluded_names=excluded,
            log_dir=log_dir or config.log_dir,
        )


__all__ = [
    "ACTION_LOG_FILE_NAME",
    "BrowserSettings",
    "DEFAULT_EXCLUDED_NAMES",
    "FAREWELL",
    "GREETING",
]
