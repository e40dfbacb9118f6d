"""Append-only action log written next to the browsed directory."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import final

from filepeek.config.settings import ACTION_LOG_FILE_NAME
from filepeek.features.browser.domain.models import LogEntry
from filepeek.platform.logging import BrowserEvent, logger


@final
class ActionLog:
    """Best-effort writer for ``<timestamp> | <success> | <action>`` lines.

    Write failures are traced at DEBUG level and never raised.
    """

    def __init__(
        self,
        log_dir: Path,
        file_name: str = ACTION_LOG_FILE_NAME,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._log_dir = log_dir
        self._file_name = file_name
        self._clock = clock

    @property
    def path(self) -> Path:
        return self._log_dir / self._file_name

    def record(self, success: bool, action: str) -> LogEntry:
        """Append one entry and return it, whether or not the write succeeded."""

        entry = LogEntry(timestamp=self._clock(), success=success, action=action)
        try:
            self._log_dir.mkdir(parents=True, exist_ok=True)
            with open(self.path, "a", encoding="utf-8") as handle:
                _ = handle.write(entry.format() + "\n")
        except OSError as e:
            logger.debug(
                "Failed to write action log: %s",
                e,
                extra={"browser_event": BrowserEvent.ACTION_LOG_FAILED, "path": str(self.path)},
            )
        return entry


__all__ = ["ActionLog"]
