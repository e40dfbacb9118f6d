"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Map CLI verbosity to levels and attach the console and diagnostic-file handlers.
Why: Browser diagnostics go to stderr so stdout carries only the menu and file text.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from .handlers import BrowserRichHandler

LOGGER_NAME: Final[str] = "filepeek"
DIAGNOSTIC_MAX_BYTES: Final[int] = 10 * 1024 * 1024
DIAGNOSTIC_BACKUPS: Final[int] = 5
DIAGNOSTIC_FORMAT: Final[str] = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def console_level_for(*, verbose: bool = False, quiet: bool = False) -> int:
    """Return the console level for the ``--verbose`` / ``--quiet`` flags.

    ``quiet`` wins when both are set; argparse normally prevents that.
    """
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.INFO


def _console_handler(level: int) -> BrowserRichHandler:
    handler = BrowserRichHandler(console=Console(stderr=True, soft_wrap=True))
    handler.setLevel(level)
    return handler


def _diagnostic_file_handler(log_file: Path, level: int) -> logging.Handler:
    target = Path(log_file).expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        target,
        maxBytes=DIAGNOSTIC_MAX_BYTES,
        backupCount=DIAGNOSTIC_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(DIAGNOSTIC_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """(Re)configure the shared ``filepeek`` logger.

    Existing handlers are closed first, so calling this again after the CLI
    has parsed its flags replaces the import-time defaults.

    Args:
        log_file: Rotating diagnostic log. None keeps output on the console only.
        console_level: Threshold for the Rich stderr handler.
        file_level: Threshold for the diagnostic file.

    Returns:
        logging.Logger: The configured ``filepeek`` logger.
    """
    configured = logging.getLogger(LOGGER_NAME)
    configured.setLevel(logging.DEBUG)
    for handler in list(configured.handlers):
        handler.close()
        configured.removeHandler(handler)

    configured.addHandler(_console_handler(console_level))
    if log_file is not None:
        configured.addHandler(_diagnostic_file_handler(log_file, file_level))
    return configured


logger: Final[logging.Logger] = setup_logger()


__all__ = ["LOGGER_NAME", "console_level_for", "logger", "setup_logger"]
