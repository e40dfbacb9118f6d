"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the configured logger, setup helper, event names and Rich handler.
Why: Provide a single canonical import path for every layer.
"""

from __future__ import annotations

from .config import console_level_for, logger, setup_logger
from .events import BrowserEvent
from .handlers import BrowserRichHandler

__all__ = [
    "BrowserEvent",
    "BrowserRichHandler",
    "console_level_for",
    "logger",
    "setup_logger",
]
