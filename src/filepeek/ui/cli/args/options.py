"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final

from filepeek.config.settings import BrowserSettings


@final
@dataclass(slots=True, frozen=True)
class BrowseArgs:
    """Processed command line arguments for a browsing session."""

    settings: BrowserSettings
    config_path: Path


__all__ = ["BrowseArgs"]
