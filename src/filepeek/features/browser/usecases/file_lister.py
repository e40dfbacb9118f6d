"""List the selectable files of the browsed directory."""

from __future__ import annotations

import os
from collections.abc import Collection
from pathlib import Path

from filepeek.platform.logging import BrowserEvent, logger

# Windows file names compare case-insensitively
CASE_SENSITIVE_NAMES: bool = os.name != "nt"


def list_files(
    directory: Path,
    excluded_names: Collection[str] = (),
    *,
    case_sensitive: bool = CASE_SENSITIVE_NAMES,
) -> list[str]:
    """Return names of regular files directly inside ``directory``.

    Names found in ``excluded_names`` are skipped and the directory's own
    listing order is kept. A missing, unreadable or non-directory path
    yields an empty list.

    Args:
        directory: Directory to list (not recursed into).
        excluded_names: File names to leave out.
        case_sensitive: Whether exclusions must match the name's case exactly.

    Returns:
        list[str]: File names in listing order.
    """
    if case_sensitive:
        excluded = set(excluded_names)
    else:
        excluded = {name.casefold() for name in excluded_names}

    names: list[str] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                key = entry.name if case_sensitive else entry.name.casefold()
                if key in excluded:
                    continue
                try:
                    if not entry.is_file():
                        continue
                except OSError:
                    continue
                names.append(entry.name)
    except OSError as e:
        logger.debug(
            "Unable to list directory: %s",
            e,
            extra={"browser_event": BrowserEvent.LISTING_FAILED, "path": str(directory)},
        )
        return []
    return names


__all__ = ["CASE_SENSITIVE_NAMES", "list_files"]
