"""Structured event identifiers attached to browser log records."""

from __future__ import annotations

from enum import StrEnum


class BrowserEvent(StrEnum):
    """Values for the ``browser_event`` extra on log records."""

    SESSION_START = "browser.session.start"
    SESSION_FINISH = "browser.session.finish"
    SESSION_NO_FILES = "browser.session.no_files"
    MENU_RENDERED = "browser.menu.rendered"
    SELECTION_INVALID = "browser.selection.invalid"
    ACTION_DISPATCHED = "browser.action.dispatched"
    PRINT_DECLINED = "browser.print.declined"
    PRINT_FAILED = "browser.print.failed"
    LISTING_FAILED = "browser.listing.failed"
    ACTION_LOG_FAILED = "browser.action_log.failed"


__all__ = ["BrowserEvent"]
