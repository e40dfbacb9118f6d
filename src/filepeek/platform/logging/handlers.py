"""Rich console handler that styles structured browser events."""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class BrowserRichHandler(RichHandler):
    """Rich handler that prefixes browser events with an icon and colours paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "browser.session.start": ("🚀", "cyan"),
        "browser.session.finish": ("✅", "green"),
        "browser.session.no_files": ("ℹ️", "yellow"),
        "browser.menu.rendered": ("📋", "blue"),
        "browser.selection.invalid": ("⚠️", "yellow"),
        "browser.action.dispatched": ("🎯", "magenta"),
        "browser.print.declined": ("↪️", "yellow"),
        "browser.print.failed": ("⛔", "red"),
        "browser.listing.failed": ("❌", "red"),
        "browser.action_log.failed": ("📝", "red"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _format_path(self, path: str) -> Text:
        """Render ``path`` in white with magenta separators, keeping the last segments."""

        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        display = anchor
        if len(body_parts) > self._PATH_SEGMENT_LIMIT:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]
            display = "…" + separator
        display += separator.join(body_parts)
        if not display:
            display = "."

        text = Text()
        for char in display:
            if char in {"/", "\\", "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_event_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render records carrying a ``browser_event`` extra."""

        event = getattr(record, "browser_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append(message, style=Style(color=color))

        path = getattr(record, "path", None)
        if path:
            _ = text.append(" @ ")
            _ = text.append_text(self._format_path(str(path)))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for browser events."""

        event_text = self._render_event_message(record, message)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["BrowserRichHandler"]
