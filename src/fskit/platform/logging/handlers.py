"""Rich console handler rendering structured filesystem events.

Where: platform/logging/handlers.py
What: Style ``fs_event`` log records with an icon and a compact path.
Why: Keep event formatting apart from logger bootstrap in ``config``.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class FilesystemRichHandler(RichHandler):
    """Rich handler that renders filesystem events with styled paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "fs.directory.create": ("📁", "cyan"),
        "fs.directory.delete": ("🗑️", "green"),
        "fs.directory.delete_refused": ("⛔", "red"),
        "fs.directory.remove_failed": ("⚠️", "yellow"),
        "fs.directory.scan_failed": ("⚠️", "yellow"),
        "fs.file.delete_failed": ("⚠️", "yellow"),
        "fs.file.copy_failed": ("⚠️", "yellow"),
        "fs.file.move_failed": ("⚠️", "yellow"),
        "fs.stat_failed": ("ℹ️", "blue"),
        "fs.json.decode_failed": ("❌", "magenta"),
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
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path with coloured separators and leading ellipsis truncation."""

        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display = ""
        if anchor and not truncated:
            display = anchor if anchor.endswith(separator) else anchor + separator
        if truncated:
            display = "…" + separator
        display += separator.join(body_parts)

        return self._style_path_string(display or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        """Apply Rich styling to the rendered path string."""

        text = Text()
        for char in path_string:
            if char == separator or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_event_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render records carrying an ``fs_event`` extra."""

        event = getattr(record, "fs_event", None)
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

        error_message = getattr(record, "error_message", None)
        if error_message:
            _ = text.append(f" ({error_message})", style=Style(color=color))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for filesystem events."""

        event_text = self._render_event_message(record, message)
        if event_text is not None:
            return event_text

        return super().render_message(record, message)


__all__ = ["FilesystemRichHandler"]
