"""
Summary: Structured event identifiers for best-effort filesystem operations.
Why: Failures swallowed by the helpers still leave a trace in the logs.
"""

from __future__ import annotations

import os
from enum import StrEnum

from fskit.platform.logging import logger


class FilesystemEvent(StrEnum):
    """Event names attached to log records as the ``fs_event`` extra."""

    DIRECTORY_CREATE = "fs.directory.create"
    DIRECTORY_DELETE = "fs.directory.delete"
    DIRECTORY_DELETE_REFUSED = "fs.directory.delete_refused"
    DIRECTORY_REMOVE_FAILED = "fs.directory.remove_failed"
    DIRECTORY_SCAN_FAILED = "fs.directory.scan_failed"
    FILE_DELETE_FAILED = "fs.file.delete_failed"
    FILE_COPY_FAILED = "fs.file.copy_failed"
    FILE_MOVE_FAILED = "fs.file.move_failed"
    STAT_FAILED = "fs.stat_failed"
    JSON_DECODE_FAILED = "fs.json.decode_failed"


def log_event(
    level: int,
    event: FilesystemEvent,
    message: str,
    *message_args: object,
    path: str | os.PathLike[str] | None = None,
    error: BaseException | None = None,
    **context: object,
) -> None:
    """Emit ``message`` on the library logger with structured extras."""

    extra: dict[str, object] = {"fs_event": event.value, **context}
    if path is not None:
        extra["path"] = os.fspath(path)
    if error is not None:
        extra["error_message"] = str(error)
    logger.log(level, message, *message_args, extra=extra)


__all__ = ["FilesystemEvent", "log_event"]
