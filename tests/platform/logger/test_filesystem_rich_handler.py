"""Tests for the ``FilesystemRichHandler`` event rendering."""

from __future__ import annotations

import logging
import logging.handlers
from io import StringIO
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.text import Text

from fskit.platform.logging import (
    LOGGER_NAME,
    FilesystemRichHandler,
    reset_logger,
    setup_logger,
)


def _make_handler() -> FilesystemRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return FilesystemRichHandler(console=console)


def _build_record(**extras: Any) -> logging.LogRecord:
    record = logging.LogRecord(
        name="fskit",
        level=logging.DEBUG,
        pathname="test",
        lineno=0,
        msg="",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_render_event_includes_message_path_and_error() -> None:
    handler = _make_handler()
    record = _build_record(
        fs_event="fs.file.delete_failed",
        path="/srv/data/file.txt",
        error_message="denied",
    )

    rendered = handler.render_message(record, "Cannot delete file")
    assert isinstance(rendered, Text)

    plain = rendered.plain
    assert "Cannot delete file" in plain
    assert "/srv/data/file.txt" in plain
    assert "(denied)" in plain


def test_render_event_truncates_long_paths() -> None:
    handler = _make_handler()
    record = _build_record(
        fs_event="fs.directory.delete",
        path="/home/user/projects/demo/build/cache/objects",
    )

    rendered = handler.render_message(record, "Deleted directory")
    assert isinstance(rendered, Text)

    plain = rendered.plain
    assert "…/demo/build/cache/objects" in plain
    assert "/home/user" not in plain


def test_render_event_keeps_windows_separators() -> None:
    handler = _make_handler()
    record = _build_record(fs_event="fs.stat_failed", path="C:\\data\\file.txt")

    rendered = handler.render_message(record, "Cannot stat entry")
    assert isinstance(rendered, Text)

    assert "data\\file.txt" in rendered.plain


def test_plain_records_fall_back_to_rich_rendering() -> None:
    handler = _make_handler()
    record = _build_record()

    rendered = handler.render_message(record, "plain message")

    assert isinstance(rendered, Text)
    assert rendered.plain == "plain message"


def test_setup_logger_adds_rotating_file_handler(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "fskit.log"
    try:
        logger = setup_logger(log_file=log_file)
        logger.debug("written to file")
        for handler in logger.handlers:
            handler.flush()

        assert any(isinstance(h, FilesystemRichHandler) for h in logger.handlers)
        assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers)
        assert "written to file" in log_file.read_text(encoding="utf-8")
    finally:
        _ = reset_logger()


def test_library_logger_is_silent_until_configured() -> None:
    """Importing the package installs only a NullHandler on the library logger."""

    logger = logging.getLogger(LOGGER_NAME)

    assert logger.handlers
    assert all(isinstance(h, logging.NullHandler) for h in logger.handlers)


def test_reset_logger_removes_console_handler() -> None:
    try:
        configured = setup_logger(log_file=None, console_level=logging.INFO)
        assert any(isinstance(h, FilesystemRichHandler) for h in configured.handlers)
        assert configured.level == logging.DEBUG
    finally:
        logger = reset_logger()

    assert [type(h) for h in logger.handlers] == [logging.NullHandler]
    assert logger.level == logging.NOTSET
    assert logger.propagate is True
