"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Expose the shared ``fskit`` logger and opt-in console/file handlers.
Why: A library stays silent until the host application asks for output.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Final

from rich.console import Console

from fskit.config.settings import CONSOLE_LOG_LEVEL, LOG_FILE

from .handlers import FilesystemRichHandler


LOGGER_NAME: Final[str] = "fskit"


def _clear_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def setup_logger(
    log_file: Path | None = LOG_FILE,
    console_level: int = CONSOLE_LOG_LEVEL,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """Attach console and file handlers to the library logger.

    Replaces whatever :func:`setup_logger` or :func:`reset_logger` installed
    before. Defaults come from the ``log_file`` and ``console_log_level``
    configuration values.

    Args:
        log_file: Path to the log file. If None, only console logging is enabled.
        console_level: Logging level for console output.
        file_level: Logging level for file output. Defaults to DEBUG.

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    _clear_handlers(logger)

    console = Console(stderr=True, soft_wrap=True)
    console_handler = FilesystemRichHandler(console=console)
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    if log_file is not None:
        resolved_log_file = Path(log_file).expanduser().resolve()
        os.makedirs(resolved_log_file.parent, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            resolved_log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


def reset_logger() -> logging.Logger:
    """Drop configured handlers and leave the library logger silent."""

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.NOTSET)
    _clear_handlers(logger)
    logger.addHandler(logging.NullHandler())
    return logger


logger: Final[logging.Logger] = logging.getLogger(LOGGER_NAME)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


__all__ = ["LOGGER_NAME", "logger", "reset_logger", "setup_logger"]
