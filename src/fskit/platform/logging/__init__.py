"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the library logger, setup helpers, and the custom Rich handler.
Why: Provide a single canonical import path for library logging.
"""

from __future__ import annotations

from .config import LOGGER_NAME, logger, reset_logger, setup_logger
from .handlers import FilesystemRichHandler

__all__ = [
    "FilesystemRichHandler",
    "LOGGER_NAME",
    "logger",
    "reset_logger",
    "setup_logger",
]
