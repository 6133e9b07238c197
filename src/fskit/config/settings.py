"""Where: src/fskit/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to the filesystem helpers without file I/O.
Assumptions: - Config defaults mirror the historical behaviour of the helpers.
Trade-offs: - Validation is limited to simple boundary checks.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fskit.config.config import config as app_config

DIRECTORY_MODE_DEFAULT: int = 0o777
JSON_INDENT_DEFAULT: int = 4
TEMPLATE_EXTENSION_DEFAULT: str = "tpl"
STUB_EXTENSION_DEFAULT: str = "stub"
CONSOLE_LOG_LEVEL_DEFAULT: int = logging.WARNING


# Directories ----------------------------------------------------------------

_directory_mode = getattr(app_config, "directory_mode", DIRECTORY_MODE_DEFAULT)
DEFAULT_DIRECTORY_MODE: int = (
    _directory_mode
    if isinstance(_directory_mode, int) and 0 <= _directory_mode <= 0o7777
    else DIRECTORY_MODE_DEFAULT
)


# JSON -----------------------------------------------------------------------

_json_indent = getattr(app_config, "json_indent", JSON_INDENT_DEFAULT)
JSON_INDENT: int = (
    _json_indent
    if isinstance(_json_indent, int) and not isinstance(_json_indent, bool) and _json_indent > 0
    else JSON_INDENT_DEFAULT
)


# Templates ------------------------------------------------------------------

# Stored without the leading dot; callers add the separator.
TEMPLATE_EXTENSION: str = (app_config.template_extension or "").lstrip(".") or TEMPLATE_EXTENSION_DEFAULT
STUB_EXTENSION: str = (app_config.stub_extension or "").lstrip(".") or STUB_EXTENSION_DEFAULT


# Logging --------------------------------------------------------------------

_level = logging.getLevelName(str(app_config.console_log_level or "").upper())
CONSOLE_LOG_LEVEL: int = _level if isinstance(_level, int) else CONSOLE_LOG_LEVEL_DEFAULT

LOG_FILE: Path | None = app_config.log_file


__all__ = [
    "CONSOLE_LOG_LEVEL",
    "DEFAULT_DIRECTORY_MODE",
    "JSON_INDENT",
    "LOG_FILE",
    "STUB_EXTENSION",
    "TEMPLATE_EXTENSION",
]
