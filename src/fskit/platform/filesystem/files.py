"""
Summary: Single-file helpers for reading, writing, templating, and JSON persistence.
Why: Give callers default-value reads and boolean best-effort mutations instead of OS errors.
"""

# Where: src/fskit/platform/filesystem/files.py
# What: Stateless functions operating on one file path at a time.
# Assumptions: - Text is UTF-8 and is read without newline translation; undecodable
#   bytes round-trip as surrogate escapes. JSON is decoded strictly.
# Trade-offs: - delete/copy/move report failure only as False; the cause is logged at DEBUG.

from __future__ import annotations

import codecs
import errno
import json
import logging
import mimetypes
import os
import shutil
import stat
import tempfile
import time as _time
import uuid
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from fskit.config.settings import JSON_INDENT, STUB_EXTENSION, TEMPLATE_EXTENSION
from fskit.shared.directory_entry import split_name

from .events import FilesystemEvent, log_event

StrPath = str | os.PathLike[str]

_JSON_SUFFIX = ".json"
_SNIFF_BYTES = 2048
_ENCODING = "utf-8"
_ENCODING_ERRORS = "surrogateescape"


def _with_suffix(filename: StrPath, extension: str) -> str:
    """Append ``.extension`` unless ``filename`` already ends with it."""

    name = os.fspath(filename)
    suffix = "." + extension.lstrip(".")
    if not name.endswith(suffix):
        name += suffix
    return name


# Existence and metadata ------------------------------------------------------


def exists(filename: StrPath) -> bool:
    """Return whether anything exists at ``filename``."""

    return os.path.exists(filename)


def is_file(path: StrPath) -> bool:
    return os.path.isfile(path)


def size(path: StrPath) -> int:
    """Return the size in bytes, or ``0`` when ``path`` cannot be stat-ed."""

    try:
        return os.stat(path).st_size
    except OSError as exc:
        log_event(logging.DEBUG, FilesystemEvent.STAT_FAILED, "Cannot read size", path=path, error=exc)
        return 0


def last_modified(path: StrPath) -> int:
    """Return the modification time in epoch seconds, or ``0`` when unavailable.

    Every call stats the file again, so changes made just before are visible.
    """

    try:
        return int(os.stat(path).st_mtime)
    except OSError as exc:
        log_event(
            logging.DEBUG, FilesystemEvent.STAT_FAILED, "Cannot read modification time", path=path, error=exc
        )
        return 0


def file_type(path: StrPath) -> str:
    """Return the OS file type of ``path`` without following links.

    One of ``file``, ``dir``, ``link``, ``fifo``, ``char``, ``block``,
    ``socket`` or ``unknown``; an empty string when the path does not exist.
    """

    try:
        mode = os.lstat(path).st_mode
    except OSError:
        return ""
    if stat.S_ISLNK(mode):
        return "link"
    if stat.S_ISDIR(mode):
        return "dir"
    if stat.S_ISREG(mode):
        return "file"
    if stat.S_ISFIFO(mode):
        return "fifo"
    if stat.S_ISCHR(mode):
        return "char"
    if stat.S_ISBLK(mode):
        return "block"
    if stat.S_ISSOCK(mode):
        return "socket"
    return "unknown"


def mime_type(path: StrPath) -> str:
    """Best-effort MIME type of ``path``; an empty string when it cannot be read.

    Empty files report ``inode/x-empty`` and directories ``inode/directory``.
    Other files are guessed from their name first, then sniffed as UTF-8 text
    or binary.
    """

    target = os.fspath(path)
    try:
        info = os.stat(target)
    except OSError:
        return ""
    if stat.S_ISDIR(info.st_mode):
        return "inode/directory"
    if not stat.S_ISREG(info.st_mode):
        return ""
    if info.st_size == 0:
        return "inode/x-empty"

    guessed, _ = mimetypes.guess_type(target)
    if guessed:
        return guessed

    try:
        with open(target, "rb") as handle:
            head = handle.read(_SNIFF_BYTES)
    except OSError:
        return ""
    if b"\x00" in head:
        return "application/octet-stream"
    try:
        _ = codecs.getincrementaldecoder("utf-8")().decode(head, final=False)
    except UnicodeDecodeError:
        return "application/octet-stream"
    return "text/plain"


# Path decomposition ----------------------------------------------------------


def basename(path: StrPath) -> str:
    """Return the last path component, ignoring trailing slashes."""

    value = os.fspath(path)
    stripped = value.rstrip("/")
    if not stripped:
        return ""
    return stripped.rsplit("/", 1)[-1]


def name(path: StrPath) -> str:
    """Return the base name without its last extension."""

    return split_name(basename(path))[0]


def extension(path: StrPath) -> str:
    """Return the text after the last dot of the base name."""

    return split_name(basename(path))[1]


def dirname(path: StrPath) -> str:
    """Return the parent portion of ``path``; ``.`` when there is none."""

    value = os.fspath(path).rstrip("/")
    if "/" not in value:
        return "/" if os.fspath(path).startswith("/") else "."
    parent = value.rsplit("/", 1)[0]
    return parent or "/"


# Whole-content access --------------------------------------------------------


def read(filename: StrPath, default: str = "") -> str:
    """Return the file contents, or ``default`` when the file is missing.

    Bytes that are not valid UTF-8 are kept as surrogate escapes, so writing
    the text back reproduces the original bytes.
    """

    if not exists(filename):
        return default
    return Path(filename).read_bytes().decode(_ENCODING, _ENCODING_ERRORS)


def write(filename: StrPath, content: str) -> int:
    """Replace the file contents and return the number of bytes written."""

    data = content.encode(_ENCODING, _ENCODING_ERRORS)
    _ = Path(filename).write_bytes(data)
    return len(data)


def append(filename: StrPath, content: str) -> int:
    """Append ``content`` to the file, creating it when missing."""

    data = content.encode(_ENCODING, _ENCODING_ERRORS)
    with open(filename, "ab") as handle:
        return handle.write(data)


def prepend(filename: StrPath, content: str) -> int:
    """Write ``content`` in front of the existing contents."""

    if exists(filename):
        return write(filename, content + read(filename))
    return write(filename, content)


def touch(filename: StrPath, time: float | None = None) -> None:
    """Create ``filename`` when missing and set its access and modification time."""

    stamp = _time.time() if time is None else time
    Path(filename).touch()
    os.utime(filename, (stamp, stamp))


def temp_filename(path: StrPath = "", prefix: str = "", extension: str = "") -> str:
    """Return a unique file name inside ``path`` (the temp directory when empty).

    The file is created when ``path`` is an existing directory.
    """

    directory = os.fspath(path) or tempfile.gettempdir()
    if extension and not extension.startswith("."):
        extension = "." + extension
    filename = f"{directory.rstrip('/')}/{prefix}{uuid.uuid4().hex}{extension}"
    if os.path.isdir(directory):
        touch(filename)
    return filename


# Line-oriented access --------------------------------------------------------


def read_lines(filename: StrPath, default: Sequence[str] | None = None) -> list[str]:
    """Return the lines of the file with carriage returns removed.

    ``default`` (an empty list when omitted) is returned when the file is
    missing or holds only whitespace.
    """

    content = read(filename).replace("\r", "")
    if content.strip() != "":
        return content.split("\n")
    return list(default) if default is not None else []


def write_lines(filename: StrPath, lines: Sequence[str], separator: str = "\n") -> int:
    return write(filename, separator.join(lines))


def prepend_lines(filename: StrPath, lines: Sequence[str], separator: str = "\n") -> int:
    """Write ``lines`` followed by the lines already in the file."""

    if exists(filename):
        return write_lines(filename, [*lines, *read_lines(filename)], separator)
    return write_lines(filename, lines, separator)


def append_lines(filename: StrPath, lines: Sequence[str], separator: str = "\n") -> int:
    """Write the lines already in the file followed by ``lines``."""

    if exists(filename):
        return write_lines(filename, [*read_lines(filename), *lines], separator)
    return write_lines(filename, lines, separator)


# Templates -------------------------------------------------------------------


def read_template(
    filename: StrPath,
    tokens: Mapping[str, object] | None = None,
    default_content: str = "",
    extension: str | None = None,
) -> str:
    """Load a template and replace each ``{token}`` with its value.

    The template extension (``tpl`` unless configured otherwise) is appended
    when ``filename`` lacks it. Replacement is plain substring substitution,
    one token at a time; unknown placeholders are left untouched.
    """

    target = _with_suffix(filename, extension or TEMPLATE_EXTENSION)
    if not exists(target):
        return default_content

    template = read(target, default_content)
    if template and tokens:
        for token, value in tokens.items():
            template = template.replace("{" + token + "}", str(value))
    return template


def read_stub(
    filename: StrPath,
    tokens: Mapping[str, object] | None = None,
    default_content: str = "",
) -> str:
    """Same as :func:`read_template` using the stub extension."""

    return read_template(filename, tokens, default_content, STUB_EXTENSION)


# JSON ------------------------------------------------------------------------


def read_json(filename: StrPath, default: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Load a JSON object from ``filename`` (``.json`` appended when missing).

    ``default`` is returned for a missing or empty file. Malformed content and
    top-level values other than an object yield an empty dict.
    """

    target = _with_suffix(filename, _JSON_SUFFIX)
    if not exists(target):
        return dict(default) if default is not None else {}
    try:
        content = Path(target).read_bytes().decode(_ENCODING)
    except UnicodeDecodeError as exc:
        log_event(
            logging.DEBUG,
            FilesystemEvent.JSON_DECODE_FAILED,
            "JSON file is not UTF-8",
            path=target,
            error=exc,
        )
        return {}
    if content == "":
        return dict(default) if default is not None else {}

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        log_event(
            logging.DEBUG,
            FilesystemEvent.JSON_DECODE_FAILED,
            "Invalid JSON ignored",
            path=target,
            error=exc,
        )
        return {}
    if not isinstance(data, dict):
        return {}
    return data


def write_json(filename: StrPath, data: Mapping[str, Any], pretty_print: bool = True) -> None:
    """Serialize ``data`` to ``filename`` (``.json`` appended when missing).

    Slashes are written unescaped; pretty printing indents nested values.
    """

    target = _with_suffix(filename, _JSON_SUFFIX)
    if pretty_print:
        payload = json.dumps(data, indent=JSON_INDENT, ensure_ascii=False)
    else:
        payload = json.dumps(data, ensure_ascii=False, separators=(",", ":"))
    _ = write(target, payload)


# Best-effort mutations -------------------------------------------------------


def delete(filename: StrPath) -> bool:
    """Remove ``filename``; failures are logged and reported as ``False``."""

    try:
        os.unlink(filename)
    except OSError as exc:
        log_event(
            logging.DEBUG,
            FilesystemEvent.FILE_DELETE_FAILED,
            "Cannot delete file",
            path=filename,
            error=exc,
        )
        return False
    return True


def copy(filename: StrPath, path: StrPath) -> bool:
    """Copy ``filename`` into directory ``path`` under its own base name."""

    destination = f"{os.fspath(path)}/{basename(filename)}"
    try:
        _ = shutil.copyfile(filename, destination)
    except OSError as exc:
        log_event(
            logging.DEBUG,
            FilesystemEvent.FILE_COPY_FAILED,
            "Cannot copy file",
            path=filename,
            error=exc,
        )
        return False
    return True


def _move_across_devices(filename: StrPath, destination: str) -> bool:
    try:
        _ = shutil.move(os.fspath(filename), destination)
    except OSError as exc:
        log_event(
            logging.DEBUG,
            FilesystemEvent.FILE_MOVE_FAILED,
            "Cannot move file across devices",
            path=filename,
            error=exc,
        )
        return False
    return True


def move(filename: StrPath, path: StrPath) -> bool:
    """Rename ``filename`` into directory ``path`` under its own base name.

    An existing file at the destination is replaced; an existing directory
    there is a failure. Cross-device moves fall back to copy and delete.
    """

    destination = f"{os.fspath(path)}/{basename(filename)}"
    if not os.path.isdir(path) or os.path.isdir(destination):
        log_event(
            logging.DEBUG,
            FilesystemEvent.FILE_MOVE_FAILED,
            "Cannot move file, destination is not a usable directory",
            path=filename,
        )
        return False
    try:
        os.replace(filename, destination)
    except OSError as exc:
        if exc.errno == errno.EXDEV:
            return _move_across_devices(filename, destination)
        log_event(
            logging.DEBUG,
            FilesystemEvent.FILE_MOVE_FAILED,
            "Cannot move file",
            path=filename,
            error=exc,
        )
        return False
    return True


__all__ = [
    "append",
    "append_lines",
    "basename",
    "copy",
    "delete",
    "dirname",
    "exists",
    "extension",
    "file_type",
    "is_file",
    "last_modified",
    "mime_type",
    "move",
    "name",
    "prepend",
    "prepend_lines",
    "read",
    "read_json",
    "read_lines",
    "read_stub",
    "read_template",
    "size",
    "temp_filename",
    "touch",
    "write",
    "write_json",
    "write_lines",
]
