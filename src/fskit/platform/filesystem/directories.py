"""
Summary: Directory checks, creation, filtered recursive walks, and recursive deletion.
Why: Callers get typed entries and best-effort removal without handling OS errors.
"""

# Where: src/fskit/platform/filesystem/directories.py
# What: Stateless functions operating on a directory subtree.
# Assumptions: - Paths are joined with "/" and never canonicalized.
# Trade-offs: - Walk order follows the OS iteration order and is not sorted.

from __future__ import annotations

import fnmatch
import logging
import os
import tempfile
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from fskit.config.settings import DEFAULT_DIRECTORY_MODE
from fskit.shared.directory_entry import ALL_ENTRY_TYPES, DirectoryEntry, EntryType, split_name

from . import files
from .events import FilesystemEvent, log_event

StrPath = str | os.PathLike[str]
EntryTypes = EntryType | str | Iterable[EntryType | str]


def exists(path: StrPath) -> bool:
    """Return whether ``path`` is an existing directory."""

    return os.path.isdir(path)


def is_directory(path: StrPath) -> bool:
    return os.path.isdir(path)


def is_writable(path: StrPath) -> bool:
    """Return whether ``path`` is a directory the current user may write to."""

    return os.path.isdir(path) and os.access(path, os.W_OK)


def create(path: StrPath, mode: int | None = None) -> None:
    """Create ``path`` and its missing parents; an existing directory is left alone.

    ``mode`` defaults to the configured directory mode and is subject to the
    process umask.
    """

    if os.path.isdir(path):
        return
    os.makedirs(path, DEFAULT_DIRECTORY_MODE if mode is None else mode, exist_ok=True)
    log_event(logging.DEBUG, FilesystemEvent.DIRECTORY_CREATE, "Created directory", path=path)


def temp_directory() -> str:
    return tempfile.gettempdir()


def _normalize_types(types: EntryTypes | None) -> frozenset[EntryType]:
    if types is None:
        return ALL_ENTRY_TYPES
    if isinstance(types, str):
        return frozenset({EntryType(types)})
    selected = frozenset(EntryType(kind) for kind in types)
    return selected or ALL_ENTRY_TYPES


def _classify(child: os.DirEntry[str]) -> EntryType:
    # Directory first: a link to a directory reports as a directory.
    if child.is_dir():
        return EntryType.DIRECTORY
    if child.is_symlink():
        return EntryType.LINK
    return EntryType.FILE


def _modified(child: os.DirEntry[str]) -> int:
    try:
        return int(child.stat().st_mtime)
    except OSError as exc:
        log_event(logging.DEBUG, FilesystemEvent.STAT_FAILED, "Cannot stat entry", path=child.path, error=exc)
        return 0


def _walk(
    path: str,
    root: str,
    level: int,
    *,
    pattern: str,
    types: frozenset[EntryType],
    recursive: bool,
    attributes: Mapping[str, object],
    include_hidden: bool,
) -> list[DirectoryEntry]:
    """Collect the children of ``path`` in pre-order, ``level`` deep below ``root``."""

    base = path.rstrip("/") or path
    collected: list[DirectoryEntry] = []
    try:
        with os.scandir(base) as children:
            for child in children:
                entry_name = child.name
                if not include_hidden and entry_name.startswith("."):
                    continue
                if not fnmatch.fnmatchcase(entry_name, pattern):
                    continue

                entry_type = _classify(child)
                stem, suffix = split_name(entry_name)
                entry = DirectoryEntry(
                    name=entry_name,
                    path=path,
                    root=root,
                    basename=entry_name,
                    stem=stem,
                    extension=suffix,
                    modified=0 if entry_type is EntryType.LINK else _modified(child),
                    entry_type=entry_type,
                    level=level,
                    attributes=attributes,
                )
                if entry_type in types:
                    collected.append(entry)

                if recursive and entry_type is EntryType.DIRECTORY:
                    collected.extend(
                        _walk(
                            entry.full_path,
                            root,
                            level + 1,
                            pattern=pattern,
                            types=types,
                            recursive=recursive,
                            attributes=attributes,
                            include_hidden=include_hidden,
                        )
                    )
    except OSError as exc:
        log_event(
            logging.DEBUG,
            FilesystemEvent.DIRECTORY_SCAN_FAILED,
            "Cannot read directory",
            path=path,
            error=exc,
        )
    return collected


def entries(
    path: StrPath | None,
    pattern: str = "*",
    types: EntryTypes | None = None,
    recursive: bool = False,
    *,
    attributes: Mapping[str, object] | None = None,
) -> list[DirectoryEntry]:
    """List the children of ``path`` matching ``pattern``.

    Args:
        path: Directory to walk. ``None`` or a non-directory gives ``[]``.
        pattern: Shell glob (``*``, ``?``, ``[...]``) matched case-sensitively
            against bare names. Names starting with ``.`` are always skipped,
            and a directory that does not match is not descended into.
        types: Entry kinds to return; empty or ``None`` means all kinds.
            Directories are still descended into when excluded here.
        recursive: Walk subdirectories depth-first, each directory's subtree
            following its own entry.
        attributes: Extra values attached to every entry of the walk.

    Returns:
        list[DirectoryEntry]: Entries in OS iteration order, ``level``
        counted from ``path``.
    """

    if path is None:
        return []
    root = os.fspath(path)
    if not os.path.isdir(root):
        return []

    return _walk(
        root,
        root,
        0,
        pattern=pattern,
        types=_normalize_types(types),
        recursive=recursive,
        attributes=MappingProxyType(dict(attributes or {})),
        include_hidden=False,
    )


def _remove_directory(path: str) -> None:
    try:
        os.rmdir(path)
    except OSError as exc:
        # Non-fatal: delete() reports success once its guards pass.
        log_event(
            logging.DEBUG,
            FilesystemEvent.DIRECTORY_REMOVE_FAILED,
            "Cannot remove directory",
            path=path,
            error=exc,
        )


def _delete_contents(path: str) -> None:
    children = _walk(
        path,
        path,
        0,
        pattern="*",
        types=ALL_ENTRY_TYPES,
        recursive=False,
        attributes=MappingProxyType({}),
        include_hidden=True,
    )
    for entry in children:
        target = entry.full_path
        if entry.is_directory and not os.path.islink(target):
            _delete_contents(target)
            _remove_directory(target)
        else:
            # Links are removed, never followed.
            _ = files.delete(target)


def delete(path: StrPath | None, preserve_root: bool = False) -> bool:
    """Recursively delete the directory ``path``.

    Refuses (``False``, no I/O) when ``path`` is missing, blank, or the
    filesystem root, and returns ``False`` when it is not a directory.
    Otherwise every descendant, hidden ones included, is removed on a
    best-effort basis and ``True`` is returned even if some removals failed.

    Args:
        path: Directory to delete.
        preserve_root: Keep ``path`` itself and only empty it.
    """

    if path is None:
        log_event(
            logging.WARNING,
            FilesystemEvent.DIRECTORY_DELETE_REFUSED,
            "Refusing to delete without a path",
        )
        return False
    target = os.fspath(path)
    if target.strip().rstrip("/") == "":
        log_event(
            logging.WARNING,
            FilesystemEvent.DIRECTORY_DELETE_REFUSED,
            "Refusing to delete a blank or root path",
            path=target,
        )
        return False
    if not os.path.isdir(target):
        return False

    _delete_contents(target)
    if not preserve_root:
        _remove_directory(target)

    log_event(
        logging.INFO,
        FilesystemEvent.DIRECTORY_DELETE,
        "Cleaned directory" if preserve_root else "Deleted directory",
        path=target,
    )
    return True


def clean(path: StrPath | None) -> bool:
    """Empty ``path`` while keeping the directory itself."""

    return delete(path, preserve_root=True)


__all__ = [
    "clean",
    "create",
    "delete",
    "entries",
    "exists",
    "is_directory",
    "is_writable",
    "temp_directory",
]
