"""
Summary: Value objects describing children discovered during a directory walk.
Why: Give the walker and its callers one typed record instead of loose dicts.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType


class EntryType(StrEnum):
    """Kinds of directory entries, used as filters and as ``entry_type``."""

    DIRECTORY = "dir"
    LINK = "link"
    FILE = "file"


ALL_ENTRY_TYPES: frozenset[EntryType] = frozenset(EntryType)


def split_name(basename: str) -> tuple[str, str]:
    """Split a base name into ``(stem, extension)`` on the last dot.

    ``"archive.tar.gz"`` gives ``("archive.tar", "gz")`` and a name without a
    dot has an empty extension.
    """

    if "." not in basename:
        return basename, ""
    stem, _, extension = basename.rpartition(".")
    return stem, extension


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """One child of a walked directory.

    Attributes:
        name: Base name of the entry.
        path: Containing directory, as supplied to the walk (not canonicalized).
        root: Path given to the outermost walk call.
        basename: Same as ``name``.
        stem: File name without its last extension.
        extension: Text after the last dot, empty when there is none.
        modified: Modification time in epoch seconds, ``0`` for links.
        entry_type: Directory, link, or plain file.
        level: Depth below ``root``; ``0`` for direct children.
        attributes: Caller-supplied extras attached to every entry of a walk.
    """

    name: str
    path: str
    root: str
    basename: str
    stem: str
    extension: str
    modified: int
    entry_type: EntryType
    level: int
    attributes: Mapping[str, object] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def full_path(self) -> str:
        """Location of the entry itself, joined with a forward slash."""

        return f"{self.path.rstrip('/')}/{self.name}"

    @property
    def is_directory(self) -> bool:
        return self.entry_type is EntryType.DIRECTORY

    @property
    def is_link(self) -> bool:
        return self.entry_type is EntryType.LINK


__all__ = ["ALL_ENTRY_TYPES", "DirectoryEntry", "EntryType", "split_name"]
