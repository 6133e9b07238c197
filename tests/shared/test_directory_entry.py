"""Tests for directory entry value objects."""

from __future__ import annotations

import pytest

from fskit.shared import ALL_ENTRY_TYPES, DirectoryEntry, EntryType, split_name


@pytest.mark.parametrize(
    ("basename", "expected"),
    [
        ("a.txt", ("a", "txt")),
        ("archive.tar.gz", ("archive.tar", "gz")),
        ("README", ("README", "")),
        ("trailing.", ("trailing", "")),
        (".bashrc", ("", "bashrc")),
    ],
)
def test_split_name(basename: str, expected: tuple[str, str]) -> None:
    assert split_name(basename) == expected


def test_entry_type_values() -> None:
    assert EntryType.DIRECTORY == "dir"
    assert EntryType.LINK == "link"
    assert EntryType.FILE == "file"
    assert ALL_ENTRY_TYPES == {EntryType.DIRECTORY, EntryType.LINK, EntryType.FILE}


def test_full_path_joins_with_single_slash() -> None:
    entry = DirectoryEntry(
        name="b.txt",
        path="/tmp/a/",
        root="/tmp/a/",
        basename="b.txt",
        stem="b",
        extension="txt",
        modified=0,
        entry_type=EntryType.FILE,
        level=0,
    )

    assert entry.full_path == "/tmp/a/b.txt"
    assert entry.attributes == {}
    assert entry.is_directory is False
    assert entry.is_link is False
