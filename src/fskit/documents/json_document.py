"""
Summary: Key-ordered JSON document backed by a single file.
Why: Edit a JSON object in memory and persist it with a stable key layout.
"""

from __future__ import annotations

import os
from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from fskit.platform.filesystem import files

StrPath = str | os.PathLike[str]


class JsonDocument:
    """In-memory JSON object loaded from ``filename`` and saved on request.

    The file is read once at construction; a missing or malformed file gives
    an empty document. Nothing is written until :meth:`save` is called.
    """

    def __init__(self, filename: StrPath, key_order: Sequence[str] | None = None) -> None:
        self._filename = os.fspath(filename)
        self._key_order: list[str] = []
        self.set_key_order(key_order or [])
        self._data: dict[str, Any] = files.read_json(self._filename)

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def key_order(self) -> list[str]:
        return list(self._key_order)

    def exists(self) -> bool:
        """Return whether the backing file exists, regardless of in-memory state."""

        return files.exists(self._filename)

    def set_key_order(self, key_order: Sequence[str]) -> None:
        """Replace the key priority used by subsequent saves."""

        self._key_order = list(key_order)

    # Mapping access --------------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def has(self, key: str) -> bool:
        return key in self._data

    def remove(self, key: str) -> None:
        """Drop ``key`` if present."""

        _ = self._data.pop(key, None)

    def all(self) -> dict[str, Any]:
        """Return a shallow copy of the document in its current key order."""

        return dict(self._data)

    def replace(self, data: Mapping[str, Any]) -> None:
        """Swap the whole document for ``data``."""

        self._data = dict(data)

    def clear(self) -> None:
        self._data.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    # Persistence -----------------------------------------------------------

    def ordered(self) -> dict[str, Any]:
        """Return the document with ``key_order`` keys first, then the rest.

        Keys named in ``key_order`` but absent from the document are skipped.
        """

        result: dict[str, Any] = {}
        for key in self._key_order:
            if key in self._data and key not in result:
                result[key] = self._data[key]
        for key, value in self._data.items():
            if key not in result:
                result[key] = value
        return result

    def save(self) -> None:
        """Write the ordered document to the file as pretty printed JSON."""

        files.write_json(self._filename, self.ordered())


__all__ = ["JsonDocument"]
