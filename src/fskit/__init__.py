"""fskit: convenience wrappers around filesystem primitives.

Typical use::

    from fskit import directories, files, JsonDocument

    files.write_json("settings", {"name": "demo"})
    for entry in directories.entries("build", "*.txt", recursive=True):
        print(entry.level, entry.full_path)
"""

from fskit.documents import JsonDocument
from fskit.platform.filesystem import directories, files
from fskit.shared import DirectoryEntry, EntryType

__version__ = "0.1.0"

__all__ = [
    "DirectoryEntry",
    "EntryType",
    "JsonDocument",
    "__version__",
    "directories",
    "files",
]
