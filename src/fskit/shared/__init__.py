# Where: fskit.shared.__init__
# What: Provide a concise import surface for shared value objects.
# Why: Let the walker, documents, and callers agree on one entry type.

"""Shared value objects exposed at the package level."""

from .directory_entry import ALL_ENTRY_TYPES, DirectoryEntry, EntryType, split_name

__all__ = ["ALL_ENTRY_TYPES", "DirectoryEntry", "EntryType", "split_name"]
