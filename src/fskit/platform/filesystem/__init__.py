# Where: fskit.platform.filesystem.__init__
# What: Expose the file and directory helper modules under one import path.
# Why: Callers use ``files.read(...)`` / ``directories.delete(...)`` namespaces.

"""Filesystem helpers grouped by the object they operate on."""

from . import directories, files
from .events import FilesystemEvent, log_event

__all__ = ["FilesystemEvent", "directories", "files", "log_event"]
