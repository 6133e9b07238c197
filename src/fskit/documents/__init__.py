"""Document wrappers persisted through the filesystem helpers."""

from .json_document import JsonDocument

__all__ = ["JsonDocument"]
