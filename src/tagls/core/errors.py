"""Fault kinds raised while resolving paths and reading tags.

Every fatal fault derives from ListingError and carries the path it concerns.
NotAudioFormat is the extractor's "no tag here" signal; the walker decides
whether it is fatal.
"""

from __future__ import annotations


class ListingError(Exception):
    """Base class for faults that abort a listing."""

    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path


class InvalidPath(ListingError):
    """Raised when an argument is neither an existing file nor a directory."""

    def __init__(self, path: str):
        super().__init__(path, f"cannot access {path!r}: no such file or directory")


class ReadFault(ListingError):
    """Raised when the filesystem fails to list, stat or open a path."""

    def __init__(self, path: str, error: OSError):
        reason = error.strerror or str(error)
        super().__init__(path, f"attempting to read {path!r} resulted in an error: {reason}")
        self.error = error


class TagReadFault(ListingError):
    """Raised when a candidate file's tag cannot be read or parsed."""

    def __init__(self, path: str, reason: str):
        super().__init__(path, f"attempting to read {path!r} resulted in an error: {reason}")
        self.reason = reason


class NotAudioFormat(Exception):
    """Raised by the tag reader when a file carries no ID3 tag at all."""

    def __init__(self, path: str, reason: str = "no ID3 tag found"):
        super().__init__(reason)
        self.path = path
        self.reason = reason
