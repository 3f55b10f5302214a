"""
Error types raised by the in-memory filesystem.
Each filesystem error carries the errno a FUSE-style caller would report.
"""
import errno
from typing import Optional


class FSError(Exception):
    """Base class for all filesystem errors."""
    errno: Optional[int] = None

    def __init__(self, message: str, node_id: Optional[int] = None):
        super().__init__(message)
        self.node_id = node_id


class NotFound(FSError):
    errno = errno.ENOENT


class NotADirectory(FSError):
    errno = errno.ENOTDIR


class NotAFile(FSError):
    errno = errno.EISDIR


class DirectoryNotEmpty(FSError):
    errno = errno.ENOTEMPTY


class InvalidMove(FSError):
    errno = errno.EINVAL


class EmptyJournal(FSError):
    """Raised by undo when nothing has been recorded."""

    def __init__(self, message: str = "journal is empty"):
        super().__init__(message)
