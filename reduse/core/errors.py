"""
Error taxonomy for workspace walking.

Root-level directory failures and collection growth failures are raised to
the caller. Descendant directory failures and handle close failures are
recorded on the result collection and the walk carries on.
"""

from __future__ import annotations


# =============================================================================
# Exceptions
# =============================================================================

class ReduseError(Exception):
    """
    Base exception for Reduse errors.
    """


class DirectoryUnreadableError(ReduseError):
    """
    Raised when a directory cannot be opened or enumerated.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Error opening directory {path}: {reason}")


class HandleCloseError(ReduseError):
    """
    Reported when a directory handle fails to close.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Error closing directory {path}: {reason}")


class EntryUnreadableError(ReduseError):
    """
    Reported when the type of a directory entry cannot be determined.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Error reading entry {path}: {reason}")


class OutOfMemoryError(ReduseError):
    """
    Raised when the result collection cannot grow to hold a new entry.
    """


class InvalidWorkspaceError(ReduseError):
    """
    Raised when a workspace path is empty, too long, or not a directory.
    """
