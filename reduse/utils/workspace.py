"""
Workspace path helpers

Normalization and validation applied to the workspace argument before it is
handed to the walker. The walker itself expects a clean, resolved path.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from reduse.core.config import DEFAULT_MAX_PATH_LENGTH
from reduse.core.errors import DirectoryUnreadableError, InvalidWorkspaceError

LOGGER_NAME = "reduse.workspace"
logger = logging.getLogger(LOGGER_NAME)

PATH_SEPARATORS = ("/", "\\")


# =============================================================================
# Normalization
# =============================================================================

def strip_trailing_separator(path: str) -> str:
    """
    Remove a single trailing path separator.

    The filesystem root and bare drive roots (e.g. "C:\\") are left alone.
    """
    if len(path) <= 1 or path[-1] not in PATH_SEPARATORS:
        return path

    stripped = path[:-1]
    if stripped.endswith(":"):
        return path
    return stripped


def resolve_workspace_path(path: str, *, cwd: Optional[str] = None) -> str:
    """
    Make a relative workspace path absolute using the working directory.
    """
    if os.path.isabs(path):
        return path

    base = cwd if cwd is not None else os.getcwd()
    if path == ".":
        return base
    return os.path.join(base, path)


def normalize_workspace_path(
    raw: str,
    *,
    max_path_length: int = DEFAULT_MAX_PATH_LENGTH,
    cwd: Optional[str] = None,
) -> str:
    """
    Validate and normalize a workspace argument.

    Args:
        raw: Path as given on the command line
        max_path_length: Longest accepted path, checked before and after
            resolution
        cwd: Working directory used for relative paths (defaults to the
            process working directory)

    Raises:
        InvalidWorkspaceError if the path is empty or too long
    """
    if not raw:
        raise InvalidWorkspaceError("Workspace path must not be empty")

    if len(raw) > max_path_length:
        raise InvalidWorkspaceError(
            f"Workspace path exceeds {max_path_length} characters"
        )

    resolved = resolve_workspace_path(strip_trailing_separator(raw), cwd=cwd)

    if len(resolved) > max_path_length:
        raise InvalidWorkspaceError(
            f"Resolved workspace path exceeds {max_path_length} characters: {resolved}"
        )

    logger.debug("Workspace %r normalized to %s", raw, resolved)
    return resolved


# =============================================================================
# Validation
# =============================================================================

def confirm_directory(path: str) -> None:
    """
    Ensure the workspace can be opened as a directory.

    Raises:
        DirectoryUnreadableError if the directory cannot be opened
    """
    try:
        with os.scandir(path):
            pass
    except OSError as exc:
        raise DirectoryUnreadableError(path, exc.strerror or str(exc)) from exc
