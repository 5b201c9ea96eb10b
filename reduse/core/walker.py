"""
Tree Walker

Depth-first traversal of a workspace directory that gathers regular-file
paths into a single ResultCollection. Traversal keeps an explicit stack of
pending entries, so tree depth is bounded by the filesystem, not by the
interpreter's recursion limit. Each directory handle is closed as soon as
that directory has been enumerated.

Ordering: paths appear in the order the operating system enumerates
directory entries. A subdirectory's paths are inserted at the point where
the subdirectory entry was met, so identical enumeration order always gives
an identical result.

Failure policy:
    - the root directory cannot be opened or read: DirectoryUnreadableError
      is raised and no collection is returned
    - a descendant directory cannot be opened or read: the failure is logged,
      recorded on the collection, and that subtree is skipped
    - an entry's type cannot be determined: EntryUnreadableError is logged
      and recorded, and that entry is skipped
    - the collection cannot grow: OutOfMemoryError aborts the whole walk
    - a directory handle fails to close: logged and recorded only
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, Iterator, List, Optional

from .config import WalkerConfiguration
from .errors import DirectoryUnreadableError, EntryUnreadableError, HandleCloseError
from .filters import FilterDecision, PathFilter
from .models import DirectoryEntry, ResultCollection

LOGGER_NAME = "reduse.walker"
logger = logging.getLogger(LOGGER_NAME)


def _describe(exc: OSError) -> str:
    return exc.strerror or str(exc)


class TreeWalker:
    def __init__(
        self,
        path_filter: Optional[PathFilter] = None,
        config: Optional[WalkerConfiguration] = None,
    ) -> None:
        self.config = config or WalkerConfiguration()

        config_errors = self.config.validate()
        if config_errors:
            raise ValueError(
                "Invalid walker configuration: " + "; ".join(config_errors)
            )

        self.path_filter = path_filter or PathFilter(
            self.config.recognized_extensions
        )

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def walk(self, root: str) -> ResultCollection:
        """
        Collect every regular file below root.

        Raises:
            DirectoryUnreadableError if root cannot be opened or read
            OutOfMemoryError if the result collection cannot grow
        """
        root = os.fspath(root)
        result = ResultCollection(
            initial_capacity=self.config.initial_capacity,
            max_entries=self.config.max_entries,
        )

        logger.debug("Walking %s", root)
        self._walk_tree(root, result)
        logger.info(
            "Walk of %s complete: %d files, %d failures",
            root,
            len(result),
            len(result.failures),
        )
        return result

    # -------------------------------------------------------------------------
    # Traversal
    # -------------------------------------------------------------------------

    def _walk_tree(self, root: str, result: ResultCollection) -> None:
        # one pending-entries iterator per directory level; no handle stays
        # open while a subdirectory is being read
        stack: List[Iterator[DirectoryEntry]] = [
            iter(self._read_directory(root, result, is_root=True))
        ]

        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue

            decision = self.path_filter.decide(entry)

            if decision is FilterDecision.INCLUDE:
                result.append(entry.path)
            elif decision is FilterDecision.RECURSE:
                children = self._read_directory(entry.path, result, is_root=False)
                if children:
                    stack.append(iter(children))

    def _read_directory(
        self,
        directory: str,
        result: ResultCollection,
        *,
        is_root: bool,
    ) -> List[DirectoryEntry]:
        """
        Enumerate one directory and release its handle.

        A descendant that fails partway keeps the entries read before the
        failure.
        """
        entries: List[DirectoryEntry] = []

        try:
            handle = os.scandir(directory)
        except OSError as exc:
            self._unreadable(directory, exc, result, is_root=is_root)
            return entries

        try:
            for dir_entry in handle:
                entry = self._classify(dir_entry, result)
                if entry is not None:
                    entries.append(entry)
        except OSError as exc:
            self._unreadable(directory, exc, result, is_root=is_root)
        finally:
            self._close(handle, directory, result)

        return entries

    def _classify(
        self,
        dir_entry: os.DirEntry,
        result: ResultCollection,
    ) -> Optional[DirectoryEntry]:
        try:
            return DirectoryEntry.from_dir_entry(dir_entry)
        except OSError as exc:
            error = EntryUnreadableError(dir_entry.path, _describe(exc))
            logger.warning("Skipping unreadable entry %s: %s", dir_entry.path, error.reason)
            result.record_failure(error)
            return None

    def _unreadable(
        self,
        directory: str,
        exc: OSError,
        result: ResultCollection,
        *,
        is_root: bool,
    ) -> None:
        error = DirectoryUnreadableError(directory, _describe(exc))
        if is_root:
            raise error from exc

        logger.warning("Skipping unreadable directory %s: %s", directory, error.reason)
        result.record_failure(error)

    def _close(self, handle, directory: str, result: ResultCollection) -> None:
        try:
            handle.close()
        except OSError as exc:
            error = HandleCloseError(directory, _describe(exc))
            logger.error("Error closing %s: %s", directory, error.reason)
            result.record_failure(error)


def walk(
    root: str,
    recognized_extensions: Optional[Iterable[str]] = None,
    config: Optional[WalkerConfiguration] = None,
) -> ResultCollection:
    """
    Convenience wrapper around TreeWalker.walk.
    """
    config = config or WalkerConfiguration()
    if recognized_extensions is None:
        recognized_extensions = config.recognized_extensions
    walker = TreeWalker(PathFilter(recognized_extensions), config)
    return walker.walk(root)
