"""
Walk data models.

ResultCollection keeps its own capacity bookkeeping on top of a list so
growth stays geometric and bounded by an optional entry ceiling.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Set

from .errors import OutOfMemoryError, ReduseError

LOGGER_NAME = "reduse.models"
logger = logging.getLogger(LOGGER_NAME)

GROWTH_FACTOR = 2


class EntryKind(Enum):
    REGULAR_FILE = "regular_file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(frozen=True)
class DirectoryEntry:
    name: str
    kind: EntryKind
    path: str

    @classmethod
    def from_dir_entry(cls, entry: os.DirEntry) -> "DirectoryEntry":
        """
        Classify an os.DirEntry without following symlinks.

        Raises:
            OSError if the entry type has to be looked up and the lookup fails
        """
        if entry.is_file(follow_symlinks=False):
            kind = EntryKind.REGULAR_FILE
        elif entry.is_dir(follow_symlinks=False):
            kind = EntryKind.DIRECTORY
        else:
            kind = EntryKind.OTHER
        return cls(name=entry.name, kind=kind, path=entry.path)


class ResultCollection:
    """
    Ordered, growable sequence of discovered file paths.

    Capacity is always >= length. When an append would exceed capacity the
    capacity is multiplied by GROWTH_FACTOR (clamped to max_entries when one
    is set). Growing past max_entries, or running out of memory while
    storing a path, raises OutOfMemoryError and leaves stored paths intact.
    """

    def __init__(
        self,
        *,
        initial_capacity: int = 10,
        max_entries: Optional[int] = None,
    ) -> None:
        if initial_capacity < 0:
            raise ValueError("initial_capacity must not be negative")

        self.max_entries = max_entries
        self._capacity = initial_capacity
        if max_entries is not None:
            self._capacity = min(self._capacity, max_entries)

        self._paths: List[str] = []
        self._seen: Set[str] = set()
        self.growth_count = 0
        self.failures: List[ReduseError] = []

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)

    def __getitem__(self, index: int) -> str:
        return self._paths[index]

    def __contains__(self, path: object) -> bool:
        return path in self._seen

    def __repr__(self) -> str:
        return (
            f"ResultCollection(length={len(self._paths)}, "
            f"capacity={self._capacity}, failures={len(self.failures)})"
        )

    @property
    def capacity(self) -> int:
        return self._capacity

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def append(self, path: str) -> bool:
        """
        Append a path, growing capacity if needed.

        Returns False when the path is already present.
        """
        if path in self._seen:
            logger.debug("Skipping duplicate path %s", path)
            return False

        if len(self._paths) >= self._capacity:
            self._grow()

        try:
            self._paths.append(path)
            self._seen.add(path)
        except MemoryError as exc:
            if len(self._paths) > len(self._seen):
                self._paths.pop()
            raise OutOfMemoryError(
                f"Unable to store path {path}: out of memory"
            ) from exc

        return True

    def extend(self, paths: Iterable[str]) -> int:
        """
        Append each path in order. Returns the number actually added.
        """
        added = 0
        for path in paths:
            if self.append(path):
                added += 1
        return added

    def record_failure(self, error: ReduseError) -> None:
        self.failures.append(error)

    def as_list(self) -> List[str]:
        return list(self._paths)

    def _grow(self) -> None:
        new_capacity = max(1, self._capacity * GROWTH_FACTOR)

        if self.max_entries is not None:
            if len(self._paths) >= self.max_entries:
                raise OutOfMemoryError(
                    f"Result collection is full ({self.max_entries} entries)"
                )
            new_capacity = min(new_capacity, self.max_entries)

        logger.debug(
            "Growing result collection from %d to %d entries",
            self._capacity,
            new_capacity,
        )
        self._capacity = new_capacity
        self.growth_count += 1
