from enum import Enum
from pathlib import PurePath
from typing import Iterable, Optional, Tuple

from .config import SUPPORTED_FILE_EXTENSIONS
from .models import DirectoryEntry, EntryKind

SPECIAL_DIRECTORY_NAMES = (".", "..")


class FilterDecision(Enum):
    INCLUDE = "include"
    RECURSE = "recurse"
    SKIP = "skip"


def _normalize_extensions(extensions: Iterable[str]) -> Tuple[str, ...]:
    return tuple(ext.lstrip(".").lower() for ext in extensions)


class PathFilter:
    """
    Decides what the walker does with each directory entry.

    Recognized extensions are carried for reporting; they do not restrict
    which files are collected.
    """

    def __init__(self, recognized_extensions: Optional[Iterable[str]] = None):
        if recognized_extensions is None:
            recognized_extensions = SUPPORTED_FILE_EXTENSIONS
        self.recognized_extensions = _normalize_extensions(recognized_extensions)

    def decide(self, entry: DirectoryEntry) -> FilterDecision:
        if entry.name in SPECIAL_DIRECTORY_NAMES:
            return FilterDecision.SKIP
        if entry.kind is EntryKind.REGULAR_FILE:
            return FilterDecision.INCLUDE
        if entry.kind is EntryKind.DIRECTORY:
            return FilterDecision.RECURSE
        return FilterDecision.SKIP

    def is_recognized(self, path: str) -> bool:
        return PurePath(path).suffix.lstrip(".").lower() in self.recognized_extensions
