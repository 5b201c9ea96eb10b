import os
from dataclasses import dataclass
from typing import List, Optional, Tuple

SUPPORTED_IMAGE_FORMATS: Tuple[str, ...] = (
    "avif", "dz", "fits", "gif", "heif", "input", "jpeg",
    "jpg", "jp2", "jxl", "magick", "openslide", "pdf", "png",
    "ppm", "raw", "svg", "tiff", "tif", "v", "webp",
)

SUPPORTED_FILE_EXTENSIONS: Tuple[str, ...] = (
    "html", "css", "scss", "ts", "js", "tsx", "jsx",
)

DEFAULT_FORMAT = "webp"
DEFAULT_INITIAL_CAPACITY = 10
DEFAULT_MAX_PATH_LENGTH = 4096


def _int_from_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass
class WalkerConfiguration:
    initial_capacity: int = DEFAULT_INITIAL_CAPACITY
    max_entries: Optional[int] = None
    max_path_length: int = DEFAULT_MAX_PATH_LENGTH
    recognized_extensions: Tuple[str, ...] = SUPPORTED_FILE_EXTENSIONS
    image_formats: Tuple[str, ...] = SUPPORTED_IMAGE_FORMATS
    default_format: str = DEFAULT_FORMAT

    def validate(self) -> List[str]:
        errors: List[str] = []

        if self.initial_capacity <= 0:
            errors.append("initial_capacity must be greater than zero")

        if self.max_entries is not None and self.max_entries < 0:
            errors.append("max_entries must not be negative")

        if self.max_path_length <= 0:
            errors.append("max_path_length must be greater than zero")

        if self.default_format not in self.image_formats:
            errors.append(
                f"default_format {self.default_format!r} is not a supported image format"
            )

        return errors

    @classmethod
    def from_env(cls) -> "WalkerConfiguration":
        """
        Build a configuration, letting REDUSE_* environment variables
        override the defaults.
        """
        config = cls(
            initial_capacity=_int_from_env(
                "REDUSE_INITIAL_CAPACITY", DEFAULT_INITIAL_CAPACITY
            ),
            max_entries=_int_from_env("REDUSE_MAX_ENTRIES", None),
            max_path_length=_int_from_env(
                "REDUSE_MAX_PATH_LENGTH", DEFAULT_MAX_PATH_LENGTH
            ),
        )

        extensions = os.getenv("REDUSE_EXTENSIONS")
        if extensions:
            config.recognized_extensions = tuple(
                ext.strip().lstrip(".").lower()
                for ext in extensions.split(",")
                if ext.strip()
            )

        return config
