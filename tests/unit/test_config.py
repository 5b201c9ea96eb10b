import pytest

from reduse.core.config import (
    DEFAULT_FORMAT,
    SUPPORTED_FILE_EXTENSIONS,
    SUPPORTED_IMAGE_FORMATS,
    WalkerConfiguration,
)


def test_defaults_are_valid():
    config = WalkerConfiguration()
    assert config.validate() == []
    assert config.initial_capacity == 10
    assert config.max_entries is None
    assert config.max_path_length == 4096
    assert config.default_format == DEFAULT_FORMAT
    assert "webp" in SUPPORTED_IMAGE_FORMATS
    assert "scss" in SUPPORTED_FILE_EXTENSIONS


def test_validate_reports_every_problem():
    config = WalkerConfiguration(
        initial_capacity=0,
        max_entries=-1,
        max_path_length=0,
        default_format="bmp",
    )
    errors = config.validate()
    assert len(errors) == 4


def test_from_env_defaults(monkeypatch):
    for name in (
        "REDUSE_INITIAL_CAPACITY",
        "REDUSE_MAX_ENTRIES",
        "REDUSE_MAX_PATH_LENGTH",
        "REDUSE_EXTENSIONS",
    ):
        monkeypatch.delenv(name, raising=False)

    assert WalkerConfiguration.from_env() == WalkerConfiguration()


def test_from_env_overrides(monkeypatch):
    monkeypatch.setenv("REDUSE_INITIAL_CAPACITY", "32")
    monkeypatch.setenv("REDUSE_MAX_ENTRIES", "500")
    monkeypatch.setenv("REDUSE_MAX_PATH_LENGTH", "1024")
    monkeypatch.setenv("REDUSE_EXTENSIONS", ".vue, svelte,,")

    config = WalkerConfiguration.from_env()

    assert config.initial_capacity == 32
    assert config.max_entries == 500
    assert config.max_path_length == 1024
    assert config.recognized_extensions == ("vue", "svelte")


def test_from_env_rejects_non_integer(monkeypatch):
    monkeypatch.setenv("REDUSE_MAX_ENTRIES", "lots")
    with pytest.raises(ValueError):
        WalkerConfiguration.from_env()
