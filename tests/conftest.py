"""Shared fixtures: isolate cached settings and profiles between tests."""

import pytest

from chunksplit.config.chunking import static
from chunksplit.config.settings import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    for name in (
        "CHUNKSPLIT_LOG_LEVEL",
        "CHUNKSPLIT_DEFAULT_CHUNK_SIZE",
        "CHUNKSPLIT_DEFAULT_CHUNK_OVERLAP",
        "CHUNKSPLIT_DEFAULT_CHUNK_STRATEGY",
        "CHUNKSPLIT_CHUNKING_PROFILE",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    static._cached = None
    yield
    get_settings.cache_clear()
    static._cached = None


def vowel_count(text: str) -> int:
    return sum(1 for char in text if char in "aeiou")


@pytest.fixture()
def vowels():
    """Length function that counts vowels instead of characters."""
    return vowel_count
