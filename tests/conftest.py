"""Shared fixtures for splitter tests."""

import pytest

from splitter.config.chunking.models import SplitterConfig
from splitter.config.settings import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def word_config() -> SplitterConfig:
    return SplitterConfig(chunk_size=10, overlap=0, separators=["\n\n", "\n", " ", ""])
