"""Pytest configuration and shared fixtures."""

import pytest

from arxiv_client.config.settings import get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep ARXIV_* variables from the developer's shell out of tests."""
    import os

    for key in list(os.environ):
        if key.startswith("ARXIV_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
