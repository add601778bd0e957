"""Shared pytest fixtures for hunt tests."""

import json

import pytest

from hunt.engines.base import SearchEngine
from hunt.utils.config import CONFIG_ENV_VAR
from hunt.utils.browser import TEST_MODE_ENV_VAR


SAMPLE_CONFIG = {
    "search": [
        {"name": "Bing", "url": "https://www.bing.com/search?q=", "space_delimiter": "+"},
        {"name": "Google", "url": "https://www.google.com/search?q=", "space_delimiter": "+"},
        {"name": "DuckDuckGo", "url": "https://duckduckgo.com/?q=", "space_delimiter": "%20"},
        {"name": "YouTube", "url": "https://www.youtube.com/results?search_query="},
    ],
    "shop": [
        {"name": "Amazon", "url": "https://www.amazon.com/s?k=", "space_delimiter": "+"},
        {"name": "eBay", "url": "https://www.ebay.com/sch/i.html?_nkw=", "space_delimiter": "+"},
    ],
    "news": [
        {"name": "Reuters", "url": "https://www.reuters.com/site-search/?query=", "space_delimiter": "%20"},
    ],
}


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.delenv(TEST_MODE_ENV_VAR, raising=False)


@pytest.fixture
def engines():
    return (
        SearchEngine("Bing", "https://www.bing.com/search?q="),
        SearchEngine("Google", "https://www.google.com/search?q="),
        SearchEngine("DuckDuckGo", "https://duckduckgo.com/?q=", "%20"),
        SearchEngine("YouTube", "https://www.youtube.com/results?search_query="),
    )


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "search_engines.json"
    path.write_text(json.dumps(SAMPLE_CONFIG), encoding="utf-8")
    return path
