# File: tests/conftest.py
from __future__ import annotations

from typing import Dict, Iterable, List

import pytest

from page_finder.config import CrawlerConfig
from page_finder.errors import NetworkError
from page_finder.logger import init_logging

ROOT = "https://example.test/"


class StaticFetcher:
    """In-memory fetch capability: serves *pages*, fails everything else."""

    def __init__(self, pages: Dict[str, str], failing: Iterable[str] = ()) -> None:
        self.pages = pages
        self.failing = set(failing)
        self.calls: List[str] = []

    async def fetch(self, url: str) -> str:
        self.calls.append(url)
        if url in self.failing:
            raise NetworkError(url, "connection reset")
        if url not in self.pages:
            raise NetworkError(url, "HTTP 404")
        return self.pages[url]


@pytest.fixture(autouse=True)
def fresh_logging():
    """
    Rebind the project logger to the current stderr for every test
    (CLI tests replace it with a stream that is closed afterwards).
    """
    init_logging(level="DEBUG")
    yield


@pytest.fixture()
def make_fetcher():
    return StaticFetcher


@pytest.fixture()
def class_config() -> CrawlerConfig:
    """
    Return a basic config searching for the ``highlight`` class under ROOT.
    """
    return CrawlerConfig(base_url=ROOT, search_class="highlight", timeout=2.0, user_agent="TestAgent/1.0")


@pytest.fixture()
def text_config() -> CrawlerConfig:
    return CrawlerConfig(base_url=ROOT, search_text="Contact us", timeout=2.0, user_agent="TestAgent/1.0")
