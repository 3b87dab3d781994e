# File: tests/conftest.py
from pathlib import Path
from typing import Callable, Dict, List

import pytest

from docs_to_markdown.crawler.fetcher import FetchError
from docs_to_markdown.crawler.models import CrawlSession
from docs_to_markdown.logger import configure


@pytest.fixture(autouse=True)
def fresh_logging():
    """
    Re-attach the project logger to the stdout of the current test.
    """
    configure(level="DEBUG")
    yield


@pytest.fixture()
def output_dir(tmp_path) -> Path:
    return tmp_path / "out"


@pytest.fixture()
def make_session(output_dir) -> Callable[..., CrawlSession]:
    """
    Factory for CrawlSession objects writing into the temporary output dir.
    """
    def _make(seed_url: str = "http://example.com", **kwargs) -> CrawlSession:
        kwargs.setdefault("output_dir", output_dir)
        return CrawlSession.create(seed_url, **kwargs)

    return _make


class FakeFetcher:
    """
    Serves pages from a dict; unknown URLs fail with FetchError.
    Records every requested URL in order.
    """

    def __init__(self, pages: Dict[str, str]):
        self.pages = pages
        self.calls: List[str] = []

    async def __call__(self, url: str) -> str:
        self.calls.append(url)
        if url not in self.pages:
            raise FetchError(url, "HTTP 404 Not Found")
        return self.pages[url]


class RecordingSleep:
    """
    Stand-in for asyncio.sleep that returns immediately.
    """

    def __init__(self):
        self.calls: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture()
def fake_fetcher() -> Callable[[Dict[str, str]], FakeFetcher]:
    return FakeFetcher


@pytest.fixture()
def no_sleep() -> RecordingSleep:
    return RecordingSleep()
