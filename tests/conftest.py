# File: tests/conftest.py
from __future__ import annotations

import asyncio
from collections import Counter
from collections.abc import AsyncIterator
from typing import Dict, Iterator, List, Union

import pytest
from aiohttp import web

from site_mapper.config import CrawlerConfig
from site_mapper.crawler.models import FetchError
from site_mapper.logger import configure

SEED = "http://example.com"


class FakeFetcher:
    """
    In-memory stand-in for Fetcher.

    *pages* maps a URL to the hrefs found on it, or to an exception to raise.
    Unknown URLs fail like a 404. Every call is counted and the peak number of
    simultaneous calls is recorded.
    """

    def __init__(self, pages: Dict[str, Union[List[str], Exception]], delay: float = 0.0) -> None:
        self.pages = pages
        self.delay = delay
        self.calls: Counter[str] = Counter()
        self.in_flight = 0
        self.max_in_flight = 0

    async def fetch(self, url: str) -> Iterator[str]:
        self.calls[url] += 1
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
            page = self.pages.get(url)
            if page is None:
                raise FetchError(url, "HTTP 404")
            if isinstance(page, Exception):
                raise page
            return iter(list(page))
        finally:
            self.in_flight -= 1


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()


@pytest.fixture(autouse=True)
def reset_logger():
    """Point the project logger back at the current stderr after each test."""
    yield
    configure(level="WARNING")


@pytest.fixture()
def basic_config() -> CrawlerConfig:
    """Return a basic valid CrawlerConfig for crawler tests."""
    return CrawlerConfig(
        base_url=SEED,
        timeout=2.0,
        user_agent="TestAgent/1.0",
        concurrency=5,
    )
