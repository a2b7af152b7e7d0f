# site_mapper/crawler/fetcher.py
"""
Fetcher module: downloads a page and hands back the hrefs found in it.
"""
from __future__ import annotations

import asyncio
from typing import Iterator

from aiohttp import ClientError, ClientSession, ClientTimeout, TCPConnector
from bs4.builder import ParserRejectedMarkup

from site_mapper.config import CrawlerConfig
from site_mapper.crawler.link_extractor import iter_hrefs, parse_html
from site_mapper.crawler.models import FetchError


def open_session(config: CrawlerConfig) -> ClientSession:
    """
    Client session with the crawl-wide timeout and User-Agent.

    The connection pool is as large as the admission pool, so a fetch holding
    a permit never queues for a connection inside its timeout.
    """
    return ClientSession(
        connector=TCPConnector(limit=config.concurrency),
        timeout=ClientTimeout(total=config.timeout),
        headers={"User-Agent": config.user_agent},
        raise_for_status=False,
    )


class Fetcher:
    """Issues one GET per page. No retries: any failure is final for that URL."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def fetch(self, url: str) -> Iterator[str]:
        """
        GET *url* and return a lazy iterator over its raw hrefs.

        The body is read completely before returning. Raises FetchError on
        transport errors, timeouts, HTTP status >= 400 and unparseable markup.
        """
        try:
            async with self.session.get(url) as resp:
                if resp.status >= 400:
                    raise FetchError(url, f"HTTP {resp.status}")
                body = await resp.read()
        except asyncio.TimeoutError as exc:
            raise FetchError(url, "timed out") from exc
        except ClientError as exc:
            raise FetchError(url, str(exc) or type(exc).__name__) from exc

        try:
            soup = parse_html(body)
        except ParserRejectedMarkup as exc:
            raise FetchError(url, f"unparseable HTML: {exc}") from exc
        return iter_hrefs(soup)
