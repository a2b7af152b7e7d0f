# === FILE: site_mapper/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import time
from typing import Dict, Optional
from urllib.parse import urlsplit

from aiohttp import ClientSession

from site_mapper.config import CrawlerConfig
from site_mapper.crawler.fetcher import Fetcher, open_session
from site_mapper.crawler.link_extractor import normalize_url
from site_mapper.crawler.models import FetchError, InvalidSeedURL, Sitemap
from site_mapper.crawler.scope import DomainResolver, ScopeFilter, registrable_domain
from site_mapper.crawler.sitemap import SitemapStore
from site_mapper.logger import logger

__all__ = ("AsyncCrawler", "parse_seed")


def parse_seed(url: str) -> str:
    """Validate the seed URL and return its canonical form."""
    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise InvalidSeedURL(url, str(exc)) from exc
    if parts.scheme not in ("http", "https"):
        raise InvalidSeedURL(url, "scheme must be http or https")
    if not parts.hostname:
        raise InvalidSeedURL(url, "missing host")
    return normalize_url(url, parts)


class AsyncCrawler:
    """
    Recursive sitemap crawler.

    Every claimed URL is handled by one task that fetches the page, records its
    links and spawns a child task for each new in-scope link. Children run in
    a task group owned by their parent, so :meth:`crawl` returns only once the
    whole tree of tasks is done. At most ``config.concurrency`` fetches are in
    flight at any time.
    """

    def __init__(
        self,
        config: CrawlerConfig,
        *,
        fetcher: Optional[Fetcher] = None,
        store: Optional[SitemapStore] = None,
        scope: Optional[ScopeFilter] = None,
        domain_resolver: DomainResolver = registrable_domain,
    ) -> None:
        self.config = config
        self.seed = parse_seed(str(config.base_url))
        self.scope = scope or ScopeFilter.from_seed(
            self.seed,
            follow_subdomains=config.follow_subdomains,
            domain_resolver=domain_resolver,
        )
        self.store = store if store is not None else SitemapStore()
        self.fetcher = fetcher
        self.session: Optional[ClientSession] = None
        self._permits = asyncio.Semaphore(config.concurrency)

    async def __aenter__(self) -> AsyncCrawler:
        if self.fetcher is None:
            self.session = open_session(self.config)
            self.fetcher = Fetcher(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self) -> Sitemap:
        if self.fetcher is None:
            raise RuntimeError("Fetcher not initialized, use 'async with AsyncCrawler(...)'")
        logger.info("Crawl started: %s (scope %s)", self.seed, self.scope.domain)
        start = time.monotonic()
        await self._visit(self.seed)
        duration = time.monotonic() - start
        logger.info("Crawl finished: %d pages in %.2f s", len(self.store), duration)
        return self.store.snapshot()

    async def _visit(self, url: str) -> None:
        if not self.store.claim(url):
            return
        logger.info("crawling %s", url)

        try:
            async with self._permits:
                hrefs = await self.fetcher.fetch(url)
        except FetchError as exc:
            logger.warning("Failed %s", exc)
            self.store.commit(url, [])
            return

        base = urlsplit(url)
        links: Dict[str, None] = {}
        async with asyncio.TaskGroup() as children:
            for href in hrefs:
                link = normalize_url(href, base)
                if link in links:
                    continue
                links[link] = None
                if self.scope.in_scope(link):
                    children.create_task(self._visit(link))
            self.store.commit(url, links)
        logger.debug("%s: %d links", url, len(links))
