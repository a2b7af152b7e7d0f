"""
Data models and errors for the site_mapper crawler.
"""
from __future__ import annotations

from typing import Dict, List

#: canonical page URL -> distinct canonical URLs linked from that page
Sitemap = Dict[str, List[str]]


class CrawlError(Exception):
    """Base class for crawl failures."""


class InvalidSeedURL(CrawlError, ValueError):
    """The seed URL cannot be crawled (unparseable, no host or not http/https)."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"invalid seed URL {url!r}: {reason}")
        self.url = url
        self.reason = reason


class FetchError(CrawlError):
    """A page could not be fetched or parsed. Terminal for that URL."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason
