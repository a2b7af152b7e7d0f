"""
Shared sitemap store: the visited set and the crawl result in one map.
"""
from __future__ import annotations

import threading
from typing import Dict, Iterable, List

from site_mapper.crawler.models import Sitemap


class SitemapStore:
    """Lock-guarded map of canonical URL -> links found on that page.

    A key is inserted by :meth:`claim` with an empty placeholder list and later
    overwritten by :meth:`commit`. The lock only covers the dict mutation.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pages: Dict[str, List[str]] = {}

    def claim(self, url: str) -> bool:
        """Insert *url* if absent. Returns True only for the caller that inserted it."""
        with self._lock:
            if url in self._pages:
                return False
            self._pages[url] = []
            return True

    def commit(self, url: str, links: Iterable[str]) -> None:
        links = list(links)
        with self._lock:
            self._pages[url] = links

    def snapshot(self) -> Sitemap:
        with self._lock:
            return {url: list(links) for url, links in self._pages.items()}

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._pages

    def __len__(self) -> int:
        with self._lock:
            return len(self._pages)
