# === FILE: site_mapper/scanner.py ===
"""
Wrapper that runs a whole crawl for a given configuration.
"""
from site_mapper.config import CrawlerConfig
from site_mapper.crawler.crawler import AsyncCrawler
from site_mapper.crawler.models import Sitemap


async def start_crawl(cfg: CrawlerConfig) -> Sitemap:
    """
    Open the crawler's HTTP session, crawl the site and return the sitemap.

    Parameters
    ----------
    cfg : CrawlerConfig
        Crawl configuration.

    Returns
    -------
    Sitemap
        Canonical page URL -> links found on that page.
    """
    async with AsyncCrawler(cfg) as crawler:
        sitemap = await crawler.crawl()
    return sitemap

__all__ = ["start_crawl"]
