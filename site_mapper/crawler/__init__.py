"""site_mapper.crawler: the concurrent crawl engine."""
from site_mapper.crawler.crawler import AsyncCrawler, parse_seed
from site_mapper.crawler.fetcher import Fetcher
from site_mapper.crawler.link_extractor import extract_links, iter_hrefs, normalize_url
from site_mapper.crawler.models import CrawlError, FetchError, InvalidSeedURL, Sitemap
from site_mapper.crawler.scope import ScopeFilter, registrable_domain
from site_mapper.crawler.sitemap import SitemapStore

__all__ = [
    "AsyncCrawler",
    "CrawlError",
    "FetchError",
    "Fetcher",
    "InvalidSeedURL",
    "ScopeFilter",
    "Sitemap",
    "SitemapStore",
    "extract_links",
    "iter_hrefs",
    "normalize_url",
    "parse_seed",
    "registrable_domain",
]
