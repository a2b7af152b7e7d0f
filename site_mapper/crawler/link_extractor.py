# site_mapper/crawler/link_extractor.py
"""
Link extraction and URL normalization utilities for site_mapper.
"""
from __future__ import annotations

from typing import Iterator, List, Union
from urllib.parse import SplitResult, urlsplit, urlunsplit

from bs4 import BeautifulSoup
from bs4.element import Tag


def parse_html(markup: Union[str, bytes]) -> BeautifulSoup:
    """Parse *markup* into an element tree. Duplicate attributes keep the first value."""
    return BeautifulSoup(markup, "html.parser", on_duplicate_attribute="ignore")


def iter_hrefs(root: Tag) -> Iterator[str]:
    """
    Lazily yield raw hrefs of ``<a>`` elements under *root* in document order.

    Only the first ``href`` of an anchor counts. Values are stripped, and empty
    or fragment-only (``#...``) hrefs are skipped.
    """
    for node in root.descendants:
        if not isinstance(node, Tag) or node.name != "a":
            continue
        href_val = node.get("href")
        if not isinstance(href_val, str):
            continue
        raw = href_val.strip()
        if not raw or raw.startswith("#"):
            continue
        yield raw


def extract_links(markup: Union[str, bytes]) -> List[str]:
    """Return every raw href found in *markup*."""
    return list(iter_hrefs(parse_html(markup)))


def normalize_url(href: str, base: Union[str, SplitResult]) -> str:
    """
    Turn *href* into a canonical absolute URL relative to *base*.

    Relative paths are attached to the base host literally: ``..`` segments
    are not collapsed, so ``../blog`` becomes ``<scheme>://<host>/../blog``.
    Their fragment is dropped; a query is kept as written.
    Anything that is not empty, scheme-relative or path-relative is returned
    as-is.
    """
    parts = urlsplit(base) if isinstance(base, str) else base
    url = href[:-1] if href.endswith("/") else href

    if not url:
        return urlunsplit((parts.scheme, parts.netloc, "", "", ""))
    if url.startswith("//"):
        return f"{parts.scheme}:{url}"
    if url.startswith(("/", "..")):
        # fragments never reach the server: "/p#a" and "/p#b" are one page
        path, fragment_sep, _ = url.partition("#")
        if fragment_sep and path.endswith("/"):
            path = path[:-1]
        if not path:
            return urlunsplit((parts.scheme, parts.netloc, "", "", ""))
        if not path.startswith("/"):
            path = "/" + path
        return urlunsplit((parts.scheme, parts.netloc, path, "", ""))
    return url
