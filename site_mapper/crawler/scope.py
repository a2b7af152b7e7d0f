"""
Crawl scope: which discovered URLs belong to the site being mapped.
"""
from __future__ import annotations

import ipaddress
from typing import Callable, Optional
from urllib.parse import urlsplit

DomainResolver = Callable[[str], str]


def registrable_domain(host: str) -> str:
    """
    Root domain of *host*: its last two dot-separated labels.

    Hosts with fewer labels and IP literals are returned unchanged. Multi-label
    public suffixes (``co.uk``) are not recognised; pass a different resolver
    to :class:`ScopeFilter` when that matters.
    """
    host = host.lower()
    try:
        ipaddress.ip_address(host)
    except ValueError:
        pass
    else:
        return host
    labels = host.split(".")
    if len(labels) <= 2:
        return host
    return ".".join(labels[-2:])


_WEB_SCHEMES = ("http", "https")


def _hostname(url: str) -> Optional[str]:
    try:
        parts = urlsplit(url)
        if parts.scheme not in _WEB_SCHEMES:
            return None
        return parts.hostname
    except ValueError:
        return None


class ScopeFilter:
    """Decides whether a canonical http(s) URL should be crawled. robots.txt is not consulted."""

    def __init__(self, domain: str, follow_subdomains: bool = False) -> None:
        self.domain = domain.lower()
        self.follow_subdomains = follow_subdomains

    @classmethod
    def from_seed(
        cls,
        seed_url: str,
        follow_subdomains: bool = False,
        domain_resolver: DomainResolver = registrable_domain,
    ) -> ScopeFilter:
        host = _hostname(seed_url)
        if not host:
            raise ValueError(f"seed URL has no http(s) host: {seed_url!r}")
        return cls(domain_resolver(host), follow_subdomains=follow_subdomains)

    def in_scope(self, url: str) -> bool:
        host = _hostname(url)
        if not host:
            return False
        if host == self.domain:
            return True
        return self.follow_subdomains and host.endswith("." + self.domain)

    __call__ = in_scope

    def __repr__(self) -> str:
        return f"ScopeFilter(domain={self.domain!r}, follow_subdomains={self.follow_subdomains})"
