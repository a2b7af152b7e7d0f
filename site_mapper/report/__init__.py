# File: site_mapper/report/__init__.py
"""site_mapper.report: rendering of crawl results, used by the CLI and tests."""

from site_mapper.report.json_report import dumps_sitemap, render_json

__all__ = ["dumps_sitemap", "render_json"]
