# site_mapper/report/json_report.py

"""
JSON rendering of a crawl result.
"""
import json
from pathlib import Path

from site_mapper.crawler.models import Sitemap


def dumps_sitemap(sitemap: Sitemap, indent: int = 2) -> str:
    """Serialize *sitemap* with sorted keys and sorted link lists."""
    data = {url: sorted(links) for url, links in sitemap.items()}
    return json.dumps(data, ensure_ascii=False, indent=indent, sort_keys=True)


def render_json(sitemap: Sitemap, output_path: Path | str) -> Path:
    """
    Save *sitemap* as JSON at *output_path*.

    :param sitemap: mapping of page URL -> links
    :param output_path: path of the JSON file
    :return: Path of the saved file

    Example:
    ```python
    from site_mapper.report.json_report import render_json
    report_path = render_json(sitemap, 'reports/sitemap.json')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(dumps_sitemap(sitemap) + "\n", encoding="utf-8")
    return output
