# === FILE: site_mapper/config.py ===
"""
Loading and validation of the crawler configuration.
The schema is described and checked with Pydantic.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, HttpUrl


class CrawlerConfig(BaseModel):
    """Settings for a single crawl."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: HttpUrl = Field(..., description="Seed URL the crawl starts from.")
    follow_subdomains: bool = Field(False, description="Also crawl subdomains of the seed's domain.")
    concurrency: int = Field(5, ge=1, description="Maximum number of simultaneous fetches.")
    timeout: float = Field(5.0, gt=0, description="Timeout of a single request (seconds).")
    user_agent: str = Field("SiteMapperBot/1.0", min_length=1, description="User-Agent header.")


_DEFAULT_CFG = Path("site_mapper.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None], **overrides: Any) -> CrawlerConfig:
    """
    Read a YAML or JSON file and return a validated CrawlerConfig.

    ``None`` means ``site_mapper.yaml`` in the working directory. Keyword
    arguments override values from the file. Raises FileNotFoundError when the
    file is missing.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(_DEFAULT_CFG))
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    data.update(overrides)
    return CrawlerConfig(**data)


__all__ = ["CrawlerConfig", "load_config"]
