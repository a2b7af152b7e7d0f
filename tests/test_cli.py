# File: tests/test_cli.py
"""CLI tests (`site_mapper.cli`) using click.testing.CliRunner.
The crawl itself is patched out; see test_crawler.py for the engine.
"""
import json

import pytest
from click.testing import CliRunner

import site_mapper.cli as cli_module
from site_mapper.cli import cli

SITEMAP = {
    "https://example.com": ["https://fb.com/company", "https://example.com/about"],
    "https://example.com/about": ["https://example.com"],
}


@pytest.fixture(autouse=True)
def patch_start_crawl(monkeypatch):
    """Replace start_crawl with a fake that records the config it gets."""
    seen = []

    async def fake_crawl(cfg):
        seen.append(cfg)
        return SITEMAP

    monkeypatch.setattr(cli_module, "start_crawl", fake_crawl)
    return seen


def test_version_option():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "site_mapper" in result.output


def test_missing_url_prints_usage():
    result = CliRunner().invoke(cli, [])
    assert result.exit_code == 1
    assert "Usage:" in result.output


def test_prints_sorted_json(patch_start_crawl):
    result = CliRunner().invoke(cli, ["https://example.com"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert list(data) == sorted(SITEMAP)
    assert data["https://example.com"] == ["https://example.com/about", "https://fb.com/company"]

    cfg = patch_start_crawl[0]
    assert cfg.concurrency == 5
    assert cfg.follow_subdomains is False
    assert cfg.timeout == 5.0


def test_options_reach_config(patch_start_crawl):
    result = CliRunner().invoke(
        cli, ["--subdomains", "-n", "12", "--timeout", "2.5", "https://monzo.com"]
    )
    assert result.exit_code == 0, result.output
    cfg = patch_start_crawl[0]
    assert cfg.follow_subdomains is True
    assert cfg.concurrency == 12
    assert cfg.timeout == 2.5
    assert cfg.base_url.host == "monzo.com"


def test_zero_concurrency_rejected():
    result = CliRunner().invoke(cli, ["-n", "0", "https://monzo.com"])
    assert result.exit_code != 0


def test_invalid_url():
    result = CliRunner().invoke(cli, ["not a url"])
    assert result.exit_code == 1
    assert "Unable to create a crawler to not a url" in result.output


def test_crawl_failure(monkeypatch):
    async def failing(cfg):
        raise RuntimeError("boom")

    monkeypatch.setattr(cli_module, "start_crawl", failing)
    result = CliRunner().invoke(cli, ["https://example.com"])
    assert result.exit_code == 1
    assert "Unable to crawl" in result.output
    assert "boom" in result.output


def test_config_file_with_override(tmp_path, patch_start_crawl):
    cfg_file = tmp_path / "crawl.json"
    cfg_file.write_text(
        json.dumps({"base_url": "https://monzo.com", "concurrency": 3, "user_agent": "Agent/1.0"}),
        encoding="utf-8",
    )
    result = CliRunner().invoke(cli, ["--config", str(cfg_file), "-n", "9"])
    assert result.exit_code == 0, result.output
    cfg = patch_start_crawl[0]
    assert cfg.base_url.host == "monzo.com"
    assert cfg.concurrency == 9
    assert cfg.user_agent == "Agent/1.0"


def test_json_report_file(tmp_path):
    out = tmp_path / "reports" / "sitemap.json"
    result = CliRunner().invoke(cli, ["--json", str(out), "https://example.com"])
    assert result.exit_code == 0, result.output
    saved = json.loads(out.read_text(encoding="utf-8"))
    assert saved == json.loads(result.output)


def test_verbose_and_log_file(tmp_path):
    log_file = tmp_path / "crawl.log"
    result = CliRunner().invoke(cli, ["-v", "--log-file", str(log_file), "https://example.com"])
    assert result.exit_code == 0
    assert log_file.exists()


def test_log_format_applies_to_log_file(tmp_path, monkeypatch):
    from site_mapper.logger import logger

    async def logging_crawl(cfg):
        logger.info("crawling %s", cfg.base_url.host)
        return SITEMAP

    monkeypatch.setattr(cli_module, "start_crawl", logging_crawl)
    log_file = tmp_path / "crawl.log"
    result = CliRunner().invoke(
        cli,
        ["-v", "--log-file", str(log_file), "--log-format", "%(levelname)s|%(message)s", "https://example.com"],
    )
    assert result.exit_code == 0, result.output
    assert "INFO|crawling example.com" in log_file.read_text(encoding="utf-8")
