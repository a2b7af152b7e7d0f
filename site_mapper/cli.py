# === FILE: site_mapper/cli.py ===
#!/usr/bin/env python3
"""
Command line entry point of site_mapper.

Usage:
  site-mapper [OPTIONS] [URL]

Options:
  --subdomains        Also crawl subdomains of the seed's domain
  -v, --verbose       Log crawl progress (INFO level, stderr)
  -n, --concurrency   Number of concurrent HTTP fetches (default 5)
  --timeout SEC       Timeout of a single request (default 5)
  -c, --config PATH   YAML/JSON config; command line options override it
  -j, --json PATH     Also save the sitemap to a JSON file
  --log-file PATH     Additional log file (rotated)
  --log-format FMT    Format string for log records
  --version           Show the version

Example:
  site-mapper --subdomains -n 10 https://example.com
"""
import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from site_mapper import __version__
from site_mapper.config import CrawlerConfig, load_config
from site_mapper.logger import configure
from site_mapper.report.json_report import dumps_sitemap, render_json
from site_mapper.scanner import start_crawl

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red')
    sys.exit(1)


def _build_config(config_path, url, follow_subdomains, concurrency, timeout) -> CrawlerConfig:
    overrides = {}
    if url is not None:
        overrides['base_url'] = url
    if follow_subdomains:
        overrides['follow_subdomains'] = True
    if concurrency is not None:
        overrides['concurrency'] = concurrency
    if timeout is not None:
        overrides['timeout'] = timeout
    if config_path is not None:
        return load_config(config_path, **overrides)
    return CrawlerConfig(**overrides)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', message='site_mapper, version %(version)s')
@click.argument('url', required=False)
@click.option(
    '--subdomains', 'follow_subdomains',
    is_flag=True,
    help='Also crawl subdomains of the seed URL domain.'
)
@click.option(
    '--verbose', '-v', 'verbose',
    is_flag=True,
    help='Log the crawl progress.'
)
@click.option(
    '--concurrency', '-n', 'concurrency',
    type=click.IntRange(min=1),
    default=None,
    help='Number of concurrent HTTP calls  [default: 5]'
)
@click.option(
    '--timeout', 'timeout',
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help='Timeout of a single HTTP call in seconds  [default: 5.0]'
)
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML or JSON config file.'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Also save the sitemap to this JSON file.'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Path to a log file (console only if omitted).'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Format string for log records.'
)
@click.pass_context
def cli(ctx, url, follow_subdomains, verbose, concurrency, timeout, config_path, json_output, log_file,
        log_format):
    """Crawl the site at URL and print its sitemap as JSON."""
    if url is None and config_path is None:
        click.echo(ctx.get_usage())
        ctx.exit(1)

    configure(
        level='INFO' if verbose else 'WARNING',
        log_file=str(log_file) if log_file else None,
        log_format=log_format,
    )

    try:
        cfg = _build_config(config_path, url, follow_subdomains, concurrency, timeout)
    except (ValidationError, ValueError, TypeError, OSError) as e:
        print_error(f'Unable to create a crawler to {url or config_path}: {e}')

    try:
        sitemap = asyncio.run(start_crawl(cfg))
    except Exception as e:
        print_error(f'Unable to crawl {cfg.base_url}: {e}')

    click.echo(dumps_sitemap(sitemap))

    if json_output:
        try:
            render_json(sitemap, json_output)
        except OSError as e:
            print_error(f'Unable to save JSON report: {e}')


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
