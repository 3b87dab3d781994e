# === FILE: docs_to_markdown/cli.py ===
#!/usr/bin/env python3
"""
Command line entry point for docs_to_markdown.

Commands:
  crawl URL   Crawl a site from URL and save every page as Markdown
  scrape URL  Convert a single page to Markdown
  config      Show the effective configuration

Common options:
  --config PATH       YAML/JSON settings file (default: configs/default.yaml if present)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Also write logs to this file
  --log-format FORMAT Logging format string

crawl options:
  --output, -o DIR            Output directory (override output_dir)
  --max-pages, -m INT         Page budget (override max_pages)
  --child-pages-only/--all-pages
  --delay SEC                 Pause after every request (override request_delay)
  --manifest PATH             Write a JSON manifest of the crawl
  --crawl-timeout SEC         Abort the whole crawl after SEC seconds

Example:
  docs-to-markdown crawl https://docs.example.com/guide/ -o guide --child-pages-only -m 200
"""
import asyncio
import sys
from pathlib import Path

import click

from docs_to_markdown import __version__
from docs_to_markdown.config import load_config, with_overrides
from docs_to_markdown.crawler.fetcher import FetchError
from docs_to_markdown.crawler.urls import InvalidURLError
from docs_to_markdown.logger import DEFAULT_FORMAT, init_logging
from docs_to_markdown.report.manifest import render_manifest
from docs_to_markdown.runner import run_crawl, scrape_url

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='docs-to-markdown, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML or JSON settings file.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Also write logs to this file'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Format string for log lines'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Crawl documentation sites into Markdown files."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Failed to load configuration: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.argument('seed_url')
@click.option(
    '--output', '-o', 'output_dir',
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help='Directory for the Markdown files'
)
@click.option(
    '--max-pages', '-m', 'max_pages',
    default=None,
    type=click.IntRange(min=1),
    help='Maximum number of pages to save'
)
@click.option(
    '--child-pages-only/--all-pages', 'child_pages_only',
    default=None,
    help='Only follow links that start with the seed URL'
)
@click.option(
    '--delay', 'request_delay',
    default=None,
    type=click.FloatRange(min=0),
    help='Pause after every request (seconds)'
)
@click.option(
    '--manifest', 'manifest_path',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Write a JSON manifest of saved pages and failures'
)
@click.option(
    '--crawl-timeout', 'crawl_timeout',
    type=float,
    default=None,
    help='Timeout for the whole crawl (seconds)'
)
@click.pass_context
def crawl(ctx, seed_url, output_dir, max_pages, child_pages_only, request_delay, manifest_path, crawl_timeout):
    """Crawl SEED_URL and save each page as Markdown."""
    cfg = with_overrides(
        ctx.obj['config'],
        output_dir=output_dir,
        max_pages=max_pages,
        child_pages_only=child_pages_only,
        request_delay=request_delay,
    )
    try:
        if crawl_timeout:
            summary = asyncio.run(
                asyncio.wait_for(run_crawl(seed_url, cfg), timeout=crawl_timeout)
            )
        else:
            summary = asyncio.run(run_crawl(seed_url, cfg))
    except asyncio.TimeoutError:
        print_error(f'Crawl did not finish within {crawl_timeout} seconds')
    except InvalidURLError as e:
        print_error(f'Invalid seed URL: {e}')
    except OSError as e:
        print_error(f'Cannot write to output directory {cfg.output_dir}: {e}')
    except Exception as e:
        print_error(f'Error during crawl: {e}')

    click.echo(f'Processed {summary.pages_processed} pages into {cfg.output_dir}')
    click.echo(f'URLs remaining in queue: {summary.remaining}')
    if summary.failures:
        click.echo(f'Failed URLs: {len(summary.failures)}')
    if summary.limit_reached:
        click.echo(
            f'Note: Maximum page limit ({cfg.max_pages}) reached. '
            'Increase the limit to crawl more pages.'
        )

    if manifest_path:
        try:
            saved = render_manifest(summary, manifest_path)
            click.echo(f'Manifest: {saved}')
        except Exception as e:
            print_error(f'Failed to save manifest: {e}')


@cli.command('scrape', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.option(
    '--output', '-o', 'output_file',
    default=None,
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help='Save the Markdown to this file instead of printing it'
)
@click.pass_context
def scrape(ctx, url, output_file):
    """Convert a single page at URL to Markdown."""
    cfg = ctx.obj['config']
    try:
        markdown = asyncio.run(scrape_url(url, cfg))
    except FetchError as e:
        print_error(f'Error scraping URL: {e}')

    if output_file is None:
        click.echo(markdown)
        return
    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(markdown, encoding='utf-8')
    except OSError as e:
        print_error(f'Failed to save {output_file}: {e}')
    click.echo(f'Saved: {output_file}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Show the effective configuration as JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
