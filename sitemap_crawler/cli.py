# === FILE: sitemap_crawler/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска SitemapCrawler через командную строку.

Опции:
  -sm,  --sitemap URL      URL sitemap для обхода (можно повторять)
  -sms, --sitemaps LIST    Список URL sitemap через запятую
  -p,   --processors INT   Макс. число одновременных запросов (default: 10)
  -c,   --config PATH      Путь к YAML/JSON-конфигу
  --log-level LEVEL        Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH          Файл для логов (только stderr, если не указан)
  --log-format FORMAT      Формат логирования

Дополнительно:
  --version, -v            Показать версию SitemapCrawler
  --help, -h, -?           Показать справку

Пример:
  sitemap-crawler -sm https://example.com/sitemap.xml -p 20
"""
import asyncio
import sys
from pathlib import Path
from typing import Iterable, List, Optional

import click

from sitemap_crawler import __version__
from sitemap_crawler.config import load_config, resolve_concurrency
from sitemap_crawler.crawler.models import CrawlError
from sitemap_crawler.engine import run_crawl
from sitemap_crawler.logger import DEFAULT_FORMAT, init_logging

CONTEXT_SETTINGS = dict(help_option_names=["-h", "-?", "--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def collect_sitemaps(sitemap_urls: Iterable[str], sitemaps_csv: Optional[str]) -> List[str]:
    """Повторяемые --sitemap, затем непустые элементы --sitemaps."""
    sitemaps = [url for url in sitemap_urls if url]
    if sitemaps_csv:
        sitemaps.extend(part.strip() for part in sitemaps_csv.split(',') if part.strip())
    return sitemaps


@click.command(name='sitemap-crawler', context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SitemapCrawler, version %(version)s')
@click.option(
    '--sitemaps', '-sms', 'sitemaps_csv',
    default=None,
    metavar='<sitemaps>',
    help='Comma-separated list of sitemap URLs.'
)
@click.option(
    '--sitemap', '-sm', 'sitemap_urls',
    multiple=True,
    metavar='<sitemap>',
    help='A sitemap URL to crawl.'
)
@click.option(
    '--processors', '-p', 'processors',
    default=None,
    metavar='<processors>',
    help='The maximum number of concurrent requests per sitemap (default: 10).'
)
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (только stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, sitemaps_csv, sitemap_urls, processors, config_path, log_level, log_file, log_format):
    """Загружает sitemap и запрашивает каждый указанный в нём URL."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )

    sitemaps = collect_sitemaps(sitemap_urls, sitemaps_csv)
    if not sitemaps:
        click.echo('No sitemap URLs provided!')
        click.echo(ctx.get_help())
        ctx.exit(1)

    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    if processors is not None:
        cfg = cfg.model_copy(
            update={'max_concurrency': resolve_concurrency(processors, cfg.max_concurrency)}
        )

    click.echo(f"Crawling sitemaps: {', '.join(sitemaps)}")
    try:
        asyncio.run(run_crawl(sitemaps, cfg))
    except CrawlError as e:
        for url, exc in e.failures:
            click.secho(f'Ошибка при обходе {url}: {exc}', fg='red', err=True)
        sys.exit(1)
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')
    click.echo('Crawling done.')


if __name__ == "__main__":
    cli()
