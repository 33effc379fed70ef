# File: sitemap_crawler/engine.py
"""sitemap_crawler.engine: запуск обхода sitemap — один BoundedProcessor на каждый sitemap."""

from __future__ import annotations

import asyncio
from typing import Callable, List, Sequence

import click
from aiohttp import ClientSession, ClientTimeout

from sitemap_crawler.config import CrawlerConfig
from sitemap_crawler.crawler.fetcher import Fetcher, Reporter, report_status
from sitemap_crawler.crawler.models import CrawlError, CrawlSummary
from sitemap_crawler.crawler.processor import BoundedProcessor
from sitemap_crawler.crawler.sitemap import fetch_sitemap
from sitemap_crawler.logger import logger

__all__ = ["crawl_sitemap", "run_crawl"]


def _session(config: CrawlerConfig) -> ClientSession:
    return ClientSession(
        timeout=ClientTimeout(total=config.timeout),
        headers={"User-Agent": config.user_agent},
        raise_for_status=False,
    )


async def crawl_sitemap(
    sitemap_url: str,
    config: CrawlerConfig,
    report: Reporter = report_status,
    echo: Callable[[str], None] = click.echo,
) -> CrawlSummary:
    """Обходит один sitemap: все <loc> проходят через собственный BoundedProcessor."""
    echo(f"Getting sitemap from {sitemap_url}...")
    async with _session(config) as session:
        locations = await fetch_sitemap(session, sitemap_url)
        fetcher = Fetcher(session, report)
        processor: BoundedProcessor[str] = BoundedProcessor(
            fetcher.fetch, config.max_concurrency, prune_failed=config.prune_failed
        )
        acks = []
        for location in locations:
            acks.append(await processor.submit(location))
        await processor.drain()
        await asyncio.gather(*acks)

    summary = CrawlSummary(
        sitemap_url=sitemap_url,
        submitted=len(acks),
        succeeded=processor.succeeded,
        failed=processor.failed,
    )
    logger.info(
        "Sitemap %s: %d submitted, %d succeeded, %d failed",
        sitemap_url, summary.submitted, summary.succeeded, summary.failed,
    )
    return summary


async def run_crawl(
    sitemap_urls: Sequence[str],
    config: CrawlerConfig,
    report: Reporter = report_status,
    echo: Callable[[str], None] = click.echo,
) -> List[CrawlSummary]:
    """Обходит все sitemap параллельно; ошибки отдельных обходов собираются в CrawlError."""
    tasks = [
        asyncio.create_task(crawl_sitemap(url, config, report, echo))
        for url in sitemap_urls
    ]
    # каждый обход успевает дойти до первого await и напечатать "Getting sitemap from"
    await asyncio.sleep(0)
    echo("Waiting for crawlers to finish...")
    results = await asyncio.gather(*tasks, return_exceptions=True)
    failures = []
    summaries: List[CrawlSummary] = []
    for url, result in zip(sitemap_urls, results):
        if isinstance(result, BaseException):
            logger.error("Crawling %s failed: %s", url, result)
            failures.append((url, result))
        else:
            summaries.append(result)
    if failures:
        raise CrawlError(failures)
    return summaries
