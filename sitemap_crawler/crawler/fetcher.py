# sitemap_crawler/crawler/fetcher.py
"""
Fetcher module: issues the GET for a sitemap location and reports its outcome.
"""
from __future__ import annotations

import asyncio
from typing import Callable

import click
from aiohttp import ClientError, ClientSession

from sitemap_crawler.crawler.models import FetchError, FetchResult

Reporter = Callable[[str, str], None]


def report_status(status: str, url: str) -> None:
    """Print one ``<status>\\t<url>`` result line to stdout."""
    click.echo(f"{status}\t{url}")


class Fetcher:
    """GETs a URL, reports ``(status, url)`` and fails on non-2xx responses."""

    def __init__(self, session: ClientSession, report: Reporter = report_status) -> None:
        self.session = session
        self._report = report

    async def fetch(self, url: str) -> FetchResult:
        """
        Fetch the URL once, without retries.

        Returns FetchResult on a 2xx status; raises FetchError otherwise.
        """
        try:
            async with self.session.get(url, raise_for_status=False) as resp:
                result = FetchResult(url, resp.status)
        except (ClientError, asyncio.TimeoutError) as exc:
            self._report(type(exc).__name__, url)
            raise FetchError(url, reason=str(exc) or type(exc).__name__) from exc

        self._report(result.status_text, url)
        if not result.ok:
            raise FetchError(url, status=result.status)
        return result
