# File: tests/conftest.py
from collections.abc import AsyncIterator
from typing import Iterable, List, Tuple

import pytest
from aiohttp import web

from sitemap_crawler.config import CrawlerConfig
from sitemap_crawler.logger import configure


def build_sitemap(urls: Iterable[str], namespace: str = "http://www.sitemaps.org/schemas/sitemap/0.9") -> str:
    """Return a <urlset> document listing *urls*."""
    entries = "".join(f"<url><loc>{u}</loc></url>" for u in urls)
    return f'<?xml version="1.0" encoding="UTF-8"?><urlset xmlns="{namespace}">{entries}</urlset>'


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", port)
    await site.start()
    try:
        yield f"http://127.0.0.1:{port}"
    finally:
        await runner.cleanup()


@pytest.fixture()
def basic_config() -> CrawlerConfig:
    """Small, fast configuration for crawl tests."""
    return CrawlerConfig(max_concurrency=2, timeout=5.0, user_agent="TestAgent/1.0")


@pytest.fixture()
def reported() -> List[Tuple[str, str]]:
    """Collects ``(status, url)`` pairs passed to the result reporter."""
    return []


@pytest.fixture(autouse=True)
def reset_logging():
    """CliRunner swaps sys.stderr; rebind the project logger to the real stream afterwards."""
    yield
    configure()
