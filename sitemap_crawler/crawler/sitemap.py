# sitemap_crawler/crawler/sitemap.py
"""
Sitemap source: downloads a sitemap and yields the locations it lists.
"""
from __future__ import annotations

import logging
from typing import Iterator

from aiohttp import ClientSession

from sitemap_crawler.parser.sitemap_parser import iter_locations

logger = logging.getLogger("SitemapCrawler.sitemap")


async def fetch_sitemap(session: ClientSession, url: str) -> Iterator[str]:
    """GET *url* and return an iterator over its ``<loc>`` entries.

    Raises ``aiohttp.ClientResponseError`` on a non-2xx status and
    ``lxml.etree.XMLSyntaxError`` when the body is not well-formed XML.
    """
    async with session.get(url, raise_for_status=False) as resp:
        resp.raise_for_status()
        body = await resp.read()
    logger.debug("Sitemap %s: %d bytes", url, len(body))
    return iter_locations(body)
