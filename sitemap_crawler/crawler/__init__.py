# sitemap_crawler/crawler/__init__.py
from sitemap_crawler.crawler.fetcher import Fetcher, report_status
from sitemap_crawler.crawler.models import CrawlError, CrawlSummary, FetchError, FetchResult
from sitemap_crawler.crawler.processor import DEFAULT_CONCURRENCY, BoundedProcessor
from sitemap_crawler.crawler.sitemap import fetch_sitemap

__all__ = [
    "BoundedProcessor",
    "CrawlError",
    "CrawlSummary",
    "DEFAULT_CONCURRENCY",
    "FetchError",
    "FetchResult",
    "Fetcher",
    "fetch_sitemap",
    "report_status",
]
