# sitemap_crawler/__init__.py
"""
SitemapCrawler package initializer.
Defines package version and exposes CLI.
"""
__version__ = "0.1.0"

from sitemap_crawler.cli import cli as main_cli
