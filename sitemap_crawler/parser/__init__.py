from sitemap_crawler.parser.sitemap_parser import iter_locations

__all__ = ["iter_locations"]
