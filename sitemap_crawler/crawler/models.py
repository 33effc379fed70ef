# sitemap_crawler/crawler/models.py
"""
Data models and errors for the sitemap crawler.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from http import HTTPStatus
from typing import List, Optional, Sequence, Tuple

_NON_ALNUM = re.compile(r"[^0-9A-Za-z]")


def status_text(status: int) -> str:
    """Compact reason phrase for *status*: ``404 -> "NotFound"``."""
    try:
        phrase = HTTPStatus(status).phrase
    except ValueError:
        return str(status)
    return _NON_ALNUM.sub("", phrase)


@dataclass(slots=True, frozen=True)
class FetchResult:
    """Outcome of a single GET issued for a sitemap location."""

    url: str
    status: int

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def status_text(self) -> str:
        return status_text(self.status)


@dataclass(slots=True, frozen=True)
class CrawlSummary:
    """Counters for one finished sitemap crawl."""

    sitemap_url: str
    submitted: int
    succeeded: int
    failed: int


class FetchError(Exception):
    """Raised when a location answers with a non-2xx status or cannot be reached."""

    def __init__(self, url: str, status: Optional[int] = None, reason: Optional[str] = None) -> None:
        self.url = url
        self.status = status
        self.reason = reason
        if status is not None:
            message = f"Error occurred when attempting to read {url}: HTTP {status}"
        else:
            message = f"Error occurred when attempting to read {url}: {reason}"
        super().__init__(message)


class CrawlError(Exception):
    """One or more sitemap crawls failed; raised after all crawls settled."""

    def __init__(self, failures: Sequence[Tuple[str, BaseException]]) -> None:
        self.failures: List[Tuple[str, BaseException]] = list(failures)
        lines = [f"{url}: {exc!r}" for url, exc in self.failures]
        super().__init__(f"{len(self.failures)} sitemap crawl(s) failed: " + "; ".join(lines))
