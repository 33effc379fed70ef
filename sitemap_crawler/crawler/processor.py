# sitemap_crawler/crawler/processor.py
"""
Bounded work processor: admits items under a fixed concurrency ceiling,
tracks outstanding fetches and lets callers wait for them to settle.
"""
from __future__ import annotations

import asyncio
import logging
import threading
from typing import Any, Awaitable, Callable, Dict, Generic, List, TypeVar

__all__ = ("BoundedProcessor", "DEFAULT_CONCURRENCY")

DEFAULT_CONCURRENCY = 10

T = TypeVar("T")

logger = logging.getLogger("SitemapCrawler.processor")


class BoundedProcessor(Generic[T]):
    """Runs ``fetch(item)`` for submitted items, at most ``max_concurrency`` at a time.

    Every submitted fetch is tracked in a pending set until it succeeds.
    Failed fetches stay tracked unless ``prune_failed`` is set.
    """

    def __init__(
        self,
        fetch: Callable[[T], Awaitable[Any]],
        max_concurrency: int = DEFAULT_CONCURRENCY,
        *,
        prune_failed: bool = False,
    ) -> None:
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be >= 1")
        self._fetch = fetch
        self._max_concurrency = max_concurrency
        self._prune_failed = prune_failed
        self._slots = asyncio.Semaphore(max_concurrency)
        self._pending: Dict[asyncio.Task[Any], T] = {}
        self._lock = threading.Lock()
        self.succeeded = 0
        self.failed = 0

    @property
    def max_concurrency(self) -> int:
        return self._max_concurrency

    def pending_items(self) -> List[T]:
        """Snapshot of items whose fetch is still tracked."""
        with self._lock:
            return list(self._pending.values())

    async def submit(self, item: T) -> asyncio.Task[None]:
        """Admit *item* and return the acknowledgement of its fetch.

        Waits for a free slot, then starts the fetch and tracks it before
        returning. Awaiting the acknowledgement waits for the fetch outcome;
        failures raised by the fetch are swallowed there, anything else
        propagates. Cancelling a waiting ``submit`` admits nothing.
        """
        await self._slots.acquire()
        try:
            handle = asyncio.ensure_future(self._fetch(item))
        except BaseException:
            self._slots.release()
            raise
        # released even if the handle is cancelled before it starts running
        handle.add_done_callback(lambda _: self._slots.release())
        with self._lock:
            self._pending[handle] = item
        logger.debug("Admitted %s", item)
        return asyncio.create_task(self._acknowledge(handle, item))

    async def drain(self) -> None:
        """Wait until every fetch tracked at call time has settled."""
        with self._lock:
            snapshot = list(self._pending)
        if not snapshot:
            return
        logger.debug("Draining %d pending fetches", len(snapshot))
        # asyncio.wait neither raises for failed handles nor cancels them
        await asyncio.wait(snapshot)

    async def _acknowledge(self, handle: asyncio.Task[Any], item: T) -> None:
        try:
            await asyncio.shield(handle)
        except (Exception, asyncio.CancelledError):
            if not (handle.cancelled() or (handle.done() and handle.exception() is not None)):
                raise  # not the fetch's failure
            self.failed += 1
            logger.debug("Fetch failed for %s", item)
            if self._prune_failed:
                self._untrack(handle)
            return
        self.succeeded += 1
        self._untrack(handle)

    def _untrack(self, handle: asyncio.Task[Any]) -> None:
        with self._lock:
            self._pending.pop(handle, None)
