"""
BoundedBatchFetcher - paced, chunked fan-out over remote lookups.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Generic, List, Sequence, TypeVar

from film_degrees.exceptions import ProviderError, ProviderFatalError

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class BoundedBatchFetcher(Generic[T, R]):
    """
    Runs lookups in consecutive chunks of ``max_concurrent`` items.

    Lookups inside a chunk run concurrently; the next chunk starts only after
    the whole chunk has settled and ``delay`` seconds have passed. A failing
    item (ProviderError) is dropped from the results and counted in
    ``failed_lookups``; ProviderFatalError and programming errors propagate.
    """

    def __init__(
        self,
        max_concurrent: int = 5,
        delay: float = 0.25,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        if max_concurrent < 1:
            raise ValueError("max_concurrent must be at least 1")
        self.max_concurrent = max_concurrent
        self.delay = delay
        self._sleep = sleep
        self.failed_lookups = 0
        self.total_lookups = 0

    async def run(self, items: Sequence[T], lookup: Callable[[T], Awaitable[R]]) -> List[R]:
        """Return the results of the successful lookups, in input order."""
        results: List[R] = []
        for start in range(0, len(items), self.max_concurrent):
            chunk = items[start:start + self.max_concurrent]
            outcomes = await asyncio.gather(*(lookup(item) for item in chunk), return_exceptions=True)
            self.total_lookups += len(chunk)

            for item, outcome in zip(chunk, outcomes):
                if isinstance(outcome, ProviderFatalError):
                    raise outcome
                if isinstance(outcome, ProviderError):
                    self.failed_lookups += 1
                    logger.warning(f"Lookup for {item!r} failed, skipping: {outcome}")
                    continue
                if isinstance(outcome, BaseException):
                    raise outcome
                results.append(outcome)

            if start + self.max_concurrent < len(items):
                await self._sleep(self.delay)

        logger.debug(f"Batch of {len(items)} lookups finished with {len(results)} results")
        return results
