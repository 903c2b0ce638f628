"""
BidirectionalSearchEngine - finds a short chain of shared films between two people.

Both origins grow their own DiscoveryState one level at a time, forward first,
and the search stops as soon as the two states share a person or a film.
Neighbors are fetched on demand from a GraphDataProvider, so only a capped,
popularity-ranked slice of the graph is ever explored.
"""

import asyncio
import logging
import time
from typing import Optional

from film_degrees.config import SearchConfig
from film_degrees.exceptions import InvalidOriginError, ProviderFatalError
from film_degrees.models import Path, PersonNode
from film_degrees.providers.base import GraphDataProvider
from film_degrees.search.expander import FrontierExpander
from film_degrees.search.fetcher import BoundedBatchFetcher
from film_degrees.search.models import SearchResult, SearchStatus
from film_degrees.search.reconstruct import degrees_of_separation, join_paths
from film_degrees.search.state import DiscoveryState

logger = logging.getLogger(__name__)


def find_intersection(forward: DiscoveryState, backward: DiscoveryState) -> Optional[Path]:
    """Joined path through the first shared person, else the first shared film, else None."""
    for person_id, forward_path in forward.person_paths.items():
        backward_path = backward.person_paths.get(person_id)
        if backward_path is not None:
            return join_paths(forward_path, backward_path)

    for film_id, forward_path in forward.film_paths.items():
        backward_path = backward.film_paths.get(film_id)
        if backward_path is not None:
            return join_paths(forward_path, backward_path)

    return None


def _validate_origin(origin, label: str) -> PersonNode:
    if not isinstance(origin, PersonNode):
        raise InvalidOriginError(f"{label} must be a person, got {type(origin).__name__}")
    if isinstance(origin.id, bool) or origin.id <= 0:
        raise InvalidOriginError(f"{label} has an invalid id: {origin.id!r}")
    return origin


class BidirectionalSearchEngine:
    """
    Runs a single search. Create one engine per call; nothing is shared
    between searches.
    """

    def __init__(self, provider: GraphDataProvider, config: Optional[SearchConfig] = None):
        self.provider = provider
        self.config = config or SearchConfig()
        self.status = SearchStatus.IDLE
        self.fetcher = BoundedBatchFetcher(
            max_concurrent=self.config.fetch_concurrency,
            delay=self.config.inter_chunk_delay,
        )
        self.expander = FrontierExpander(
            provider,
            self.fetcher,
            films_per_person=self.config.films_per_person,
            cast_per_film=self.config.cast_per_film,
            min_vote_count=self.config.min_vote_count,
        )

    def _result(self, status: SearchStatus, started: float, rounds: int, path: Optional[Path] = None) -> SearchResult:
        self.status = status
        return SearchResult(
            path=path,
            timed_out=status == SearchStatus.TIMED_OUT,
            status=status,
            degrees=degrees_of_separation(path) if path is not None else None,
            rounds=rounds,
            failed_lookups=self.fetcher.failed_lookups,
            elapsed_ms=(time.perf_counter() - started) * 1000,
        )

    async def search(
        self,
        origin_a: PersonNode,
        origin_b: PersonNode,
        timeout: Optional[float] = None,
    ) -> SearchResult:
        """
        Search from ``origin_a`` and ``origin_b`` towards each other.

        Raises:
            InvalidOriginError: an origin is not a valid person, before any lookup
            ProviderFatalError: the provider cannot serve requests at all
        """
        if self.status != SearchStatus.IDLE:
            raise RuntimeError("BidirectionalSearchEngine instances run a single search")

        origin_a = _validate_origin(origin_a, "origin_a")
        origin_b = _validate_origin(origin_b, "origin_b")
        started = time.perf_counter()

        if origin_a.id == origin_b.id:
            return self._result(SearchStatus.FOUND, started, 0, path=[origin_a])

        self.status = SearchStatus.SEARCHING
        timeout = self.config.search_timeout if timeout is None else timeout

        forward = DiscoveryState(origin_a)
        backward = DiscoveryState(origin_b)
        forward_frontier = forward.initial_frontier()
        backward_frontier = backward.initial_frontier()

        cancel_event = asyncio.Event()
        timer = asyncio.get_running_loop().call_later(timeout, cancel_event.set)
        rounds = 0
        path: Optional[Path] = None
        try:
            for _ in range(self.config.max_degrees):
                if cancel_event.is_set():
                    break
                rounds += 1

                forward_frontier = await self.expander.expand(forward_frontier, forward, cancel_event)
                path = find_intersection(forward, backward)
                if path is not None or cancel_event.is_set():
                    break

                backward_frontier = await self.expander.expand(backward_frontier, backward, cancel_event)
                path = find_intersection(forward, backward)
                if path is not None:
                    break

                if not forward_frontier and not backward_frontier:
                    logger.debug(f"Both frontiers exhausted after {rounds} rounds")
                    break
        except ProviderFatalError:
            self.status = SearchStatus.PROVIDER_FAILED
            logger.error(f"Search {origin_a.id} -> {origin_b.id} aborted: provider unavailable")
            raise
        finally:
            timer.cancel()

        if path is not None:
            status = SearchStatus.FOUND
        elif cancel_event.is_set():
            status = SearchStatus.TIMED_OUT
        else:
            status = SearchStatus.NOT_FOUND
        result = self._result(status, started, rounds, path=path)

        logger.info(
            f"SEARCH SUMMARY {origin_a.name or origin_a.id} -> {origin_b.name or origin_b.id}: "
            f"status={result.status.value}, degrees={result.degrees}, rounds={rounds}, "
            f"people={len(forward.person_paths)}+{len(backward.person_paths)}, "
            f"films={len(forward.film_paths)}+{len(backward.film_paths)}, "
            f"failed_lookups={result.failed_lookups}, time={result.elapsed_ms:.1f}ms"
        )
        return result


async def find_path(
    provider: GraphDataProvider,
    origin_a: PersonNode,
    origin_b: PersonNode,
    timeout: Optional[float] = None,
    config: Optional[SearchConfig] = None,
) -> SearchResult:
    """
    Find a chain of shared films from ``origin_a`` to ``origin_b``.

    ``path`` is None with ``timed_out`` False when the capped graph was
    exhausted, and None with ``timed_out`` True when the timeout fired first.
    """
    engine = BidirectionalSearchEngine(provider, config)
    return await engine.search(origin_a, origin_b, timeout=timeout)
