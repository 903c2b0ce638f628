"""
FrontierExpander - one person -> film -> person level of a search direction.
"""

import asyncio
import logging
from typing import List, Tuple

from film_degrees.models import CastCredit, FilmCredit, FilmNode
from film_degrees.providers.base import GraphDataProvider
from film_degrees.search.fetcher import BoundedBatchFetcher
from film_degrees.search.state import DiscoveryState

logger = logging.getLogger(__name__)


class FrontierExpander:
    """Expands a frontier of person ids by one level, writing discoveries into a DiscoveryState."""

    def __init__(
        self,
        provider: GraphDataProvider,
        fetcher: BoundedBatchFetcher,
        films_per_person: int = 6,
        cast_per_film: int = 15,
        min_vote_count: int = 50,
    ):
        self.provider = provider
        self.fetcher = fetcher
        self.films_per_person = films_per_person
        self.cast_per_film = cast_per_film
        self.min_vote_count = min_vote_count

    def select_films(self, films: List[FilmCredit], state: DiscoveryState) -> List[FilmCredit]:
        """Unseen, sufficiently voted films, most popular first, capped."""
        candidates = [
            f for f in films
            if f.vote_count > self.min_vote_count and not state.has_film(f.id)
        ]
        candidates.sort(key=lambda f: f.popularity, reverse=True)
        return candidates[:self.films_per_person]

    def select_cast(self, cast: List[CastCredit]) -> List[CastCredit]:
        """Top billed cast members, capped."""
        return sorted(cast, key=lambda c: c.order)[:self.cast_per_film]

    async def expand(
        self,
        frontier: List[int],
        state: DiscoveryState,
        cancel_event: asyncio.Event,
    ) -> List[int]:
        """
        Expand ``frontier`` by one level and return the next frontier.

        Returns an empty list without issuing any lookup when the search is
        already cancelled or the frontier is empty.
        """
        if cancel_event.is_set() or not frontier:
            return []

        async def films_of(person_id: int) -> Tuple[int, List[FilmCredit]]:
            films = await self.provider.neighbor_films(person_id)
            return person_id, self.select_films(films, state)

        film_results = await self.fetcher.run(frontier, films_of)

        new_films: List[FilmNode] = []
        for person_id, films in film_results:
            for credit in films:
                film = credit.to_node()
                if state.record_film(person_id, film):
                    new_films.append(film)

        if cancel_event.is_set() or not new_films:
            logger.debug(f"Level stopped after film lookups ({len(new_films)} new films)")
            return []

        async def cast_of(film: FilmNode) -> Tuple[int, List[CastCredit]]:
            cast = await self.provider.neighbor_cast(film.id)
            return film.id, self.select_cast(cast)

        cast_results = await self.fetcher.run(new_films, cast_of)

        next_frontier: List[int] = []
        for film_id, cast in cast_results:
            for credit in cast:
                if state.record_person(film_id, credit.to_node()):
                    next_frontier.append(credit.id)

        logger.debug(
            f"Expanded {len(frontier)} people from origin {state.origin.id}: "
            f"{len(new_films)} new films, {len(next_frontier)} new people"
        )
        return next_frontier
