"""
Pytest configuration and shared fixtures.

StubProvider serves a small in-memory person/film graph so the search can be
exercised without network access.
"""

import asyncio
import logging
from collections import Counter
from typing import Dict, List, Optional, Set

import pytest

from film_degrees.config import SearchConfig
from film_degrees.exceptions import ProviderError
from film_degrees.models import CastCredit, FilmCredit, KnownFor, PersonNode, PersonSearchResult
from film_degrees.providers.base import GraphDataProvider

# Configure logging for tests
logging.basicConfig(level=logging.INFO)


def film(film_id: int, popularity: float = 10.0, votes: int = 100, title: Optional[str] = None) -> FilmCredit:
    return FilmCredit(id=film_id, title=title or f"Film {film_id}", popularity=popularity, vote_count=votes)


def cast(person_id: int, order: int = 0, name: Optional[str] = None) -> CastCredit:
    return CastCredit(id=person_id, name=name or f"Person {person_id}", order=order)


def person(person_id: int, name: Optional[str] = None) -> PersonNode:
    return PersonNode(id=person_id, name=name or f"Person {person_id}")


class StubProvider(GraphDataProvider):
    """In-memory provider that records every call."""

    def __init__(
        self,
        films: Optional[Dict[int, List[FilmCredit]]] = None,
        casts: Optional[Dict[int, List[CastCredit]]] = None,
        failing_people: Optional[Set[int]] = None,
        failing_films: Optional[Set[int]] = None,
        delay: float = 0.0,
        fatal: Optional[Exception] = None,
    ):
        self.films = films or {}
        self.casts = casts or {}
        self.failing_people = failing_people or set()
        self.failing_films = failing_films or set()
        self.delay = delay
        self.fatal = fatal
        self.film_calls: Counter = Counter()
        self.cast_calls: Counter = Counter()
        self.in_flight = 0
        self.max_in_flight = 0
        self.people: List[PersonSearchResult] = []
        self.imdb_ids: Dict[tuple, str] = {}

    @property
    def total_calls(self) -> int:
        return sum(self.film_calls.values()) + sum(self.cast_calls.values())

    async def _enter(self):
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            if self.fatal is not None:
                raise self.fatal
        finally:
            self.in_flight -= 1

    async def neighbor_films(self, person_id: int) -> List[FilmCredit]:
        self.film_calls[person_id] += 1
        await self._enter()
        if person_id in self.failing_people:
            raise ProviderError(f"lookup failed for person {person_id}")
        return list(self.films.get(person_id, []))

    async def neighbor_cast(self, film_id: int) -> List[CastCredit]:
        self.cast_calls[film_id] += 1
        await self._enter()
        if film_id in self.failing_films:
            raise ProviderError(f"lookup failed for film {film_id}")
        return list(self.casts.get(film_id, []))

    async def search_people(self, query: str) -> List[PersonSearchResult]:
        return [p for p in self.people if query.lower() in p.name.lower()]

    async def person_imdb_id(self, person_id: int) -> Optional[str]:
        key = ("person", person_id)
        if key not in self.imdb_ids:
            raise ProviderError(f"no external ids for person {person_id}")
        return self.imdb_ids[key]

    async def film_imdb_id(self, film_id: int) -> Optional[str]:
        key = ("film", film_id)
        if key not in self.imdb_ids:
            raise ProviderError(f"no external ids for film {film_id}")
        return self.imdb_ids[key]


@pytest.fixture
def fast_config() -> SearchConfig:
    """Default caps, no pacing delay."""
    return SearchConfig(inter_chunk_delay=0.0, search_timeout=5.0)


@pytest.fixture
def one_degree_provider() -> StubProvider:
    """Person 1 and person 2 both star in film 100."""
    return StubProvider(
        films={1: [film(100, popularity=50.0)], 2: [film(100, popularity=50.0)]},
        casts={100: [cast(1, order=0), cast(2, order=1)]},
    )


@pytest.fixture
def two_degree_provider() -> StubProvider:
    """1 -[100]- 3 -[200]- 2, with no shared film between 1 and 2."""
    return StubProvider(
        films={
            1: [film(100)],
            3: [film(100), film(200)],
            2: [film(200)],
        },
        casts={
            100: [cast(1, order=0), cast(3, order=1)],
            200: [cast(3, order=0), cast(2, order=1)],
        },
    )


@pytest.fixture
def search_people_provider() -> StubProvider:
    provider = StubProvider(
        films={1: [film(100, title="Apollo 13")], 2: [film(100, title="Apollo 13")]},
        casts={100: [cast(1, name="Tom Hanks"), cast(2, order=1, name="Kevin Bacon")]},
    )
    provider.people = [
        PersonSearchResult(
            id=1,
            name="Tom Hanks",
            known_for_department="Acting",
            popularity=80.0,
            known_for=[KnownFor(title="Forrest Gump"), KnownFor(title="Cast Away"), KnownFor(title="Big")],
        ),
        PersonSearchResult(id=2, name="Kevin Bacon", known_for_department="Acting", popularity=40.0),
    ]
    provider.imdb_ids = {("person", 1): "nm0000158", ("film", 100): "tt0112384"}
    return provider
