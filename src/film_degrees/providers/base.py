"""
The narrow interface the search engine needs from a film metadata source.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from film_degrees.models import CastCredit, FilmCredit, PersonSearchResult


class GraphDataProvider(ABC):
    """
    Supplies ranked neighbor lists for person and film nodes.

    Each call may raise ProviderError for that lookup only, or
    ProviderFatalError when no lookup can succeed at all.
    """

    @abstractmethod
    async def neighbor_films(self, person_id: int) -> List[FilmCredit]:
        """Films a person appeared in, ranked by popularity descending."""
        pass

    @abstractmethod
    async def neighbor_cast(self, film_id: int) -> List[CastCredit]:
        """Cast of a film, ranked by billing order ascending."""
        pass

    async def search_people(self, query: str) -> List[PersonSearchResult]:
        raise NotImplementedError(f"{type(self).__name__} does not support person search")

    async def person_imdb_id(self, person_id: int) -> Optional[str]:
        return None

    async def film_imdb_id(self, film_id: int) -> Optional[str]:
        return None
