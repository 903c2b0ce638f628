"""
Per-direction discovery state for the bidirectional search.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from film_degrees.models import FilmNode, Path, PersonNode


@dataclass
class DiscoveryState:
    """
    Paths from one origin to every node discovered from it.

    Each stored path runs origin -> keyed node inclusive. The first path
    recorded for an id is kept; later discoveries of the same id are ignored.
    """
    origin: PersonNode
    person_paths: Dict[int, Path] = field(default_factory=dict)
    film_paths: Dict[int, Path] = field(default_factory=dict)

    def __post_init__(self):
        self.person_paths.setdefault(self.origin.id, [self.origin])

    def has_person(self, person_id: int) -> bool:
        return person_id in self.person_paths

    def has_film(self, film_id: int) -> bool:
        return film_id in self.film_paths

    def record_film(self, via_person_id: int, film: FilmNode) -> bool:
        """Store the path to ``film`` through ``via_person_id``. False if already known."""
        if film.id in self.film_paths:
            return False
        self.film_paths[film.id] = self.person_paths[via_person_id] + [film]
        return True

    def record_person(self, via_film_id: int, person: PersonNode) -> bool:
        """Store the path to ``person`` through ``via_film_id``. False if already known."""
        if person.id in self.person_paths:
            return False
        self.person_paths[person.id] = self.film_paths[via_film_id] + [person]
        return True

    def initial_frontier(self) -> List[int]:
        return [self.origin.id]
