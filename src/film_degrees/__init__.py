"""
Film Degrees - Core Library

Finds the shortest chain of shared films between two people, discovering the
person/film graph on demand from a remote metadata provider.
"""

from .config import SearchConfig
from .models import CastCredit, FilmCredit, FilmNode, PersonNode
from .search import SearchResult, SearchStatus, find_path

__all__ = [
    "CastCredit",
    "FilmCredit",
    "FilmNode",
    "PersonNode",
    "SearchConfig",
    "SearchResult",
    "SearchStatus",
    "find_path",
]
