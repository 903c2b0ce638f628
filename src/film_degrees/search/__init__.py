# Bidirectional person/film search

from .engine import BidirectionalSearchEngine, find_intersection, find_path
from .expander import FrontierExpander
from .fetcher import BoundedBatchFetcher
from .models import SearchResult, SearchStatus
from .reconstruct import degrees_of_separation, join_paths
from .state import DiscoveryState

__all__ = [
    "BidirectionalSearchEngine",
    "BoundedBatchFetcher",
    "DiscoveryState",
    "FrontierExpander",
    "SearchResult",
    "SearchStatus",
    "degrees_of_separation",
    "find_intersection",
    "find_path",
    "join_paths",
]
