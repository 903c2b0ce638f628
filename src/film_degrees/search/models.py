"""
Result models for the bidirectional search.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from film_degrees.models import Node


class SearchStatus(Enum):
    """Lifecycle of one search call."""
    IDLE = "idle"
    SEARCHING = "searching"
    FOUND = "found"
    NOT_FOUND = "not_found"
    TIMED_OUT = "timed_out"
    PROVIDER_FAILED = "provider_failed"


class SearchResult(BaseModel):
    """Outcome of find_path."""
    path: Optional[List[Node]] = Field(None, description="Alternating person/film chain from origin A to origin B")
    timed_out: bool = Field(False, description="True when the timeout fired before the search resolved")
    status: SearchStatus = Field(..., description="Terminal search status")
    degrees: Optional[int] = Field(None, description="Film hops between the two origins")
    rounds: int = Field(0, description="Search rounds started")
    failed_lookups: int = Field(0, description="Provider lookups skipped after a per-item failure")
    elapsed_ms: float = Field(0.0, description="Wall time of the search in milliseconds")

    @property
    def found(self) -> bool:
        return self.path is not None
