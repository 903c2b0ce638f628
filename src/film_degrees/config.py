import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


class SearchConfig(BaseModel):
    """Tuning knobs for one bidirectional search."""

    # Reachability
    max_degrees: int = Field(4, ge=1, description="Maximum number of search rounds")
    films_per_person: int = Field(6, ge=1, description="Top films kept per person, by popularity")
    cast_per_film: int = Field(15, ge=1, description="Top cast kept per film, by billing order")
    min_vote_count: int = Field(50, ge=0, description="Films with vote_count at or below this are skipped")

    # Rate limiting and latency
    fetch_concurrency: int = Field(5, ge=1, description="Lookups in flight per chunk")
    inter_chunk_delay: float = Field(0.25, ge=0, description="Seconds to wait between chunks")
    search_timeout: float = Field(45.0, gt=0, description="Seconds before the search is cancelled")

    @classmethod
    def from_env(cls) -> "SearchConfig":
        """Create config from environment variables."""
        return cls(
            max_degrees=int(os.getenv("FILM_DEGREES_MAX_DEGREES", "4")),
            films_per_person=int(os.getenv("FILM_DEGREES_FILMS_PER_PERSON", "6")),
            cast_per_film=int(os.getenv("FILM_DEGREES_CAST_PER_FILM", "15")),
            min_vote_count=int(os.getenv("FILM_DEGREES_MIN_VOTE_COUNT", "50")),
            fetch_concurrency=int(os.getenv("FILM_DEGREES_FETCH_CONCURRENCY", "5")),
            inter_chunk_delay=float(os.getenv("FILM_DEGREES_INTER_CHUNK_DELAY", "0.25")),
            search_timeout=float(os.getenv("FILM_DEGREES_SEARCH_TIMEOUT", "45")),
        )
