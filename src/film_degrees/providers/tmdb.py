"""
TMDBClient - GraphDataProvider backed by The Movie Database v3 HTTP API.
"""

import logging
import os
from typing import Any, Dict, List, Optional

import httpx
from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError

from film_degrees.exceptions import ProviderError, ProviderFatalError
from film_degrees.models import CastCredit, FilmCredit, PersonSearchResult
from film_degrees.providers.base import GraphDataProvider

load_dotenv()

logger = logging.getLogger(__name__)

IMAGE_BASE = "https://image.tmdb.org/t/p"


class TMDBSettings(BaseModel):
    """Connection settings for the TMDB API."""
    api_key: Optional[str] = None
    base_url: str = "https://api.themoviedb.org/3"
    language: str = "en-US"
    request_timeout: float = 10.0

    @classmethod
    def from_env(cls) -> "TMDBSettings":
        return cls(
            api_key=os.getenv("TMDB_API_KEY") or None,
            base_url=os.getenv("TMDB_BASE_URL", "https://api.themoviedb.org/3"),
            language=os.getenv("TMDB_LANGUAGE", "en-US"),
            request_timeout=float(os.getenv("TMDB_REQUEST_TIMEOUT", "10")),
        )


def image_url(path: Optional[str], size: str = "w342") -> str:
    """Absolute image URL for a TMDB-relative path, or "" when there is none."""
    if not path:
        return ""
    return f"{IMAGE_BASE}/{size}{path}"


class TMDBClient(GraphDataProvider):
    """
    Async TMDB client sharing one httpx.AsyncClient across calls.

    Use as an async context manager, or call aclose() when done.
    """

    def __init__(
        self,
        settings: Optional[TMDBSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or TMDBSettings.from_env()
        self._client = httpx.AsyncClient(
            base_url=self.settings.base_url,
            timeout=self.settings.request_timeout,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def __aenter__(self) -> "TMDBClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        if not self.settings.api_key:
            raise ProviderFatalError("TMDB_API_KEY is not set")

        query = {"api_key": self.settings.api_key, "language": self.settings.language}
        if params:
            query.update(params)

        try:
            response = await self._client.get(path, params=query)
        except httpx.RequestError as e:
            raise ProviderError(f"TMDB request failed for {path}: {e}") from e

        if response.status_code == 401:
            raise ProviderFatalError(f"TMDB rejected the API key (401): {path}")
        if response.is_error:
            raise ProviderError(f"TMDB error {response.status_code}: {path}")

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderError(f"TMDB returned a non-JSON body for {path}") from e
        if not isinstance(data, dict):
            raise ProviderError(f"Unexpected TMDB response shape for {path}")

        logger.debug(f"GET {path} -> {response.status_code}")
        return data

    async def neighbor_films(self, person_id: int) -> List[FilmCredit]:
        data = await self._get(f"/person/{person_id}/movie_credits")
        try:
            films = [FilmCredit.model_validate(item) for item in data.get("cast") or []]
        except ValidationError as e:
            raise ProviderError(f"Malformed movie credits for person {person_id}: {e}") from e
        films.sort(key=lambda f: f.popularity, reverse=True)
        return films

    async def neighbor_cast(self, film_id: int) -> List[CastCredit]:
        data = await self._get(f"/movie/{film_id}/credits")
        try:
            cast = [CastCredit.model_validate(item) for item in data.get("cast") or []]
        except ValidationError as e:
            raise ProviderError(f"Malformed credits for film {film_id}: {e}") from e
        cast.sort(key=lambda c: c.order)
        return cast

    async def search_people(self, query: str) -> List[PersonSearchResult]:
        data = await self._get("/search/person", params={"query": query, "page": 1})
        try:
            people = [PersonSearchResult.model_validate(item) for item in data.get("results") or []]
        except ValidationError as e:
            raise ProviderError(f"Malformed person search results for '{query}': {e}") from e
        return [p for p in people if p.known_for_department == "Acting"]

    async def person_imdb_id(self, person_id: int) -> Optional[str]:
        data = await self._get(f"/person/{person_id}/external_ids")
        return data.get("imdb_id") or None

    async def film_imdb_id(self, film_id: int) -> Optional[str]:
        data = await self._get(f"/movie/{film_id}")
        return data.get("imdb_id") or None
