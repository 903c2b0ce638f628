from fastapi import APIRouter, Depends, HTTPException, Query
import logging

from film_degrees.config import SearchConfig
from film_degrees.exceptions import ProviderError, ProviderFatalError
from film_degrees.providers import GraphDataProvider
from film_degrees.search import SearchStatus, find_path
from backend.dependencies import get_provider, get_search_config
from backend.models.api_models import (
    ActorSearchHit,
    ActorSearchResponse,
    FindPathRequest,
    FindPathResponse,
)
from backend.services.enrichment_service import enrich_with_imdb_ids

router = APIRouter(prefix="/api", tags=["pathfinder"])
logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2
MAX_SEARCH_RESULTS = 8

@router.get("/search-actor", response_model=ActorSearchResponse)
async def search_actor(
    q: str = Query("", description="Partial actor name"),
    provider: GraphDataProvider = Depends(get_provider),
) -> ActorSearchResponse:
    """
    Search actors by name for the search-as-you-type picker.
    """
    query = q.strip()
    if len(query) < MIN_QUERY_LENGTH:
        return ActorSearchResponse(results=[])

    try:
        people = await provider.search_people(query)
    except ProviderError as e:
        logger.warning(f"Actor search failed for '{query}': {e}")
        raise HTTPException(status_code=502, detail=e.message)

    results = []
    for person in people[:MAX_SEARCH_RESULTS]:
        titles = [k.title or k.name for k in person.known_for[:2]]
        results.append(ActorSearchHit(
            id=person.id,
            name=person.name,
            profile_path=person.profile_path,
            popularity=person.popularity,
            known_for=", ".join(t for t in titles if t) or None,
        ))
    return ActorSearchResponse(results=results)

@router.post("/find-path", response_model=FindPathResponse)
async def find_actor_path(
    request: FindPathRequest,
    provider: GraphDataProvider = Depends(get_provider),
    search_config: SearchConfig = Depends(get_search_config),
) -> FindPathResponse:
    """
    Connect two actors through the films they appeared in.

    408 when the search timed out, 404 when no connection exists within the
    degree limit.
    """
    try:
        result = await find_path(
            provider,
            request.actor1.to_node(),
            request.actor2.to_node(),
            config=search_config,
        )
    except ProviderFatalError as e:
        logger.error(f"Path search aborted: {e}")
        raise HTTPException(status_code=502, detail=e.message)

    if result.status == SearchStatus.TIMED_OUT:
        raise HTTPException(
            status_code=408,
            detail="Search timed out. These actors may be too obscure or unconnected. Try more popular actors.",
        )
    if result.path is None:
        raise HTTPException(
            status_code=404,
            detail=f"No connection found within {search_config.max_degrees} degrees. Try different actors.",
        )

    enriched = await enrich_with_imdb_ids(provider, result.path)
    logger.info(
        f"Path found: {request.actor1.id} -> {request.actor2.id} "
        f"({result.degrees} degrees, {result.elapsed_ms:.1f}ms)"
    )
    return FindPathResponse(path=enriched, degrees=result.degrees)
