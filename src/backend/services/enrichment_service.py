"""
Best-effort IMDb id lookup for the nodes of a found path.
"""

import asyncio
import logging
from typing import List, Sequence

from film_degrees.exceptions import ProviderError
from film_degrees.providers import GraphDataProvider
from backend.models.api_models import EnrichedNode

logger = logging.getLogger(__name__)


async def _enrich_node(provider: GraphDataProvider, node) -> EnrichedNode:
    try:
        if node.type == "person":
            imdb_id = await provider.person_imdb_id(node.id)
        else:
            imdb_id = await provider.film_imdb_id(node.id)
    except ProviderError as e:
        logger.debug(f"No IMDb id for {node.type} {node.id}: {e}")
        imdb_id = None
    return EnrichedNode(
        type=node.type,
        id=node.id,
        name=node.name,
        image_path=node.image_path,
        imdb_id=imdb_id,
    )


async def enrich_with_imdb_ids(provider: GraphDataProvider, path: Sequence) -> List[EnrichedNode]:
    """Attach IMDb ids to every node; a failed lookup leaves that node's id as None."""
    return list(await asyncio.gather(*(_enrich_node(provider, node) for node in path)))
