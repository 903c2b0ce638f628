from fastapi import Request

from film_degrees.config import SearchConfig
from film_degrees.providers import GraphDataProvider

async def get_provider(request: Request) -> GraphDataProvider:
    """Dependency provider to get the shared metadata provider."""
    return request.app.state.provider

async def get_search_config(request: Request) -> SearchConfig:
    """Dependency provider to get the search configuration."""
    return request.app.state.search_config
