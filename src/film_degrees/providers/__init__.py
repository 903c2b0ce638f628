# Metadata providers for the person/film graph

from .base import GraphDataProvider
from .tmdb import TMDBClient, TMDBSettings, image_url

__all__ = [
    "GraphDataProvider",
    "TMDBClient",
    "TMDBSettings",
    "image_url",
]
