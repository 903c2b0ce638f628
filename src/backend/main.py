import logging
import uvicorn
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.config import config
from backend.api.pathfinder import router as pathfinder_router
from film_degrees.config import SearchConfig
from film_degrees.logging_config import setup_logging
from film_degrees.providers import TMDBClient

setup_logging(level=config.log_level, use_rich=config.debug)

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info("Starting Film Degrees API...")

    provider = TMDBClient()
    if not provider.settings.api_key:
        logger.warning("TMDB_API_KEY is not set; path searches will fail")

    search_config = SearchConfig.from_env()
    logger.info(
        f"Search config: max_degrees={search_config.max_degrees}, "
        f"films_per_person={search_config.films_per_person}, cast_per_film={search_config.cast_per_film}, "
        f"timeout={search_config.search_timeout}s"
    )

    app.state.provider = provider
    app.state.search_config = search_config

    yield

    logger.info("Shutting down Film Degrees API...")
    await provider.aclose()

app = FastAPI(
    title="Film Degrees API",
    description="Degrees of separation between actors through shared films",
    version="0.1.0",
    debug=config.debug,
    lifespan=lifespan
)

app.include_router(pathfinder_router)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "film-degrees-api",
        "version": "0.1.0",
    }

@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler for unhandled errors."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": "An unexpected error occurred"
        }
    )

if __name__ == "__main__":
    uvicorn.run(
        "backend.main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
    )
