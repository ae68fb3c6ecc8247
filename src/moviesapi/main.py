"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from moviesapi.api.errors import register_exception_handlers
from moviesapi.api.pagination import TOTAL_RECORDS_HEADER
from moviesapi.api.routes import actors, genres, health, movie_theaters, movies, ratings
from moviesapi.config import settings
from moviesapi.database import engine
from moviesapi.storage.local import MEDIA_URL_PATH

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: local uploads are served from the media root
    if settings.file_storage == "local":
        settings.media_root.mkdir(parents=True, exist_ok=True)
        logger.info(f"Serving uploaded files from {settings.media_root.resolve()}")

    yield

    # Shutdown: close pooled database connections
    await engine.dispose()
    logger.info("Database engine disposed")


# Create FastAPI app
app = FastAPI(
    title="Movies API",
    description="Movie catalog with actors, genres, theaters and user ratings",
    version="0.1.0",
    lifespan=lifespan,
)

register_exception_handlers(app)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[TOTAL_RECORDS_HEADER],
)

# Include routers
app.include_router(health.router)
app.include_router(genres.router, prefix="/api", tags=["genres"])
app.include_router(actors.router, prefix="/api", tags=["actors"])
app.include_router(movie_theaters.router, prefix="/api", tags=["movie-theaters"])
app.include_router(movies.router, prefix="/api", tags=["movies"])
app.include_router(ratings.router, prefix="/api", tags=["ratings"])

# Uploaded files for the local storage backend
app.mount(
    MEDIA_URL_PATH,
    StaticFiles(directory=settings.media_root, check_dir=False),
    name="media",
)
