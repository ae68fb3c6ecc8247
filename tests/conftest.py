"""Shared test fixtures."""

from collections.abc import AsyncIterator
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import jwt
import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from moviesapi.api.errors import register_exception_handlers
from moviesapi.api.routes import actors, genres, health, movie_theaters, movies, ratings
from moviesapi.config import settings
from moviesapi.database import get_db
from moviesapi.storage import FileStorage, get_file_storage


def make_token(expires_in: timedelta = timedelta(hours=1), **claims) -> str:
    payload = {"exp": datetime.now(timezone.utc) + expires_in, **claims}
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


@pytest.fixture
def test_app() -> FastAPI:
    """FastAPI app with every router and error handler, but no lifespan or static mount."""
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(health.router)
    for module in (genres, actors, movie_theaters, movies, ratings):
        app.include_router(module.router, prefix="/api")
    return app


@pytest.fixture
def db() -> AsyncMock:
    """Mock AsyncSession; tests configure execute/get per call."""
    session = AsyncMock()
    session.add = MagicMock()
    session.add_all = MagicMock()
    return session


@pytest.fixture
def storage() -> AsyncMock:
    storage = AsyncMock(spec=FileStorage)
    storage.save_file.return_value = "http://files.test/media/new.jpg"
    storage.edit_file.return_value = "http://files.test/media/edited.jpg"
    return storage


@pytest.fixture
async def client(test_app: FastAPI, db: AsyncMock, storage: AsyncMock) -> AsyncIterator[AsyncClient]:
    async def override_db():
        yield db

    test_app.dependency_overrides[get_db] = override_db
    test_app.dependency_overrides[get_file_storage] = lambda: storage
    try:
        async with AsyncClient(
            transport=ASGITransport(app=test_app), base_url="http://test"
        ) as ac:
            yield ac
    finally:
        test_app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(email='admin@example.com', role='admin')}"}


@pytest.fixture
def user_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(email='viewer@example.com')}"}


@pytest.fixture
def token_factory():
    """Callable minting signed tokens with arbitrary claims."""
    return make_token
