"""Genre API endpoints."""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from moviesapi.api.errors import NotFoundError
from moviesapi.api.pagination import PaginationParams, get_pagination, insert_pagination_header, paginate
from moviesapi.auth import require_admin
from moviesapi.database import get_db
from moviesapi.mapping import apply_genre_update, genre_from_create, genre_to_response
from moviesapi.models import Genre
from moviesapi.schemas import GenreCreate, GenreResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/genres")


async def get_genre_or_404(db: AsyncSession, genre_id: int) -> Genre:
    genre = await db.get(Genre, genre_id)
    if genre is None:
        raise NotFoundError("Genre", genre_id)
    return genre


@router.get("", response_model=list[GenreResponse])
async def get_genres(
    response: Response,
    pagination: PaginationParams = Depends(get_pagination),
    db: AsyncSession = Depends(get_db),
) -> list[GenreResponse]:
    """Page through genres ordered by name."""
    stmt = select(Genre).order_by(Genre.name, Genre.id)
    await insert_pagination_header(response, db, stmt)
    result = await db.execute(paginate(stmt, pagination))
    return [genre_to_response(genre) for genre in result.scalars().all()]


@router.get("/all", response_model=list[GenreResponse])
async def get_all_genres(db: AsyncSession = Depends(get_db)) -> list[GenreResponse]:
    """All genres ordered by name, unpaginated (used by the movie filter form)."""
    result = await db.execute(select(Genre).order_by(Genre.name, Genre.id))
    return [genre_to_response(genre) for genre in result.scalars().all()]


@router.get("/{genre_id}", response_model=GenreResponse)
async def get_genre(genre_id: int, db: AsyncSession = Depends(get_db)) -> GenreResponse:
    genre = await get_genre_or_404(db, genre_id)
    return genre_to_response(genre)


@router.post(
    "",
    response_model=GenreResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_genre(payload: GenreCreate, db: AsyncSession = Depends(get_db)) -> GenreResponse:
    genre = genre_from_create(payload)
    db.add(genre)
    await db.flush()
    logger.info(f"Created genre {genre.id} ({genre.name!r})")
    return genre_to_response(genre)


@router.put(
    "/{genre_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
async def update_genre(
    genre_id: int,
    payload: GenreCreate,
    db: AsyncSession = Depends(get_db),
) -> None:
    genre = await get_genre_or_404(db, genre_id)
    apply_genre_update(genre, payload)
    logger.info(f"Renamed genre {genre_id} to {payload.name!r}")


@router.delete(
    "/{genre_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
async def delete_genre(genre_id: int, db: AsyncSession = Depends(get_db)) -> None:
    genre = await get_genre_or_404(db, genre_id)
    await db.delete(genre)
    logger.info(f"Deleted genre {genre_id}")
