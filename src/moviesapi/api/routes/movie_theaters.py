"""Movie theater API endpoints (admin only)."""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from moviesapi.api.errors import NotFoundError
from moviesapi.api.pagination import PaginationParams, get_pagination, insert_pagination_header, paginate
from moviesapi.auth import require_admin
from moviesapi.database import get_db
from moviesapi.mapping import (
    apply_movie_theater_update,
    movie_theater_from_create,
    movie_theater_to_response,
)
from moviesapi.models import MovieTheater
from moviesapi.schemas import MovieTheaterCreate, MovieTheaterResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/movie-theaters", dependencies=[Depends(require_admin)])


async def get_movie_theater_or_404(db: AsyncSession, movie_theater_id: int) -> MovieTheater:
    movie_theater = await db.get(MovieTheater, movie_theater_id)
    if movie_theater is None:
        raise NotFoundError("MovieTheater", movie_theater_id)
    return movie_theater


@router.get("", response_model=list[MovieTheaterResponse])
async def get_movie_theaters(
    response: Response,
    pagination: PaginationParams = Depends(get_pagination),
    db: AsyncSession = Depends(get_db),
) -> list[MovieTheaterResponse]:
    stmt = select(MovieTheater).order_by(MovieTheater.name, MovieTheater.id)
    await insert_pagination_header(response, db, stmt)
    result = await db.execute(paginate(stmt, pagination))
    return [movie_theater_to_response(theater) for theater in result.scalars().all()]


@router.get("/{movie_theater_id}", response_model=MovieTheaterResponse)
async def get_movie_theater(
    movie_theater_id: int,
    db: AsyncSession = Depends(get_db),
) -> MovieTheaterResponse:
    movie_theater = await get_movie_theater_or_404(db, movie_theater_id)
    return movie_theater_to_response(movie_theater)


@router.post("", response_model=MovieTheaterResponse, status_code=status.HTTP_201_CREATED)
async def create_movie_theater(
    payload: MovieTheaterCreate,
    db: AsyncSession = Depends(get_db),
) -> MovieTheaterResponse:
    movie_theater = movie_theater_from_create(payload)
    db.add(movie_theater)
    await db.flush()
    logger.info(f"Created movie theater {movie_theater.id} ({movie_theater.name!r})")
    return movie_theater_to_response(movie_theater)


@router.put("/{movie_theater_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_movie_theater(
    movie_theater_id: int,
    payload: MovieTheaterCreate,
    db: AsyncSession = Depends(get_db),
) -> None:
    movie_theater = await get_movie_theater_or_404(db, movie_theater_id)
    apply_movie_theater_update(movie_theater, payload)
    logger.info(f"Updated movie theater {movie_theater_id}")


@router.delete("/{movie_theater_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_movie_theater(movie_theater_id: int, db: AsyncSession = Depends(get_db)) -> None:
    movie_theater = await get_movie_theater_or_404(db, movie_theater_id)
    await db.delete(movie_theater)
    logger.info(f"Deleted movie theater {movie_theater_id}")
