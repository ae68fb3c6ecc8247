"""Ratings API endpoint."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from moviesapi.api.errors import NotFoundError
from moviesapi.auth import Claims, require_claims, resolve_user_id
from moviesapi.database import get_db
from moviesapi.models import Movie
from moviesapi.schemas import RatingCreate
from moviesapi.services.ratings import upsert_rating

router = APIRouter(prefix="/ratings")


@router.post("", status_code=status.HTTP_204_NO_CONTENT)
async def rate_movie(
    payload: RatingCreate,
    claims: Claims = Depends(require_claims),
    db: AsyncSession = Depends(get_db),
) -> None:
    """
    Store the caller's rating of a movie.

    Submitting again replaces the caller's previous rating for that movie.
    """
    user_id = await resolve_user_id(db, claims)
    if await db.get(Movie, payload.movie_id) is None:
        raise NotFoundError("Movie", payload.movie_id)

    await upsert_rating(db, payload.movie_id, user_id, payload.rating)
