"""Rating writes and vote aggregation."""

import logging

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from moviesapi.auth import Claims, resolve_user_id
from moviesapi.models import Rating

logger = logging.getLogger(__name__)


def build_rating_upsert(movie_id: int, user_id: str, rate: int):
    """
    INSERT a rating, or overwrite the existing one for the same (movie, user).

    Relying on the primary key conflict keeps concurrent submissions from the
    same user down to a single row.
    """
    stmt = insert(Rating).values(movie_id=movie_id, user_id=user_id, rate=rate)
    return stmt.on_conflict_do_update(
        index_elements=[Rating.movie_id, Rating.user_id],
        set_={"rate": stmt.excluded.rate, "updated_at": func.now()},
    )


async def upsert_rating(db: AsyncSession, movie_id: int, user_id: str, rate: int) -> None:
    await db.execute(build_rating_upsert(movie_id, user_id, rate))
    logger.info(f"User {user_id} rated movie {movie_id}: {rate}")


async def get_votes(db: AsyncSession, movie_id: int, claims: Claims | None) -> tuple[float, int]:
    """
    Average rating of a movie and the caller's own rating.

    The caller's rating is only looked up for authenticated callers and only
    when the movie has been rated at all.

    Returns:
        (average_vote, user_vote); 0.0 and 0 when there is nothing to report
    """
    result = await db.execute(
        select(func.avg(Rating.rate), func.count()).where(Rating.movie_id == movie_id)
    )
    average, count = result.one()
    if not count:
        return 0.0, 0

    user_vote = 0
    if claims is not None:
        user_id = await resolve_user_id(db, claims)
        result = await db.execute(
            select(Rating.rate).where(Rating.movie_id == movie_id, Rating.user_id == user_id)
        )
        user_vote = result.scalar_one_or_none() or 0

    return float(average), user_vote
