"""Rating model: one score per (movie, user) pair."""

from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from moviesapi.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from moviesapi.models.movie import Movie
    from moviesapi.models.user import User


class Rating(Base, TimestampMixin):
    """
    User rating of a movie.

    The composite primary key enforces a single row per (movie, user), which
    the ratings endpoint relies on for its ON CONFLICT upsert.
    """

    __tablename__ = "ratings"
    __table_args__ = (CheckConstraint("rate BETWEEN 1 AND 5", name="ck_ratings_rate_range"),)

    movie_id: Mapped[int] = mapped_column(
        ForeignKey("movies.id", ondelete="CASCADE"),
        primary_key=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
    rate: Mapped[int] = mapped_column(Integer, nullable=False)

    movie: Mapped["Movie"] = relationship(back_populates="ratings")
    user: Mapped["User"] = relationship(back_populates="ratings")

    def __repr__(self) -> str:
        return f"<Rating(movie_id={self.movie_id!r}, user_id={self.user_id!r}, rate={self.rate})>"
