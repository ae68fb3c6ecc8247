"""Movie model, the aggregate root for cast, genre and theater links."""

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Date, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from moviesapi.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from moviesapi.models.associations import MovieActor, MovieGenre, MovieTheaterMovie
    from moviesapi.models.rating import Rating


class Movie(Base, TimestampMixin):
    """
    Movie model.

    Owns its join rows and ratings: deleting a movie removes them, but never
    the actors, genres or theaters they point at.
    """

    __tablename__ = "movies"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(75), nullable=False, index=True)
    summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    trailer: Mapped[str | None] = mapped_column(String(500), nullable=True)
    in_theaters: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    release_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    poster: Mapped[str | None] = mapped_column(String(500), nullable=True)

    # Relationships
    actor_links: Mapped[list["MovieActor"]] = relationship(
        back_populates="movie",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="MovieActor.order",
    )
    genre_links: Mapped[list["MovieGenre"]] = relationship(
        back_populates="movie",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    theater_links: Mapped[list["MovieTheaterMovie"]] = relationship(
        back_populates="movie",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    ratings: Mapped[list["Rating"]] = relationship(
        back_populates="movie",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Movie(id={self.id!r}, title={self.title!r}, release_date={self.release_date})>"
