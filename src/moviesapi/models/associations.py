"""Join entities linking movies to actors, genres and theaters."""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from moviesapi.models.base import Base

if TYPE_CHECKING:
    from moviesapi.models.actor import Actor
    from moviesapi.models.genre import Genre
    from moviesapi.models.movie import Movie
    from moviesapi.models.movie_theater import MovieTheater


class MovieActor(Base):
    """
    Cast entry.

    `order` is the display position of the actor in the cast list. It is
    assigned from the submission order when the movie is written.
    """

    __tablename__ = "movies_actors"

    actor_id: Mapped[int] = mapped_column(
        ForeignKey("actors.id", ondelete="CASCADE"),
        primary_key=True,
    )
    movie_id: Mapped[int] = mapped_column(
        ForeignKey("movies.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
    character: Mapped[str | None] = mapped_column(String(75), nullable=True)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    movie: Mapped["Movie"] = relationship(back_populates="actor_links")
    actor: Mapped["Actor"] = relationship(back_populates="movie_links")

    def __repr__(self) -> str:
        return (
            f"<MovieActor(movie_id={self.movie_id!r}, actor_id={self.actor_id!r}, "
            f"order={self.order})>"
        )


class MovieGenre(Base):
    __tablename__ = "movies_genres"

    genre_id: Mapped[int] = mapped_column(
        ForeignKey("genres.id", ondelete="CASCADE"),
        primary_key=True,
    )
    movie_id: Mapped[int] = mapped_column(
        ForeignKey("movies.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    movie: Mapped["Movie"] = relationship(back_populates="genre_links")
    genre: Mapped["Genre"] = relationship(back_populates="movie_links")


class MovieTheaterMovie(Base):
    __tablename__ = "movie_theaters_movies"

    movie_theater_id: Mapped[int] = mapped_column(
        ForeignKey("movie_theaters.id", ondelete="CASCADE"),
        primary_key=True,
    )
    movie_id: Mapped[int] = mapped_column(
        ForeignKey("movies.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    movie: Mapped["Movie"] = relationship(back_populates="theater_links")
    movie_theater: Mapped["MovieTheater"] = relationship(back_populates="movie_links")
