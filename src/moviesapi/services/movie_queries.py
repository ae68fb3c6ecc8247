"""
Query builders for movie listings and details.

The filter endpoint composes its WHERE clause from named predicates: each
supplied criterion contributes one parameterized SQLAlchemy expression and
absent criteria contribute nothing. Results are always ordered by title.
"""

from dataclasses import dataclass
from datetime import date, datetime, timezone

from sqlalchemy import ColumnElement, Select, select
from sqlalchemy.orm import selectinload

from moviesapi.models import Movie, MovieActor, MovieGenre, MovieTheaterMovie

# genreId value meaning "any genre"
NO_GENRE_FILTER = 0


@dataclass(frozen=True)
class MovieFilter:
    """Criteria accepted by the movie filter endpoint."""

    title: str | None = None
    in_theaters: bool = False
    upcoming_releases: bool = False
    genre_id: int = NO_GENRE_FILTER


@dataclass(frozen=True)
class NamedPredicate:
    name: str
    clause: ColumnElement[bool]


def today() -> date:
    """Current UTC date, the reference point for "upcoming" releases."""
    return datetime.now(timezone.utc).date()


def build_movie_filters(criteria: MovieFilter, reference_date: date) -> list[NamedPredicate]:
    """
    Translate filter criteria into predicates.

    Args:
        criteria: The requested filters
        reference_date: "Today"; upcoming releases are strictly after it

    Returns:
        One predicate per supplied criterion, in a stable order
    """
    predicates: list[NamedPredicate] = []

    if criteria.title:
        # LIKE is case-sensitive on PostgreSQL; wildcards in the input are escaped
        predicates.append(
            NamedPredicate("title", Movie.title.contains(criteria.title, autoescape=True))
        )

    if criteria.in_theaters:
        predicates.append(NamedPredicate("in_theaters", Movie.in_theaters.is_(True)))

    if criteria.upcoming_releases:
        predicates.append(NamedPredicate("upcoming_releases", Movie.release_date > reference_date))

    if criteria.genre_id != NO_GENRE_FILTER:
        predicates.append(
            NamedPredicate(
                "genre",
                Movie.genre_links.any(MovieGenre.genre_id == criteria.genre_id),
            )
        )

    return predicates


def filtered_movies_query(criteria: MovieFilter, reference_date: date) -> Select:
    """Select movies matching all supplied criteria, ordered by title."""
    stmt = select(Movie)
    for predicate in build_movie_filters(criteria, reference_date):
        stmt = stmt.where(predicate.clause)
    return stmt.order_by(Movie.title, Movie.id)


def upcoming_releases_query(reference_date: date, limit: int) -> Select:
    return (
        select(Movie)
        .where(Movie.release_date > reference_date)
        .order_by(Movie.release_date, Movie.id)
        .limit(limit)
    )


def in_theaters_query(limit: int) -> Select:
    return (
        select(Movie)
        .where(Movie.in_theaters.is_(True))
        .order_by(Movie.release_date, Movie.id)
        .limit(limit)
    )


def movie_detail_query(movie_id: int) -> Select:
    """Select one movie with its genres, theaters and cast eagerly loaded."""
    return (
        select(Movie)
        .where(Movie.id == movie_id)
        .options(
            selectinload(Movie.genre_links).selectinload(MovieGenre.genre),
            selectinload(Movie.theater_links).selectinload(MovieTheaterMovie.movie_theater),
            selectinload(Movie.actor_links).selectinload(MovieActor.actor),
        )
    )
