"""SQLAlchemy ORM models."""

from moviesapi.models.actor import Actor
from moviesapi.models.associations import MovieActor, MovieGenre, MovieTheaterMovie
from moviesapi.models.base import Base
from moviesapi.models.genre import Genre
from moviesapi.models.movie import Movie
from moviesapi.models.movie_theater import MovieTheater
from moviesapi.models.rating import Rating
from moviesapi.models.user import User

__all__ = [
    "Actor",
    "Base",
    "Genre",
    "Movie",
    "MovieActor",
    "MovieGenre",
    "MovieTheater",
    "MovieTheaterMovie",
    "Rating",
    "User",
]
