"""Pydantic schemas for API requests and responses."""

from moviesapi.schemas.actor import ActorCreate, ActorResponse, ActorSearchResult, ActorUpdate
from moviesapi.schemas.genre import GenreCreate, GenreResponse
from moviesapi.schemas.movie import (
    LandingPageResponse,
    MovieActorCreate,
    MovieActorResponse,
    MovieCreate,
    MoviePostGetResponse,
    MoviePutGetResponse,
    MovieResponse,
)
from moviesapi.schemas.movie_theater import MovieTheaterCreate, MovieTheaterResponse
from moviesapi.schemas.rating import RatingCreate

__all__ = [
    "ActorCreate",
    "ActorResponse",
    "ActorSearchResult",
    "ActorUpdate",
    "GenreCreate",
    "GenreResponse",
    "LandingPageResponse",
    "MovieActorCreate",
    "MovieActorResponse",
    "MovieCreate",
    "MoviePostGetResponse",
    "MoviePutGetResponse",
    "MovieResponse",
    "MovieTheaterCreate",
    "MovieTheaterResponse",
    "RatingCreate",
]
