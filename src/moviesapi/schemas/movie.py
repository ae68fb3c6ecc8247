"""Pydantic schemas for movie data."""

from datetime import date

from pydantic import Field

from moviesapi.schemas.base import ApiModel
from moviesapi.schemas.genre import GenreResponse
from moviesapi.schemas.movie_theater import MovieTheaterResponse


class MovieActorCreate(ApiModel):
    """Cast entry as submitted; its list position becomes the display order."""

    id: int
    character: str | None = Field(None, max_length=75)


class MovieCreate(ApiModel):
    """Movie payload parsed from the multipart create/edit form."""

    title: str = Field(..., min_length=1, max_length=75)
    summary: str | None = None
    trailer: str | None = Field(None, max_length=500)
    in_theaters: bool = False
    release_date: date
    genres_ids: list[int] = Field(default_factory=list)
    movie_theaters_ids: list[int] = Field(default_factory=list)
    actors: list[MovieActorCreate] = Field(default_factory=list)


class MovieActorResponse(ApiModel):
    id: int
    name: str
    character: str | None = None
    picture: str | None = None
    order: int


class MovieResponse(ApiModel):
    """
    Movie response schema.

    The nested lists are only populated by the detail endpoint; list
    endpoints leave them empty.
    """

    id: int
    title: str
    summary: str | None = None
    trailer: str | None = None
    in_theaters: bool
    release_date: date
    poster: str | None = None
    genres: list[GenreResponse] = Field(default_factory=list)
    movie_theaters: list[MovieTheaterResponse] = Field(default_factory=list)
    actors: list[MovieActorResponse] = Field(default_factory=list)
    average_vote: float = 0.0
    user_vote: int = 0


class LandingPageResponse(ApiModel):
    upcoming_releases: list[MovieResponse]
    in_theaters: list[MovieResponse]


class MoviePostGetResponse(ApiModel):
    """Reference data for the movie creation form."""

    genres: list[GenreResponse]
    movie_theaters: list[MovieTheaterResponse]


class MoviePutGetResponse(ApiModel):
    """Current movie state plus reference data for the edit form."""

    movie: MovieResponse
    selected_genres: list[GenreResponse]
    non_selected_genres: list[GenreResponse]
    selected_movie_theaters: list[MovieTheaterResponse]
    non_selected_movie_theaters: list[MovieTheaterResponse]
    actors: list[MovieActorResponse]
