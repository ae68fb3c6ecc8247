"""
Conversions between ORM entities and API schemas.

Every entity/schema pair has an explicit function here. Functions that build
list responses only read scalar columns; the nested projections read the
association collections and must only be called on movies loaded with
`selectinload` (see `services.movie_queries.movie_detail_query`).
"""

from moviesapi.models import (
    Actor,
    Genre,
    Movie,
    MovieActor,
    MovieGenre,
    MovieTheater,
    MovieTheaterMovie,
)
from moviesapi.schemas import (
    ActorCreate,
    ActorResponse,
    ActorSearchResult,
    ActorUpdate,
    GenreCreate,
    GenreResponse,
    MovieActorResponse,
    MovieCreate,
    MovieResponse,
    MovieTheaterCreate,
    MovieTheaterResponse,
)

# ---------------------------------------------------------------------------
# Genres
# ---------------------------------------------------------------------------


def genre_to_response(genre: Genre) -> GenreResponse:
    return GenreResponse(id=genre.id, name=genre.name)


def genre_from_create(data: GenreCreate) -> Genre:
    return Genre(name=data.name)


def apply_genre_update(genre: Genre, data: GenreCreate) -> Genre:
    genre.name = data.name
    return genre


# ---------------------------------------------------------------------------
# Actors
# ---------------------------------------------------------------------------


def actor_to_response(actor: Actor) -> ActorResponse:
    return ActorResponse(
        id=actor.id,
        name=actor.name,
        date_of_birth=actor.date_of_birth,
        biography=actor.biography,
        picture=actor.picture,
    )


def actor_to_search_result(actor: Actor) -> ActorSearchResult:
    return ActorSearchResult(id=actor.id, name=actor.name, picture=actor.picture)


def actor_from_create(data: ActorCreate) -> Actor:
    return Actor(
        name=data.name,
        date_of_birth=data.date_of_birth,
        biography=data.biography,
    )


def apply_actor_update(actor: Actor, data: ActorUpdate) -> Actor:
    """Copy only the fields that were supplied onto the actor."""
    for field, value in data.model_dump(exclude_none=True).items():
        setattr(actor, field, value)
    return actor


# ---------------------------------------------------------------------------
# Movie theaters
# ---------------------------------------------------------------------------


def movie_theater_to_response(movie_theater: MovieTheater) -> MovieTheaterResponse:
    return MovieTheaterResponse(
        id=movie_theater.id,
        name=movie_theater.name,
        latitude=movie_theater.latitude,
        longitude=movie_theater.longitude,
    )


def movie_theater_from_create(data: MovieTheaterCreate) -> MovieTheater:
    return MovieTheater(name=data.name, latitude=data.latitude, longitude=data.longitude)


def apply_movie_theater_update(movie_theater: MovieTheater, data: MovieTheaterCreate) -> MovieTheater:
    movie_theater.name = data.name
    movie_theater.latitude = data.latitude
    movie_theater.longitude = data.longitude
    return movie_theater


# ---------------------------------------------------------------------------
# Movies
# ---------------------------------------------------------------------------


def movie_to_response(movie: Movie) -> MovieResponse:
    """Project the scalar columns of a movie; nested lists stay empty."""
    return MovieResponse(
        id=movie.id,
        title=movie.title,
        summary=movie.summary,
        trailer=movie.trailer,
        in_theaters=movie.in_theaters,
        release_date=movie.release_date,
        poster=movie.poster,
    )


def map_movie_genres(movie: Movie) -> list[GenreResponse]:
    return [GenreResponse(id=link.genre_id, name=link.genre.name) for link in movie.genre_links]


def map_movie_theaters(movie: Movie) -> list[MovieTheaterResponse]:
    return [
        MovieTheaterResponse(
            id=link.movie_theater_id,
            name=link.movie_theater.name,
            latitude=link.movie_theater.latitude,
            longitude=link.movie_theater.longitude,
        )
        for link in movie.theater_links
    ]


def map_movie_actors(movie: Movie) -> list[MovieActorResponse]:
    """Project the cast, sorted by display order."""
    actors = [
        MovieActorResponse(
            id=link.actor_id,
            name=link.actor.name,
            character=link.character,
            picture=link.actor.picture,
            order=link.order,
        )
        for link in movie.actor_links
    ]
    return sorted(actors, key=lambda actor: actor.order)


def movie_to_detail(movie: Movie, average_vote: float = 0.0, user_vote: int = 0) -> MovieResponse:
    """Project a fully loaded movie including its genres, theaters and cast."""
    response = movie_to_response(movie)
    response.genres = map_movie_genres(movie)
    response.movie_theaters = map_movie_theaters(movie)
    response.actors = map_movie_actors(movie)
    response.average_vote = average_vote
    response.user_vote = user_vote
    return response


def apply_movie_fields(movie: Movie, data: MovieCreate) -> Movie:
    """Copy the scalar fields of the form onto the movie. The poster is handled separately."""
    movie.title = data.title
    movie.summary = data.summary
    movie.trailer = data.trailer
    movie.in_theaters = data.in_theaters
    movie.release_date = data.release_date
    return movie


def build_genre_links(data: MovieCreate) -> list[MovieGenre]:
    return [MovieGenre(genre_id=genre_id) for genre_id in dict.fromkeys(data.genres_ids)]


def build_theater_links(data: MovieCreate) -> list[MovieTheaterMovie]:
    return [
        MovieTheaterMovie(movie_theater_id=theater_id)
        for theater_id in dict.fromkeys(data.movie_theaters_ids)
    ]


def build_actor_links(data: MovieCreate) -> list[MovieActor]:
    """Build cast rows; each actor's order is its position in the submitted list."""
    return [
        MovieActor(actor_id=actor.id, character=actor.character, order=position)
        for position, actor in enumerate(data.actors)
    ]


def movie_from_create(data: MovieCreate) -> Movie:
    movie = apply_movie_fields(Movie(), data)
    movie.genre_links = build_genre_links(data)
    movie.theater_links = build_theater_links(data)
    movie.actor_links = build_actor_links(data)
    return movie
