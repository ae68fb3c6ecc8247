"""Movies API endpoints."""

import logging
from datetime import date

from fastapi import APIRouter, Depends, File, Form, Query, Response, UploadFile, status
from pydantic import TypeAdapter, ValidationError
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from moviesapi.api.errors import NotFoundError, ValidationFailedError
from moviesapi.api.pagination import PaginationParams, get_pagination, insert_pagination_header, paginate
from moviesapi.auth import Claims, get_optional_claims, require_admin
from moviesapi.config import settings
from moviesapi.database import get_db
from moviesapi.mapping import (
    apply_movie_fields,
    build_actor_links,
    build_genre_links,
    build_theater_links,
    genre_to_response,
    movie_from_create,
    movie_theater_to_response,
    movie_to_detail,
    movie_to_response,
)
from moviesapi.models import Actor, Genre, Movie, MovieActor, MovieGenre, MovieTheater, MovieTheaterMovie
from moviesapi.schemas import (
    LandingPageResponse,
    MovieActorCreate,
    MovieCreate,
    MoviePostGetResponse,
    MoviePutGetResponse,
    MovieResponse,
)
from moviesapi.services.movie_queries import (
    NO_GENRE_FILTER,
    MovieFilter,
    filtered_movies_query,
    in_theaters_query,
    movie_detail_query,
    today,
    upcoming_releases_query,
)
from moviesapi.services.ratings import get_votes
from moviesapi.storage import FileStorage, delete_file_after_commit, get_file_storage

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/movies")

CONTAINER = "movies"

_ids_adapter = TypeAdapter(list[int])
_actors_adapter = TypeAdapter(list[MovieActorCreate])


# ---------------------------------------------------------------------------
# Form parsing and validation helpers
# ---------------------------------------------------------------------------


def _parse_json_field(adapter: TypeAdapter, raw: str | None, field: str, errors: list[str]) -> list:
    """Decode a JSON-encoded form field, collecting errors instead of raising."""
    if raw is None or not raw.strip():
        return []
    try:
        return adapter.validate_json(raw)
    except ValidationError as e:
        errors.extend(f"{field}: {error['msg']}" for error in e.errors())
        return []


def movie_form(
    title: str = Form(..., min_length=1, max_length=75),
    summary: str | None = Form(None),
    trailer: str | None = Form(None, max_length=500),
    in_theaters: bool = Form(False, alias="inTheaters"),
    release_date: date = Form(..., alias="releaseDate"),
    genres_ids: str | None = Form(None, alias="genresIds"),
    movie_theaters_ids: str | None = Form(None, alias="movieTheatersIds"),
    actors: str | None = Form(None),
) -> MovieCreate:
    """
    Build a MovieCreate from the multipart form.

    The association fields arrive as JSON strings, e.g. genresIds="[1,2]" and
    actors='[{"id": 3, "character": "Neo"}]'.
    """
    errors: list[str] = []
    parsed_genres = _parse_json_field(_ids_adapter, genres_ids, "genresIds", errors)
    parsed_theaters = _parse_json_field(_ids_adapter, movie_theaters_ids, "movieTheatersIds", errors)
    parsed_actors = _parse_json_field(_actors_adapter, actors, "actors", errors)

    actor_ids = [actor.id for actor in parsed_actors]
    duplicates = sorted({actor_id for actor_id in actor_ids if actor_ids.count(actor_id) > 1})
    if duplicates:
        errors.append(f"actors: Duplicate actor id(s) {', '.join(map(str, duplicates))}")

    if errors:
        raise ValidationFailedError(errors)

    return MovieCreate(
        title=title,
        summary=summary,
        trailer=trailer,
        in_theaters=in_theaters,
        release_date=release_date,
        genres_ids=parsed_genres,
        movie_theaters_ids=parsed_theaters,
        actors=parsed_actors,
    )


async def _unknown_ids(db: AsyncSession, model: type, ids: list[int], field: str) -> list[str]:
    wanted = set(ids)
    if not wanted:
        return []
    result = await db.execute(select(model.id).where(model.id.in_(wanted)))
    missing = sorted(wanted - set(result.scalars().all()))
    if not missing:
        return []
    return [f"{field}: Unknown id(s) {', '.join(map(str, missing))}"]


async def validate_references(db: AsyncSession, data: MovieCreate) -> None:
    """Reject genre, theater and actor ids that do not exist."""
    errors = [
        *await _unknown_ids(db, Genre, data.genres_ids, "genresIds"),
        *await _unknown_ids(db, MovieTheater, data.movie_theaters_ids, "movieTheatersIds"),
        *await _unknown_ids(db, Actor, [actor.id for actor in data.actors], "actors"),
    ]
    if errors:
        raise ValidationFailedError(errors)


async def replace_movie_links(db: AsyncSession, movie_id: int, data: MovieCreate) -> None:
    """Swap the movie's genre, theater and cast rows for the submitted sets."""
    for link_model in (MovieGenre, MovieTheaterMovie, MovieActor):
        await db.execute(delete(link_model).where(link_model.movie_id == movie_id))

    links = [*build_genre_links(data), *build_theater_links(data), *build_actor_links(data)]
    for link in links:
        link.movie_id = movie_id
    db.add_all(links)


async def get_movie_or_404(db: AsyncSession, movie_id: int) -> Movie:
    movie = await db.get(Movie, movie_id)
    if movie is None:
        raise NotFoundError("Movie", movie_id)
    return movie


async def load_movie_detail(db: AsyncSession, movie_id: int, claims: Claims | None) -> MovieResponse:
    result = await db.execute(movie_detail_query(movie_id))
    movie = result.scalar_one_or_none()
    if movie is None:
        raise NotFoundError("Movie", movie_id)

    average_vote, user_vote = await get_votes(db, movie_id, claims)
    return movie_to_detail(movie, average_vote=average_vote, user_vote=user_vote)


async def _all_genres(db: AsyncSession) -> list[Genre]:
    result = await db.execute(select(Genre).order_by(Genre.name, Genre.id))
    return list(result.scalars().all())


async def _all_movie_theaters(db: AsyncSession) -> list[MovieTheater]:
    result = await db.execute(select(MovieTheater).order_by(MovieTheater.name, MovieTheater.id))
    return list(result.scalars().all())


# ---------------------------------------------------------------------------
# Read endpoints
# ---------------------------------------------------------------------------


@router.get("", response_model=LandingPageResponse)
async def get_landing_page(db: AsyncSession = Depends(get_db)) -> LandingPageResponse:
    """Next upcoming releases and current in-theaters movies, by release date."""
    reference_date = today()
    limit = settings.landing_page_size

    upcoming = await db.execute(upcoming_releases_query(reference_date, limit))
    upcoming_releases = [movie_to_response(movie) for movie in upcoming.scalars().all()]

    showing = await db.execute(in_theaters_query(limit))
    in_theaters = [movie_to_response(movie) for movie in showing.scalars().all()]

    return LandingPageResponse(upcoming_releases=upcoming_releases, in_theaters=in_theaters)


@router.get("/filter", response_model=list[MovieResponse])
async def filter_movies(
    response: Response,
    title: str | None = Query(None, description="Case-sensitive title substring"),
    in_theaters: bool = Query(False, alias="inTheaters"),
    upcoming_releases: bool = Query(False, alias="upcomingReleases"),
    genre_id: int = Query(NO_GENRE_FILTER, alias="genreId", description="0 for any genre"),
    pagination: PaginationParams = Depends(get_pagination),
    db: AsyncSession = Depends(get_db),
) -> list[MovieResponse]:
    """
    Filter movies, ordered by title and paginated.

    The total number of matches is returned in the totalAmountOfRecords header.
    """
    criteria = MovieFilter(
        title=title,
        in_theaters=in_theaters,
        upcoming_releases=upcoming_releases,
        genre_id=genre_id,
    )
    stmt = filtered_movies_query(criteria, today())

    await insert_pagination_header(response, db, stmt)
    result = await db.execute(paginate(stmt, pagination))
    return [movie_to_response(movie) for movie in result.scalars().all()]


@router.get(
    "/postget",
    response_model=MoviePostGetResponse,
    dependencies=[Depends(require_admin)],
)
async def get_movie_form_data(db: AsyncSession = Depends(get_db)) -> MoviePostGetResponse:
    """Genres and theaters to choose from when creating a movie."""
    genres = await _all_genres(db)
    movie_theaters = await _all_movie_theaters(db)
    return MoviePostGetResponse(
        genres=[genre_to_response(genre) for genre in genres],
        movie_theaters=[movie_theater_to_response(theater) for theater in movie_theaters],
    )


@router.get(
    "/putget/{movie_id}",
    response_model=MoviePutGetResponse,
    dependencies=[Depends(require_admin)],
)
async def get_movie_edit_data(movie_id: int, db: AsyncSession = Depends(get_db)) -> MoviePutGetResponse:
    """The movie as currently stored plus the options for the edit form."""
    movie = await load_movie_detail(db, movie_id, claims=None)

    selected_genre_ids = {genre.id for genre in movie.genres}
    selected_theater_ids = {theater.id for theater in movie.movie_theaters}
    genres = [genre_to_response(genre) for genre in await _all_genres(db)]
    movie_theaters = [movie_theater_to_response(theater) for theater in await _all_movie_theaters(db)]

    return MoviePutGetResponse(
        movie=movie,
        selected_genres=movie.genres,
        non_selected_genres=[g for g in genres if g.id not in selected_genre_ids],
        selected_movie_theaters=movie.movie_theaters,
        non_selected_movie_theaters=[t for t in movie_theaters if t.id not in selected_theater_ids],
        actors=movie.actors,
    )


@router.get("/{movie_id}", response_model=MovieResponse)
async def get_movie(
    movie_id: int,
    claims: Claims | None = Depends(get_optional_claims),
    db: AsyncSession = Depends(get_db),
) -> MovieResponse:
    """Movie detail with genres, theaters, cast, average vote and the caller's vote."""
    return await load_movie_detail(db, movie_id, claims)


# ---------------------------------------------------------------------------
# Write endpoints
# ---------------------------------------------------------------------------


@router.post(
    "",
    response_model=int,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_movie(
    payload: MovieCreate = Depends(movie_form),
    poster: UploadFile | None = File(None),
    db: AsyncSession = Depends(get_db),
    storage: FileStorage = Depends(get_file_storage),
) -> int:
    """Create a movie with its associations. Returns the new movie id."""
    await validate_references(db, payload)

    movie = movie_from_create(payload)
    if poster is not None:
        movie.poster = await storage.save_file(CONTAINER, poster)

    db.add(movie)
    await db.flush()
    logger.info(
        f"Created movie {movie.id} ({movie.title!r}) with {len(movie.genre_links)} genres, "
        f"{len(movie.theater_links)} theaters, {len(movie.actor_links)} actors"
    )
    return movie.id


@router.put(
    "/{movie_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
async def update_movie(
    movie_id: int,
    payload: MovieCreate = Depends(movie_form),
    poster: UploadFile | None = File(None),
    db: AsyncSession = Depends(get_db),
    storage: FileStorage = Depends(get_file_storage),
) -> None:
    """
    Update a movie.

    The genre, theater and cast sets are replaced wholesale. The poster is
    only replaced when a new file is uploaded.
    """
    movie = await get_movie_or_404(db, movie_id)
    await validate_references(db, payload)

    apply_movie_fields(movie, payload)
    await replace_movie_links(db, movie_id, payload)

    if poster is not None:
        movie.poster = await storage.edit_file(CONTAINER, movie.poster, poster)

    logger.info(f"Updated movie {movie_id}")


@router.delete(
    "/{movie_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
async def delete_movie(
    movie_id: int,
    db: AsyncSession = Depends(get_db),
    storage: FileStorage = Depends(get_file_storage),
) -> None:
    movie = await get_movie_or_404(db, movie_id)
    poster = movie.poster

    await db.delete(movie)
    await db.commit()
    logger.info(f"Deleted movie {movie_id}")

    await delete_file_after_commit(storage, poster, CONTAINER)
