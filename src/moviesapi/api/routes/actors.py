"""Actor API endpoints (admin only)."""

import logging
from datetime import date

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from moviesapi.api.errors import NotFoundError
from moviesapi.api.pagination import PaginationParams, get_pagination, insert_pagination_header, paginate
from moviesapi.auth import require_admin
from moviesapi.database import get_db
from moviesapi.mapping import (
    actor_from_create,
    actor_to_response,
    actor_to_search_result,
    apply_actor_update,
)
from moviesapi.models import Actor
from moviesapi.schemas import ActorCreate, ActorResponse, ActorSearchResult, ActorUpdate
from moviesapi.storage import FileStorage, delete_file_after_commit, get_file_storage

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/actors", dependencies=[Depends(require_admin)])

CONTAINER = "actors"
SEARCH_LIMIT = 5


def actor_create_form(
    name: str = Form(..., min_length=1, max_length=120),
    date_of_birth: date = Form(..., alias="dateOfBirth"),
    biography: str | None = Form(None),
) -> ActorCreate:
    return ActorCreate(name=name, date_of_birth=date_of_birth, biography=biography)


def actor_update_form(
    name: str | None = Form(None, min_length=1, max_length=120),
    date_of_birth: date | None = Form(None, alias="dateOfBirth"),
    biography: str | None = Form(None),
) -> ActorUpdate:
    return ActorUpdate(name=name, date_of_birth=date_of_birth, biography=biography)


async def get_actor_or_404(db: AsyncSession, actor_id: int) -> Actor:
    actor = await db.get(Actor, actor_id)
    if actor is None:
        raise NotFoundError("Actor", actor_id)
    return actor


@router.get("", response_model=list[ActorResponse])
async def get_actors(
    response: Response,
    pagination: PaginationParams = Depends(get_pagination),
    db: AsyncSession = Depends(get_db),
) -> list[ActorResponse]:
    stmt = select(Actor).order_by(Actor.name, Actor.id)
    await insert_pagination_header(response, db, stmt)
    result = await db.execute(paginate(stmt, pagination))
    return [actor_to_response(actor) for actor in result.scalars().all()]


@router.get("/searchByName/{query}", response_model=list[ActorSearchResult])
async def search_actors_by_name(
    query: str,
    db: AsyncSession = Depends(get_db),
) -> list[ActorSearchResult]:
    """
    Case-insensitive name search for the cast picker.

    Returns at most five actors ordered by name; a blank query matches nothing.
    """
    if not query.strip():
        return []

    stmt = (
        select(Actor)
        .where(Actor.name.icontains(query, autoescape=True))
        .order_by(Actor.name, Actor.id)
        .limit(SEARCH_LIMIT)
    )
    result = await db.execute(stmt)
    return [actor_to_search_result(actor) for actor in result.scalars().all()]


@router.get("/{actor_id}", response_model=ActorResponse)
async def get_actor(actor_id: int, db: AsyncSession = Depends(get_db)) -> ActorResponse:
    actor = await get_actor_or_404(db, actor_id)
    return actor_to_response(actor)


@router.post("", response_model=ActorResponse, status_code=status.HTTP_201_CREATED)
async def create_actor(
    payload: ActorCreate = Depends(actor_create_form),
    picture: UploadFile | None = File(None),
    db: AsyncSession = Depends(get_db),
    storage: FileStorage = Depends(get_file_storage),
) -> ActorResponse:
    actor = actor_from_create(payload)
    if picture is not None:
        actor.picture = await storage.save_file(CONTAINER, picture)

    db.add(actor)
    await db.flush()
    logger.info(f"Created actor {actor.id} ({actor.name!r})")
    return actor_to_response(actor)


@router.put("/{actor_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_actor(
    actor_id: int,
    payload: ActorUpdate = Depends(actor_update_form),
    picture: UploadFile | None = File(None),
    db: AsyncSession = Depends(get_db),
    storage: FileStorage = Depends(get_file_storage),
) -> None:
    actor = await get_actor_or_404(db, actor_id)
    apply_actor_update(actor, payload)

    if picture is not None:
        actor.picture = await storage.edit_file(CONTAINER, actor.picture, picture)

    logger.info(f"Updated actor {actor_id}")


@router.delete("/{actor_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_actor(
    actor_id: int,
    db: AsyncSession = Depends(get_db),
    storage: FileStorage = Depends(get_file_storage),
) -> None:
    actor = await get_actor_or_404(db, actor_id)
    picture = actor.picture

    await db.delete(actor)
    await db.commit()
    logger.info(f"Deleted actor {actor_id}")

    await delete_file_after_commit(storage, picture, CONTAINER)

