"""Pydantic schemas for actor data."""

from datetime import date

from pydantic import Field

from moviesapi.schemas.base import ApiModel


class ActorCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=120)
    date_of_birth: date
    biography: str | None = None


class ActorUpdate(ApiModel):
    """Partial actor update; fields left as None keep their stored value."""

    name: str | None = Field(None, min_length=1, max_length=120)
    date_of_birth: date | None = None
    biography: str | None = None


class ActorResponse(ApiModel):
    id: int
    name: str
    date_of_birth: date
    biography: str | None = None
    picture: str | None = None


class ActorSearchResult(ApiModel):
    """Compact actor entry used by the cast picker."""

    id: int
    name: str
    picture: str | None = None
