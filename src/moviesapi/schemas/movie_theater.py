"""Pydantic schemas for movie theater data."""

from pydantic import Field

from moviesapi.schemas.base import ApiModel


class MovieTheaterCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=75)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class MovieTheaterResponse(ApiModel):
    id: int
    name: str
    latitude: float
    longitude: float
