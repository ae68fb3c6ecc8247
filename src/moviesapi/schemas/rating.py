"""Pydantic schemas for ratings."""

from pydantic import Field

from moviesapi.schemas.base import ApiModel


class RatingCreate(ApiModel):
    movie_id: int
    rating: int = Field(..., ge=1, le=5)
