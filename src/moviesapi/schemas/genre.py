"""Pydantic schemas for genre data."""

from pydantic import Field, field_validator
from pydantic_core import PydanticCustomError

from moviesapi.schemas.base import ApiModel


def first_letter_uppercase(value: str) -> str:
    """Reject values whose first character is not an uppercase letter."""
    if not value:
        return value
    first = value[0]
    if first != first.upper():
        raise PydanticCustomError(
            "first_letter_uppercase",
            "First letter should be uppercase",
        )
    return value


class GenreCreate(ApiModel):
    """Payload for creating or renaming a genre."""

    name: str = Field(..., min_length=1, max_length=50)

    @field_validator("name")
    @classmethod
    def name_starts_uppercase(cls, value: str) -> str:
        return first_letter_uppercase(value)


class GenreResponse(ApiModel):
    id: int
    name: str
