"""Genre model."""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from moviesapi.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from moviesapi.models.associations import MovieGenre


class Genre(Base, TimestampMixin):
    __tablename__ = "genres"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)

    movie_links: Mapped[list["MovieGenre"]] = relationship(
        back_populates="genre",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Genre(id={self.id!r}, name={self.name!r})>"
