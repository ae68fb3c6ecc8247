"""Movie theater model."""

from typing import TYPE_CHECKING

from sqlalchemy import Float, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from moviesapi.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from moviesapi.models.associations import MovieTheaterMovie


class MovieTheater(Base, TimestampMixin):
    """
    Movie theater venue.

    The location is stored as a plain WGS84 latitude/longitude pair.
    """

    __tablename__ = "movie_theaters"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(75), nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)

    movie_links: Mapped[list["MovieTheaterMovie"]] = relationship(
        back_populates="movie_theater",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<MovieTheater(id={self.id!r}, name={self.name!r})>"
