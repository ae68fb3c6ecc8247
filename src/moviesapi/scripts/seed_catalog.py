"""Seed the catalog with sample genres, actors, theaters and movies for development."""

import asyncio
from datetime import date, timedelta

from sqlalchemy import select

from moviesapi.database import AsyncSessionLocal
from moviesapi.models import Actor, Genre, Movie, MovieActor, MovieGenre, MovieTheater, MovieTheaterMovie


async def seed_catalog() -> None:
    """Insert sample data unless the catalog already has movies."""
    async with AsyncSessionLocal() as session:
        existing = await session.execute(select(Movie.id).limit(1))
        if existing.scalar_one_or_none() is not None:
            print("Catalog already has movies, skipping")
            return

        genres = {name: Genre(name=name) for name in ["Action", "Drama", "Science Fiction"]}
        actors = {
            "keanu": Actor(name="Keanu Reeves", date_of_birth=date(1964, 9, 2)),
            "carrie": Actor(name="Carrie-Anne Moss", date_of_birth=date(1967, 8, 21)),
            "laurence": Actor(name="Laurence Fishburne", date_of_birth=date(1961, 7, 30)),
        }
        theaters = [
            MovieTheater(name="Downtown Cinema", latitude=40.7128, longitude=-74.0060),
            MovieTheater(name="Riverside Screens", latitude=40.7306, longitude=-73.9866),
        ]

        the_matrix = Movie(
            title="The Matrix",
            summary="A hacker learns the world he lives in is a simulation.",
            in_theaters=True,
            release_date=date(1999, 3, 31),
        )
        the_matrix.genre_links = [
            MovieGenre(genre=genres["Action"]),
            MovieGenre(genre=genres["Science Fiction"]),
        ]
        the_matrix.theater_links = [MovieTheaterMovie(movie_theater=theater) for theater in theaters]
        the_matrix.actor_links = [
            MovieActor(actor=actors["keanu"], character="Neo", order=0),
            MovieActor(actor=actors["laurence"], character="Morpheus", order=1),
            MovieActor(actor=actors["carrie"], character="Trinity", order=2),
        ]

        reloaded = Movie(
            title="Matrix Reloaded",
            summary="Neo and the rebel leaders estimate they have 72 hours until Zion falls.",
            in_theaters=False,
            release_date=date.today() + timedelta(days=30),
        )
        reloaded.genre_links = [MovieGenre(genre=genres["Science Fiction"])]
        reloaded.actor_links = [MovieActor(actor=actors["keanu"], character="Neo", order=0)]

        session.add_all([the_matrix, reloaded])
        await session.commit()
        print("✓ Sample catalog created")
        print(f"  - {len(genres)} genres")
        print(f"  - {len(actors)} actors")
        print(f"  - {len(theaters)} movie theaters")
        print("  - 2 movies")


if __name__ == "__main__":
    asyncio.run(seed_catalog())
