"""Tests for the movie theaters API endpoints."""

from unittest.mock import AsyncMock, MagicMock

from httpx import AsyncClient

from moviesapi.models import MovieTheater


def make_theater(id: int = 1, name: str = "Downtown Cinema") -> MovieTheater:
    return MovieTheater(id=id, name=name, latitude=40.7128, longitude=-74.0060)


async def test_list_theaters_sets_total_header(
    client: AsyncClient, db: AsyncMock, admin_headers: dict
) -> None:
    count = MagicMock()
    count.scalar_one.return_value = 1
    rows = MagicMock()
    rows.scalars.return_value.all.return_value = [make_theater()]
    db.execute = AsyncMock(side_effect=[count, rows])

    response = await client.get("/api/movie-theaters", headers=admin_headers)

    assert response.status_code == 200
    assert response.headers["totalAmountOfRecords"] == "1"
    assert response.json() == [
        {"id": 1, "name": "Downtown Cinema", "latitude": 40.7128, "longitude": -74.0060}
    ]


async def test_theater_endpoints_require_admin(client: AsyncClient, user_headers: dict) -> None:
    anonymous = await client.get("/api/movie-theaters")
    non_admin = await client.get("/api/movie-theaters", headers=user_headers)

    assert anonymous.status_code == 401
    assert non_admin.status_code == 403


async def test_create_theater(client: AsyncClient, db: AsyncMock, admin_headers: dict) -> None:
    async def assign_id():
        db.add.call_args.args[0].id = 5

    db.flush = AsyncMock(side_effect=assign_id)
    payload = {"name": "Riverside Screens", "latitude": 40.73, "longitude": -73.98}

    response = await client.post("/api/movie-theaters", json=payload, headers=admin_headers)

    assert response.status_code == 201
    assert response.json() == {"id": 5, **payload}


async def test_create_theater_validates_coordinates(
    client: AsyncClient, db: AsyncMock, admin_headers: dict
) -> None:
    payload = {"name": "Nowhere", "latitude": 91, "longitude": -181}

    response = await client.post("/api/movie-theaters", json=payload, headers=admin_headers)

    assert response.status_code == 400
    assert response.json() == [
        "latitude: Input should be less than or equal to 90",
        "longitude: Input should be greater than or equal to -180",
    ]
    db.add.assert_not_called()


async def test_update_theater_moves_location(
    client: AsyncClient, db: AsyncMock, admin_headers: dict
) -> None:
    theater = make_theater()
    db.get = AsyncMock(return_value=theater)

    response = await client.put(
        "/api/movie-theaters/1",
        json={"name": "Downtown Cinema", "latitude": 51.5, "longitude": -0.12},
        headers=admin_headers,
    )

    assert response.status_code == 204
    assert (theater.latitude, theater.longitude) == (51.5, -0.12)


async def test_get_missing_theater_returns_404(
    client: AsyncClient, db: AsyncMock, admin_headers: dict
) -> None:
    db.get = AsyncMock(return_value=None)

    response = await client.get("/api/movie-theaters/42", headers=admin_headers)

    assert response.status_code == 404
    assert response.content == b""


async def test_delete_theater(client: AsyncClient, db: AsyncMock, admin_headers: dict) -> None:
    theater = make_theater()
    db.get = AsyncMock(return_value=theater)

    response = await client.delete("/api/movie-theaters/1", headers=admin_headers)

    assert response.status_code == 204
    db.delete.assert_awaited_once_with(theater)
