"""Pagination helpers for list endpoints."""

from dataclasses import dataclass

from fastapi import Query, Response
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from moviesapi.config import settings

TOTAL_RECORDS_HEADER = "totalAmountOfRecords"


@dataclass(frozen=True)
class PaginationParams:
    """A requested page. `page` is 1-based."""

    page: int = 1
    records_per_page: int = 10

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.records_per_page


def clamp_records_per_page(
    value: int,
    default: int | None = None,
    maximum: int | None = None,
) -> int:
    """
    Normalise a requested page size.

    Sizes above the maximum are clamped to it; sizes below 1 fall back to
    the default.
    """
    default = settings.default_records_per_page if default is None else default
    maximum = settings.max_records_per_page if maximum is None else maximum
    if value < 1:
        return default
    return min(value, maximum)


def get_pagination(
    page: int = Query(1, ge=1, description="1-based page number"),
    records_per_page: int = Query(
        settings.default_records_per_page,
        alias="recordsPerPage",
        description="Page size, clamped to the configured maximum",
    ),
) -> PaginationParams:
    """FastAPI dependency reading the page request from the query string."""
    return PaginationParams(page=page, records_per_page=clamp_records_per_page(records_per_page))


def paginate(stmt: Select, pagination: PaginationParams) -> Select:
    """Apply the page's OFFSET/LIMIT to an ordered select."""
    return stmt.offset(pagination.offset).limit(pagination.records_per_page)


async def insert_pagination_header(response: Response, db: AsyncSession, stmt: Select) -> int:
    """
    Count the rows of an unpaged select and report it in a response header.

    Returns:
        The total number of records
    """
    count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
    result = await db.execute(count_stmt)
    total = result.scalar_one()
    response.headers[TOTAL_RECORDS_HEADER] = str(total)
    return total
