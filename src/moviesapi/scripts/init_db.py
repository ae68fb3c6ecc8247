"""Create all tables from the ORM metadata."""

import asyncio

from moviesapi.database import engine
from moviesapi.models import Base


async def init_db() -> None:
    """Create any missing tables. Existing tables are left untouched."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()
    print(f"✓ Created tables: {', '.join(sorted(Base.metadata.tables))}")


if __name__ == "__main__":
    asyncio.run(init_db())
