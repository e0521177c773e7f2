"""
Sikkim Tourism Backend — Database Bootstrap
=============================================

What:  Creates the schema and seeds the initial destinations.
How:   `metadata.create_all` (CREATE TABLE IF NOT EXISTS semantics), then a
       COUNT on destinations; the seed set is inserted only when it is zero.
Who:   Called from the application lifespan before the server accepts requests.
When:  Every startup; safe to run repeatedly against the same file.

There is no migration mechanism: the schema is forward-only and created on
demand. Any failure here is fatal and surfaces as StartupError.
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from sikkim.database import Base, Database
from sikkim.exceptions import StartupError
from sikkim.models import Destination

logger = logging.getLogger(__name__)


# name, summary, details, region, image, inserted in this order
SEED_DESTINATIONS = [
    (
        "Tsomgo Lake",
        "A stunning glacial lake near Gangtok",
        "Tsomgo (Changu) Lake is a glacial lake situated at 3,753 m. "
        "Visitors enjoy yak rides and the lake's turquoise waters.",
        "East Sikkim",
        "/images/tsomgo.jpg",
    ),
    (
        "Nathula Pass",
        "High altitude pass on India-China border",
        "Nathula is a historic mountain pass on the Indo-China border; "
        "permits may be required.",
        "East Sikkim",
        "/images/nathula.jpg",
    ),
    (
        "Yuksom",
        "Gateway to Kanchenjunga treks",
        "Yuksom is a historic town and starting point for treks to Kanchenjunga.",
        "West Sikkim",
        "/images/yuksom.jpg",
    ),
]


async def create_schema(database: Database) -> None:
    """Create the destinations, bookings and contacts tables if absent."""
    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def seed_destinations(database: Database) -> int:
    """
    Insert the seed set if and only if the destinations table is empty.

    Returns:
        Number of destinations inserted (0 when the table was already populated).
    """
    async with database.session() as session:
        count = await session.scalar(select(func.count()).select_from(Destination))
        if count:
            logger.debug("Destinations table already holds %d rows; skipping seed", count)
            return 0

        for name, summary, details, region, image in SEED_DESTINATIONS:
            session.add(
                Destination(
                    name=name,
                    summary=summary,
                    details=details,
                    region=region,
                    image=image,
                )
            )
            # One INSERT per record, in order, so ids follow the seed order
            await session.flush()

    logger.info("Seeded destinations")
    return len(SEED_DESTINATIONS)


async def init_db(database: Database) -> None:
    """
    Bring the database file to a usable state.

    Raises:
        StartupError: The file could not be opened or a statement failed.
    """
    try:
        await create_schema(database)
        await seed_destinations(database)
    except (SQLAlchemyError, OSError) as e:
        logger.critical("Database bootstrap failed for %s: %s", database.url, e)
        raise StartupError(
            message=f"Could not initialize database: {e}",
            context={"url": database.url, "error_type": type(e).__name__},
        ) from e
