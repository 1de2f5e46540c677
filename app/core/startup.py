"""
Startup utilities for the application.
"""
import logging

from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncEngine

from app.core.config import settings
from app.core.database import Base, engine

# Registers the vehicles table on Base.metadata.
from app.models import vehicle  # noqa: F401

logger = logging.getLogger(__name__)


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


async def ensure_vehicles_table(db_engine: AsyncEngine = engine) -> None:
    """Create the vehicles table if it does not exist yet."""
    try:
        async with db_engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Vehicles table is ready")
    except OperationalError as e:
        logger.error("Could not create vehicles table. Is the database reachable? Error: %s", e)
        raise
