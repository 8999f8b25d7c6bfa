# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Database engine factory and startup schema bootstrap.
"""

import asyncio
from typing import Callable

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from app.core.config import Settings
from app.core.logging import get_logger
from app.models.tables import metadata

logger = get_logger(__name__)


def build_engine(settings: Settings) -> Engine:
    """Create the engine. SQLite gets a single shared connection; pool tuning
    applies to server databases only."""
    url = settings.DATABASE_URL
    if url.startswith("sqlite"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_recycle=settings.DB_POOL_RECYCLE,
    )


def init_schema(engine: Engine) -> None:
    metadata.create_all(engine)


def ping(engine: Engine) -> None:
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))


async def connect_with_retry(
    connect: Callable[[], None],
    retries: int,
    delay: float,
) -> bool:
    """Run ``connect`` once plus up to ``retries`` more times.

    Each attempt runs in a worker thread so the event loop keeps serving
    requests meanwhile. Returns False when every attempt failed; the caller
    keeps running and storage-backed requests fail individually.
    """
    attempts_left = retries
    while True:
        try:
            await asyncio.to_thread(connect)
            logger.info("Database connection established")
            return True
        except SQLAlchemyError as exc:
            logger.error("Database connection error: %s", exc)
            if attempts_left <= 0:
                logger.error(
                    "Max retries exceeded — service will run without DB "
                    "(storage endpoints will fail)"
                )
                return False
            logger.info(
                "Retrying connection in %.1fs (%d left)", delay, attempts_left
            )
            attempts_left -= 1
            await asyncio.sleep(delay)
