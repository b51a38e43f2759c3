"""
Database configuration and session management.

Provides SQLAlchemy async engine setup, session factory, and dependency
injection for database sessions in FastAPI routes.
"""

import logging
from pathlib import Path
from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    AsyncEngine,
    create_async_engine,
    async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from employee_api.core.config import settings
from employee_api.models.base import Base

logger = logging.getLogger(__name__)


def _is_memory_sqlite(database_url: str) -> bool:
    url = make_url(database_url)
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def get_async_engine(database_url: str | None = None) -> AsyncEngine:
    """
    Create and configure the async SQLAlchemy engine.

    For SQLite:
    - Enables check_same_thread=False for async compatibility
    - Uses StaticPool for in-memory databases so every session sees the same tables
    - Enables foreign keys, and WAL mode for file databases

    Args:
        database_url: Override for settings.database_url

    Returns:
        Configured AsyncEngine instance
    """
    database_url = database_url or settings.database_url
    is_sqlite = database_url.startswith("sqlite")

    # SQLite-specific connection arguments (noop for other drivers)
    connect_args: dict = {"check_same_thread": False} if is_sqlite else {}

    engine_kwargs = {
        "echo": settings.db_echo,
        "connect_args": connect_args,
    }

    if is_sqlite and _is_memory_sqlite(database_url):
        engine_kwargs["poolclass"] = StaticPool

    engine = create_async_engine(database_url, **engine_kwargs)

    if is_sqlite:
        use_wal = not _is_memory_sqlite(database_url)

        @event.listens_for(engine.sync_engine, "connect")
        def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            if use_wal:
                cursor.execute("PRAGMA journal_mode=WAL")
            cursor.close()

    return engine


# Global async engine instance
# Created once at import and reused for the process lifetime
engine = get_async_engine()


# Async session factory
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,  # Don't expire objects after commit
    autoflush=False,
)


def _ensure_sqlite_directory(database_url: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    if not database_url.startswith("sqlite") or _is_memory_sqlite(database_url):
        return
    db_path = Path(make_url(database_url).database)
    db_path.parent.mkdir(parents=True, exist_ok=True)


async def init_db() -> None:
    """
    Initialize the database.

    Creates missing tables when settings.db_create_all is enabled.
    Deployments that manage the schema with migrations should set
    DB_CREATE_ALL=false.
    """
    # Import models to ensure metadata is populated before create_all()
    from employee_api import models  # noqa: F401

    _ensure_sqlite_directory(settings.database_url)

    async with engine.begin() as conn:
        if settings.db_create_all:
            await conn.run_sync(Base.metadata.create_all)
            logger.info("Database tables ensured", extra={"tables": sorted(Base.metadata.tables)})


async def close_db() -> None:
    """
    Close the database connection pool.

    Should be called at application shutdown.
    """
    await engine.dispose()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency function to get database session.

    Provides one session per request. Stores commit their own writes;
    anything left pending when the request fails is rolled back.

    Yields:
        AsyncSession instance for database operations

    Example:
        @app.get("/items")
        async def get_items(db: AsyncSession = Depends(get_db)):
            result = await db.execute(select(Item))
            return result.scalars().all()
    """
    async with async_session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
