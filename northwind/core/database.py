"""
Database configuration and session management.

Provides SQLAlchemy async engine setup, session factory, and session
generators for repositories, scripts and tests.
"""

from typing import AsyncGenerator, Optional

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    AsyncEngine,
    create_async_engine,
    async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from northwind.core.config import settings
from northwind.core.logging_config import get_logger
from northwind.models.base import Base

logger = get_logger(__name__)


def get_async_engine(database_url: Optional[str] = None) -> AsyncEngine:
    """
    Create and configure the async SQLAlchemy engine.

    For SQLite:
    - Uses StaticPool (single shared connection, required for :memory:)
    - Enables check_same_thread=False for async compatibility
    - Turns on foreign key enforcement for every connection

    Args:
        database_url: Override for settings.database_url

    Returns:
        Configured AsyncEngine instance
    """
    url = database_url or settings.database_url
    is_sqlite = url.startswith("sqlite")

    connect_args: dict = {"check_same_thread": False} if is_sqlite else {}

    engine_kwargs = {
        "echo": settings.database_echo,
        "connect_args": connect_args,
    }

    if is_sqlite:
        engine_kwargs["poolclass"] = StaticPool

    engine = create_async_engine(url, **engine_kwargs)

    # SQLite ignores REFERENCES clauses unless this pragma is set per connection.
    # The driver's own transaction handling also has to be switched off, with
    # BEGIN emitted explicitly, for SAVEPOINTs to nest inside the transaction.
    if is_sqlite:
        @event.listens_for(engine.sync_engine, "connect")
        def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
            dbapi_connection.isolation_level = None
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        @event.listens_for(engine.sync_engine, "begin")
        def _do_begin(conn):  # noqa: ANN001
            conn.exec_driver_sql("BEGIN")

    return engine


def get_session_maker(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Build a session factory bound to ``bind``."""
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,
    )


# Global async engine instance
engine = get_async_engine()

# Async session factory
async_session_maker = get_session_maker(engine)


async def init_db(bind: Optional[AsyncEngine] = None) -> None:
    """
    Initialize the database.

    Tables are created from model metadata only when ENABLE_DB_CREATE_ALL
    is set; otherwise the schema is expected to exist already.
    """
    # Import models so metadata is populated before create_all().
    from northwind import models  # noqa: F401

    target = bind or engine
    if not settings.enable_db_create_all:
        logger.info("Skipping create_all (ENABLE_DB_CREATE_ALL not set)")
        return

    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created", extra={"tables": sorted(Base.metadata.tables)})


async def close_db(bind: Optional[AsyncEngine] = None) -> None:
    """
    Close the database connection.

    Should be called at shutdown to cleanly close all pooled connections.
    """
    await (bind or engine).dispose()


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Session generator for scripts and background tasks.

    Yields:
        AsyncSession instance for database operations

    Example:
        async for session in get_session():
            repo = CategoryRepository(session)
            categories = await repo.get_all_categories()

    Note:
        - Caller must explicitly commit
        - Exceptions trigger rollback before propagating
    """
    async with async_session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


class DatabaseHealthCheck:
    """
    Database health check utilities.

    Provides methods to verify database connectivity and readiness.
    """

    @staticmethod
    async def check_connection(bind: Optional[AsyncEngine] = None) -> bool:
        """
        Check if database connection is healthy.

        Returns:
            True if database is reachable, False otherwise
        """
        try:
            async with (bind or engine).connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception:
            logger.exception("Database health check failed")
            return False

    @staticmethod
    def get_database_info() -> dict:
        """
        Get database information for monitoring.

        Returns:
            Dictionary with the backend name and driver
        """
        url = engine.url
        return {
            "url": url.render_as_string(hide_password=True),
            "dialect": url.get_backend_name(),
            "driver": url.get_driver_name(),
            "async": True,
        }
