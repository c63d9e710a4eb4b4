"""
Database Configuration.

SQLAlchemy async engine and session management.
Uses lazy initialization to prevent import-time failures when .env is not configured.
"""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy import event, inspect, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from webcalendar.backend.core.logging import get_logger
from webcalendar.backend.core.utils import utc_now

logger = get_logger(__name__)

# Module-level state for lazy initialization
_engine: AsyncEngine | None = None
_async_session_factory: async_sessionmaker[AsyncSession] | None = None


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """
    Turn on foreign key enforcement for every new SQLite connection.

    SQLite ignores FOREIGN KEY clauses (including ON DELETE CASCADE)
    unless the pragma is set per connection. No-op for other dialects.
    """
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection: Any, connection_record: Any) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def _create_engine() -> AsyncEngine:
    """Create async SQLAlchemy engine."""
    from webcalendar.backend.core.config import get_app_config, get_database_url

    url = get_database_url()
    db_config = get_app_config().database

    if url.startswith("sqlite"):
        engine = create_async_engine(url, echo=db_config.echo)
    else:
        engine = create_async_engine(
            url,
            pool_size=db_config.pool_size,
            max_overflow=db_config.max_overflow,
            pool_timeout=db_config.pool_timeout,
            pool_recycle=db_config.pool_recycle,
            pool_pre_ping=True,
            echo=db_config.echo,
            connect_args={"timeout": db_config.connect_timeout},
        )

    enable_sqlite_foreign_keys(engine)
    logger.debug("Database engine created", extra={"dialect": engine.dialect.name})
    return engine


def get_engine() -> AsyncEngine:
    """
    Get the database engine, creating it on first use.

    Returns:
        SQLAlchemy async engine instance

    Raises:
        RuntimeError: If the project root cannot be located
        FileNotFoundError: If a configuration file is missing
    """
    global _engine
    if _engine is None:
        _engine = _create_engine()
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Get the session factory, creating it on first use.

    Returns:
        SQLAlchemy async session factory
    """
    global _async_session_factory
    if _async_session_factory is None:
        _async_session_factory = async_sessionmaker(
            get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
        )
    return _async_session_factory


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Provide a transactional database session.

    Commits when the consumer finishes without error, rolls back and
    re-raises otherwise.

    Usage:
        async for session in get_db_session():
            service = UserService(session)
            await service.register(UserCreate(email="a@x.com", password="p"))
    """
    session_factory = get_session_factory()
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def dispose_engine() -> None:
    """Close all pooled connections and forget the engine."""
    global _engine, _async_session_factory
    if _engine is not None:
        await _engine.dispose()
        logger.debug("Database engine disposed")
    _engine = None
    _async_session_factory = None


async def create_tables(engine: AsyncEngine | None = None) -> list[str]:
    """
    Create all mapped tables that do not exist yet.

    Intended for local development and tests; production schemas are
    managed through Alembic migrations.

    Returns:
        Names of the tables known to the metadata
    """
    from webcalendar.backend.models import Base

    engine = engine or get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    tables = sorted(Base.metadata.tables)
    logger.info("Tables created", extra={"tables": tables})
    return tables


async def check_database(engine: AsyncEngine | None = None) -> dict[str, Any]:
    """
    Check database connectivity.

    Opens a connection, runs SELECT 1 and lists the visible tables.
    The connection is released on every exit path. Never raises.

    Returns:
        Dict with status, latency, dialect and tables, or status and error
    """
    try:
        engine = engine or get_engine()

        start = utc_now()
        async with engine.connect() as conn:
            if conn.closed:
                raise RuntimeError("Connection closed immediately after opening")

            result = await conn.execute(text("SELECT 1"))
            probe = result.scalar_one()
            if probe != 1:
                raise RuntimeError(f"Unexpected probe result: {probe!r}")

            tables = await conn.run_sync(
                lambda sync_conn: inspect(sync_conn).get_table_names()
            )

        latency_ms = int((utc_now() - start).total_seconds() * 1000)

        return {
            "status": "healthy",
            "latency_ms": latency_ms,
            "dialect": engine.dialect.name,
            "database": engine.url.database,
            "tables": sorted(tables),
        }

    except Exception as e:
        logger.warning("Database health check failed", extra={"error": str(e)})
        return {
            "status": "unhealthy",
            "error": str(e),
        }
