"""Database connection, session and schema management.

Provides the async engine and session factory. PostgreSQL (asyncpg) is the
production backend; SQLite (aiosqlite) URLs are accepted for tests.
"""

from abc import ABC, abstractmethod

import logfire
from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from article.config import Settings
from article.persistence.tables import metadata


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    url = make_url(settings.database_url)

    if url.get_backend_name() == "sqlite":
        engine = create_async_engine(
            url,
            echo=settings.debug,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,  # One shared connection keeps :memory: alive
        )
        _enable_sqlite_savepoints(engine)
        return engine

    return create_async_engine(
        url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def _enable_sqlite_savepoints(engine: AsyncEngine) -> None:
    """Let SQLAlchemy emit BEGIN itself so SAVEPOINT works on pysqlite.

    Also turns on foreign key enforcement, which SQLite leaves off.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def do_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def do_begin(conn):
        conn.exec_driver_sql("BEGIN")


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
    )


class SchemaMigrator(ABC):
    """Brings the store's schema up to date and reports reachability."""

    @abstractmethod
    async def migrate(self) -> None:
        """Create missing tables and indexes. Safe to run repeatedly."""
        raise NotImplementedError

    @abstractmethod
    async def ping(self) -> bool:
        """Return whether the store answers a trivial query."""
        raise NotImplementedError


class SqlSchemaMigrator(SchemaMigrator):
    """Schema migrator for a SQLAlchemy engine."""

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine

    async def migrate(self) -> None:
        with logfire.span("database.migrate"):
            async with self.engine.begin() as conn:
                await conn.run_sync(metadata.create_all, checkfirst=True)
            logfire.info("Database schema up to date")

    async def ping(self) -> bool:
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logfire.warn("Database ping failed", error=str(e))
            return False
