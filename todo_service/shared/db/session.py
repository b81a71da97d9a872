"""
Database Session Management

This module configures the async SQLAlchemy engine and session factory for
the embedded SQLite store.

Key Concepts:
=============

1. ENGINE: The database connection manager
   - Maintains a pool of connections to the SQLite file
   - Shared by request handlers and background jobs

2. SESSION: A unit of work with the database
   - One session per request, one per background job run
   - Sessions are NOT safe for concurrent use; never share one between tasks

3. DATABASE: Owns engine + session factory
   - Created by the application factory and stored on app.state
   - Tests build their own instance pointing at a temporary file

Request Lifecycle:
==================
    1. Request arrives at a FastAPI endpoint
    2. get_db() dependency opens Database.session_scope()
    3. Route handler uses the session via services/repositories
    4. On success: session.commit()
    5. On exception: session.rollback()
    6. Finally: session.close() (returns connection to pool)

Background jobs use `async with database.session() as session:` and commit
explicitly when they write.

Configuration:
==============
    DATABASE_URL: sqlite+aiosqlite:///./todos.db
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

# Importing the package registers every model on Base.metadata
from todo_service.shared import models
from todo_service.shared.core.logging import get_logger


logger = get_logger("database")


class Database:
    """
    Engine and session factory for one database URL.

    Example:
        database = Database("sqlite+aiosqlite:///./todos.db")
        await database.init()

        async with database.session() as session:
            repo = TodoRepository(session)
            total, done = await repo.get_stats()

        await database.dispose()
    """

    def __init__(self, url: str, echo: bool = False) -> None:
        self.url = url

        connect_args = {}
        if make_url(url).get_backend_name() == "sqlite":
            # Wait for competing writers instead of failing with "database is locked"
            connect_args["timeout"] = 15

        self.engine: AsyncEngine = create_async_engine(
            url,
            echo=echo,
            # Check if connection is still alive before using it
            pool_pre_ping=True,
            connect_args=connect_args,
        )

        # expire_on_commit=False: objects remain usable after commit
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # SESSIONS
    # ═══════════════════════════════════════════════════════════════════════════

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Plain session for background work; caller commits its own writes."""
        async with self.session_factory() as session:
            yield session

    async def session_scope(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Request-scoped session.

        Lifecycle:
            1. Create new session from pool
            2. Yield session to route handler
            3. If no exception: commit changes
            4. If exception: rollback changes
            5. Always: close session (return connection to pool)
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    # ═══════════════════════════════════════════════════════════════════════════
    # LIFECYCLE
    # ═══════════════════════════════════════════════════════════════════════════

    async def init(self) -> None:
        """
        Verify connectivity and create the schema.

        Called during application startup. Any failure is logged and re-raised
        so the application refuses to boot without a working store.

        Raises:
            Exception: If the connection or schema creation fails
        """
        logger.info("Initializing database connection", url=self.url)
        try:
            async with self.engine.begin() as conn:
                await conn.execute(text("SELECT 1"))
                await conn.run_sync(models.Base.metadata.create_all)

            logger.info("Database connection established successfully")

        except Exception as e:
            logger.error("Failed to connect to database", error=str(e))
            raise

    async def dispose(self) -> None:
        """Close all pooled connections on application shutdown."""
        logger.info("Closing database connection")
        await self.engine.dispose()
        logger.info("Database connection closed successfully")
