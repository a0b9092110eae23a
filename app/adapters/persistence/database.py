"""Async engine, declarative base and transactional session scope.

Invariants:
    - A transaction scope commits on normal exit and rolls back on any exception
    - SQLAlchemy and connection errors leave the scope as BackendError
    - Domain errors raised inside a scope are re-raised unchanged (after rollback)
    - SQLite connections enforce foreign keys, like PostgreSQL does
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator
from urllib.parse import urlsplit

from sqlalchemy import event, text
from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.domain.errors import BackendError

logger = logging.getLogger(__name__)

LOCAL_HOSTS = {"localhost", "127.0.0.1", "::1"}


class Base(DeclarativeBase):
    pass


def normalize_database_url(url: str) -> str:
    """Map provider-style postgres URLs onto the asyncpg driver."""
    if url.startswith("postgres://"):
        return "postgresql+asyncpg://" + url[len("postgres://"):]
    if url.startswith("postgresql://"):
        return "postgresql+asyncpg://" + url[len("postgresql://"):]
    return url


def connect_args_for(url: str) -> dict:
    """TLS off for local PostgreSQL, required (unverified) for remote hosts."""
    if not url.startswith("postgresql+asyncpg://"):
        return {}
    host = urlsplit(url).hostname or ""
    if host in LOCAL_HOSTS:
        return {"ssl": False}
    return {"ssl": "require"}


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseSessionManager:
    """Owns the engine and hands out one-transaction session scopes."""

    def __init__(self, database_url: str, pool_size: int = 10, max_overflow: int = 20):
        url = normalize_database_url(database_url)
        engine_kwargs: dict = {"pool_pre_ping": True}
        if url.startswith("sqlite"):
            engine_kwargs = {}
        else:
            engine_kwargs.update(pool_size=pool_size, max_overflow=max_overflow)

        self.url = url
        self.engine = create_async_engine(
            url, connect_args=connect_args_for(url), **engine_kwargs
        )
        if url.startswith("sqlite"):
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[AsyncSession, None]:
        """Session inside BEGIN ... COMMIT, rolled back on any exception."""
        session = self._session_factory()
        try:
            async with session.begin():
                yield session
        except IntegrityError as e:
            logger.error("DB integrity error: %s", e)
            raise BackendError("Database error", "commit") from e
        except OperationalError as e:
            logger.error("DB operational error: %s", e)
            raise BackendError("Database error", "execute") from e
        except DBAPIError as e:
            logger.error("DB driver error: %s", e)
            raise BackendError("Database error", "query") from e
        except SQLAlchemyError as e:
            logger.error("SQLAlchemy error: %s", e)
            raise BackendError("Database error", "unknown") from e
        except OSError as e:
            logger.error("DB connection error: %s", e)
            raise BackendError("Database error", "connect") from e
        finally:
            await session.close()

    async def create_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        try:
            async with self.transaction() as session:
                await session.execute(text("SELECT 1"))
            return True
        except BackendError:
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()
