"""Relational storage backend — PostgreSQL (asyncpg) in production."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from app.adapters.persistence.database import DatabaseSessionManager
from app.adapters.persistence.repositories import (
    SqlAssigneeRepository,
    SqlAssignmentRepository,
)
from app.application.ports.storage_backend import StorageBackend, UnitOfWork
from app.domain.value_objects.enums import BackendKind

logger = logging.getLogger(__name__)


class SqlStorageBackend(StorageBackend):
    """Every unit of work is exactly one database transaction.

    Concurrent requests get independent transactions; two diffs touching the
    same code resolve by whichever commits last.
    """

    kind = BackendKind.RELATIONAL

    def __init__(self, database_url: str, pool_size: int = 10, max_overflow: int = 20):
        self._db = DatabaseSessionManager(
            database_url, pool_size=pool_size, max_overflow=max_overflow
        )

    @property
    def engine(self):
        return self._db.engine

    async def initialize(self) -> None:
        await self._db.create_all()
        logger.info("Relational backend ready (tables ensured)")

    @asynccontextmanager
    async def unit_of_work(self) -> AsyncGenerator[UnitOfWork, None]:
        async with self._db.transaction() as session:
            yield UnitOfWork(
                assignees=SqlAssigneeRepository(session),
                assignments=SqlAssignmentRepository(session),
            )

    async def health_check(self) -> bool:
        return await self._db.health_check()

    async def dispose(self) -> None:
        await self._db.dispose()
