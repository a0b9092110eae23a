"""Backend selection — decided once, at process start."""

from __future__ import annotations

import logging

from app.adapters.file_store.file_backend import FileStorageBackend
from app.adapters.persistence.sql_backend import SqlStorageBackend
from app.application.ports.storage_backend import StorageBackend
from app.config import Settings

logger = logging.getLogger(__name__)


def select_backend(settings: Settings) -> StorageBackend:
    """Relational backend when DATABASE_URL is set, file backend otherwise."""
    if settings.database_url:
        logger.info("Using relational storage backend")
        return SqlStorageBackend(
            settings.database_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
        )

    logger.info("Using file storage backend in %s", settings.data_dir)
    return FileStorageBackend(settings.data_dir)
