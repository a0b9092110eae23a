"""File storage backend — two JSON documents in a data directory.

Layout:
    <data_dir>/assignees.json    {"<id>": {"id", "name", "color"}, ...}
    <data_dir>/assignments.json  {"<department code>": "<assignee id>", ...}

Each document is replaced atomically on its own. A unit of work touching
both (cascade delete) writes assignees first, then assignments; a crash in
between leaves them out of step. That boundary is accepted for this backend.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from app.adapters.file_store.documents import JsonDocument
from app.adapters.file_store.repositories import (
    FileAssigneeRepository,
    FileAssignmentRepository,
)
from app.application.ports.storage_backend import StorageBackend, UnitOfWork
from app.domain.errors import BackendError
from app.domain.value_objects.enums import BackendKind

logger = logging.getLogger(__name__)

ASSIGNEES_FILE = "assignees.json"
ASSIGNMENTS_FILE = "assignments.json"


class FileStorageBackend(StorageBackend):
    """Live in-memory documents, persisted at the end of each unit of work.

    Changes are applied to the live documents as they happen; a unit of work
    that fails before persisting does not undo them in memory, but nothing
    reaches disk.
    """

    kind = BackendKind.FILE

    def __init__(self, data_dir: str | Path):
        self.data_dir = Path(data_dir).resolve()
        self.assignees_doc = JsonDocument(self.data_dir / ASSIGNEES_FILE)
        self.assignments_doc = JsonDocument(self.data_dir / ASSIGNMENTS_FILE)
        self._loaded = False

    async def initialize(self) -> None:
        """Load both documents; any unreadable document is an error.

        Units of work are refused until this has succeeded, so documents
        that failed to load are never overwritten.
        """
        self._loaded = False
        self.data_dir.mkdir(parents=True, exist_ok=True)

        raw = self.assignments_doc.load(default={})
        if not isinstance(raw, dict):
            logger.error("%s does not hold a JSON object", self.assignments_doc.path)
            raise BackendError("Storage error", "load")

        raw = self.assignees_doc.load(default={})
        if isinstance(raw, list):
            self._migrate_assignee_list(raw)
        elif not isinstance(raw, dict):
            logger.error("%s does not hold a JSON object", self.assignees_doc.path)
            raise BackendError("Storage error", "load")

        self._loaded = True
        logger.info("File backend data directory: %s", self.data_dir)
        logger.info("Assignees file: %s", self.assignees_doc.path)
        logger.info("Assignments file: %s", self.assignments_doc.path)

    def _migrate_assignee_list(self, items: list) -> None:
        """Rewrite a legacy ``[{id, name, color}, ...]`` document keyed by id."""
        by_id = {}
        for item in items:
            if isinstance(item, dict) and item.get("id"):
                by_id[str(item["id"])] = {**item, "id": str(item["id"])}
        self.assignees_doc.data = by_id
        self.assignees_doc.persist()
        logger.info("Migrated %d assignee(s) from list to keyed document", len(by_id))

    @asynccontextmanager
    async def unit_of_work(self) -> AsyncGenerator[UnitOfWork, None]:
        if not self._loaded:
            raise BackendError("Storage error", "unit_of_work")
        yield UnitOfWork(
            assignees=FileAssigneeRepository(self.assignees_doc),
            assignments=FileAssignmentRepository(self.assignments_doc),
        )
        # Blocking writes on the loop thread: persists within one process never interleave.
        for doc in (self.assignees_doc, self.assignments_doc):
            if doc.dirty:
                doc.persist()

    async def health_check(self) -> bool:
        return self.data_dir.is_dir()

    async def dispose(self) -> None:
        return None
