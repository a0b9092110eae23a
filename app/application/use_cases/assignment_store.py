"""AssignmentStore — read the department mapping and apply diffs to it."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from app.application.ports.storage_backend import StorageBackend
from app.domain.errors import ValidationError

logger = logging.getLogger(__name__)


class AssignmentStore:
    def __init__(self, backend: StorageBackend):
        self._backend = backend

    async def get_all(self) -> dict[str, str]:
        async with self._backend.unit_of_work() as uow:
            return await uow.assignments.get_all()

    async def apply_diff(self, updates: Mapping[str, str | None]) -> None:
        """Apply a diff as one batch.

        Referenced assignee ids are not checked here: the relational
        backend's foreign key rejects unknown ids (whole batch rolled back),
        the file backend stores them as given.

        Raises:
            ValidationError: a value is neither a string nor None.
            BackendError: storage rejected or failed the batch.
        """
        for code, assignee_id in updates.items():
            if assignee_id is not None and not isinstance(assignee_id, str):
                raise ValidationError(f"Invalid assignee id for department {code}")
        if not updates:
            return

        async with self._backend.unit_of_work() as uow:
            await uow.assignments.apply_diff(updates)

        removed = sum(1 for v in updates.values() if v is None)
        logger.info(
            "Applied assignment diff: %d upserted, %d removed",
            len(updates) - removed, removed,
        )
