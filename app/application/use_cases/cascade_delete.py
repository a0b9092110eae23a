"""CascadeDeleteUseCase — remove an assignee and every assignment pointing at it."""

from __future__ import annotations

import logging

from app.application.ports.storage_backend import StorageBackend

logger = logging.getLogger(__name__)


class CascadeDeleteUseCase:
    """Keeps the mapping free of references to deleted assignees.

    References are nullified explicitly before the assignee row goes away, so
    the relational schema needs no ON DELETE rule for this to hold.
    """

    def __init__(self, backend: StorageBackend):
        self._backend = backend

    async def execute(self, assignee_id: str) -> int:
        """Delete *assignee_id* and unassign its codes in one unit of work.

        Steps:
        1. Let the backend refuse unknown ids (file backend only)
        2. Nullify every assignment whose value is *assignee_id*
        3. Remove the assignee record

        Returns:
            Number of department codes that were unassigned.

        Raises:
            NotFoundError: unknown id on a backend that checks existence.
            BackendError: storage failure; nothing is committed on the
                relational backend.
        """
        async with self._backend.unit_of_work() as uow:
            await uow.assignees.guard_delete(assignee_id)
            cleared = await uow.assignments.clear_assignee(assignee_id)
            await uow.assignees.delete(assignee_id)

        logger.info(
            "Deleted assignee %s (%s backend), unassigned %d department(s)",
            assignee_id, self._backend.kind.value, cleared,
        )
        return cleared
