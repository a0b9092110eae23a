"""AssigneeStore — create, patch, list and delete assignees."""

from __future__ import annotations

import logging
from collections.abc import Callable

from app.application.ports.storage_backend import StorageBackend
from app.application.use_cases.cascade_delete import CascadeDeleteUseCase
from app.domain.entities.assignee import Assignee
from app.domain.errors import NotFoundError, ValidationError
from app.domain.policies.assignee_ids import mint_assignee_id
from app.domain.value_objects.hex_color import is_valid_hex_color

logger = logging.getLogger(__name__)


class AssigneeStore:
    """Assignee CRUD on top of whichever backend was selected at startup."""

    def __init__(
        self,
        backend: StorageBackend,
        cascade: CascadeDeleteUseCase | None = None,
        id_factory: Callable[[], str] = mint_assignee_id,
    ):
        self._backend = backend
        self._cascade = cascade or CascadeDeleteUseCase(backend)
        self._id_factory = id_factory

    async def create(
        self, name: str | None, color: str | None, assignee_id: str | None = None
    ) -> Assignee:
        """Create an assignee, or overwrite name/color if the id exists.

        The colour format is not checked here, only on update.
        """
        if not name or not color:
            raise ValidationError("Missing fields")

        assignee = Assignee(id=assignee_id or self._id_factory(), name=name, color=color)
        async with self._backend.unit_of_work() as uow:
            saved = await uow.assignees.save(assignee)

        logger.info("Saved assignee %s (%s)", saved.id, saved.name)
        return saved

    async def update(
        self, assignee_id: str, name: str | None = None, color: str | None = None
    ) -> Assignee:
        """Patch name and/or color. None means "leave as is"."""
        if name is None and color is None:
            raise ValidationError("Nothing to update")
        if name is not None:
            name = name.strip()
            if not name:
                raise ValidationError("Invalid name")
        if color is not None and not is_valid_hex_color(color):
            raise ValidationError("Invalid color format. Expected #RRGGBB")

        async with self._backend.unit_of_work() as uow:
            updated = await uow.assignees.update(assignee_id, name=name, color=color)
            if updated is None:
                raise NotFoundError("Assignee", assignee_id)

        logger.info("Updated assignee %s", assignee_id)
        return updated

    async def delete(self, assignee_id: str) -> None:
        await self._cascade.execute(assignee_id)

    async def get(self, assignee_id: str) -> Assignee:
        async with self._backend.unit_of_work() as uow:
            assignee = await uow.assignees.get_by_id(assignee_id)
        if assignee is None:
            raise NotFoundError("Assignee", assignee_id)
        return assignee

    async def list(self) -> list[Assignee]:
        async with self._backend.unit_of_work() as uow:
            return await uow.assignees.get_all()
