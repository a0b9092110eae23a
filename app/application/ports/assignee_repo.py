"""Port interface for assignee persistence."""

from abc import ABC, abstractmethod

from app.domain.entities.assignee import Assignee


class AssigneeRepository(ABC):
    @abstractmethod
    async def save(self, assignee: Assignee) -> Assignee:
        """Insert or overwrite the assignee with this id."""
        ...

    @abstractmethod
    async def get_by_id(self, assignee_id: str) -> Assignee | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[Assignee]:
        ...

    @abstractmethod
    async def update(
        self, assignee_id: str, name: str | None, color: str | None
    ) -> Assignee | None:
        """Change only the non-None fields. Returns None if the id is unknown."""
        ...

    @abstractmethod
    async def guard_delete(self, assignee_id: str) -> None:
        """Raise NotFoundError if this backend refuses to delete an unknown id.

        Backends that issue deletes unconditionally make this a no-op.
        """
        ...

    @abstractmethod
    async def delete(self, assignee_id: str) -> None:
        ...
