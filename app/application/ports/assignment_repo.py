"""Port interface for department assignment persistence."""

from abc import ABC, abstractmethod
from collections.abc import Mapping

from app.domain.entities.assignment import AssignmentMap


class AssignmentRepository(ABC):
    @abstractmethod
    async def get_all(self) -> AssignmentMap:
        """Return code -> assignee id, omitting unassigned codes."""
        ...

    @abstractmethod
    async def apply_diff(self, updates: Mapping[str, str | None]) -> None:
        """None deletes the code's row, any other value upserts it."""
        ...

    @abstractmethod
    async def clear_assignee(self, assignee_id: str) -> int:
        """Unassign every code held by *assignee_id*. Returns how many."""
        ...
