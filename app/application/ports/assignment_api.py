"""Port interface for the client's view of the assignment server."""

from abc import ABC, abstractmethod
from collections.abc import Mapping

from app.domain.entities.assignee import Assignee
from app.domain.entities.assignment import AssignmentMap


class AssignmentApiPort(ABC):
    @abstractmethod
    async def get_assignees(self) -> list[Assignee]:
        ...

    @abstractmethod
    async def get_assignments(self) -> AssignmentMap:
        ...

    @abstractmethod
    async def save_assignments(self, diff: Mapping[str, str | None]) -> None:
        """Send a diff. Raises on any transport or server failure."""
        ...
