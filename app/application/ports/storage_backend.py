"""Port interface for a storage backend — one per process, chosen at startup."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass

from app.application.ports.assignee_repo import AssigneeRepository
from app.application.ports.assignment_repo import AssignmentRepository
from app.domain.value_objects.enums import BackendKind


@dataclass
class UnitOfWork:
    """Repositories sharing one batch of work."""

    assignees: AssigneeRepository
    assignments: AssignmentRepository


class StorageBackend(ABC):
    kind: BackendKind

    @abstractmethod
    async def initialize(self) -> None:
        """Prepare storage (tables, directories, empty documents)."""
        ...

    @abstractmethod
    def unit_of_work(self) -> AbstractAsyncContextManager[UnitOfWork]:
        """Scope one logical batch.

        Leaving the block normally makes every change durable; leaving it
        with an exception discards what storage has not yet made durable
        and re-raises (storage failures surface as BackendError).
        """
        ...

    @abstractmethod
    async def health_check(self) -> bool:
        ...

    @abstractmethod
    async def dispose(self) -> None:
        ...
