"""Repository implementations over the live JSON documents."""

from __future__ import annotations

from collections.abc import Mapping

from app.adapters.file_store.documents import JsonDocument
from app.application.ports.assignee_repo import AssigneeRepository
from app.application.ports.assignment_repo import AssignmentRepository
from app.domain.entities.assignee import Assignee
from app.domain.errors import NotFoundError
from app.domain.policies.assignment_diff import apply_diff


class FileAssigneeRepository(AssigneeRepository):
    """Assignees keyed by id; dict order is insertion order."""

    def __init__(self, document: JsonDocument):
        self._doc = document

    async def save(self, assignee: Assignee) -> Assignee:
        self._doc.data[assignee.id] = assignee.to_dict()
        self._doc.mark_dirty()
        return assignee

    async def get_by_id(self, assignee_id: str) -> Assignee | None:
        record = self._doc.data.get(assignee_id)
        return Assignee.from_dict(record) if record else None

    async def get_all(self) -> list[Assignee]:
        return [Assignee.from_dict(r) for r in self._doc.data.values()]

    async def update(
        self, assignee_id: str, name: str | None, color: str | None
    ) -> Assignee | None:
        record = self._doc.data.get(assignee_id)
        if record is None:
            return None
        if name is not None:
            record["name"] = name
        if color is not None:
            record["color"] = color
        self._doc.mark_dirty()
        return Assignee.from_dict(record)

    async def guard_delete(self, assignee_id: str) -> None:
        if assignee_id not in self._doc.data:
            raise NotFoundError("Assignee", assignee_id)

    async def delete(self, assignee_id: str) -> None:
        if self._doc.data.pop(assignee_id, None) is None:
            raise NotFoundError("Assignee", assignee_id)
        self._doc.mark_dirty()


class FileAssignmentRepository(AssignmentRepository):
    """Flat code -> assignee id object. Unknown assignee ids are kept as given."""

    def __init__(self, document: JsonDocument):
        self._doc = document

    async def get_all(self) -> dict[str, str]:
        return {code: aid for code, aid in self._doc.data.items() if aid is not None}

    async def apply_diff(self, updates: Mapping[str, str | None]) -> None:
        apply_diff(self._doc.data, updates)
        self._doc.mark_dirty()

    async def clear_assignee(self, assignee_id: str) -> int:
        codes = [code for code, aid in self._doc.data.items() if aid == assignee_id]
        for code in codes:
            del self._doc.data[code]
        if codes:
            self._doc.mark_dirty()
        return len(codes)
