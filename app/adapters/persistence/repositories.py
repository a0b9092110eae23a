"""SQLAlchemy repository implementations."""

from __future__ import annotations

from collections.abc import Mapping

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.persistence.models import AssigneeModel, AssignmentModel
from app.application.ports.assignee_repo import AssigneeRepository
from app.application.ports.assignment_repo import AssignmentRepository
from app.domain.entities.assignee import Assignee

# ─── Mappers ─────────────────────────────────────────────────────────


def _assignee_to_domain(m: AssigneeModel) -> Assignee:
    return Assignee(id=m.id, name=m.name, color=m.color)


# ─── Repositories ────────────────────────────────────────────────────


class SqlAssigneeRepository(AssigneeRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def save(self, assignee: Assignee) -> Assignee:
        m = await self._s.merge(
            AssigneeModel(id=assignee.id, name=assignee.name, color=assignee.color)
        )
        await self._s.flush()
        return _assignee_to_domain(m)

    async def get_by_id(self, assignee_id: str) -> Assignee | None:
        m = await self._s.get(AssigneeModel, assignee_id)
        return _assignee_to_domain(m) if m else None

    async def get_all(self) -> list[Assignee]:
        result = await self._s.execute(select(AssigneeModel))
        return [_assignee_to_domain(m) for m in result.scalars()]

    async def update(
        self, assignee_id: str, name: str | None, color: str | None
    ) -> Assignee | None:
        m = await self._s.get(AssigneeModel, assignee_id)
        if m is None:
            return None
        if name is not None:
            m.name = name
        if color is not None:
            m.color = color
        await self._s.flush()
        return _assignee_to_domain(m)

    async def guard_delete(self, assignee_id: str) -> None:
        # DELETE is issued whether or not the row exists.
        return None

    async def delete(self, assignee_id: str) -> None:
        await self._s.execute(delete(AssigneeModel).where(AssigneeModel.id == assignee_id))
        await self._s.flush()


class SqlAssignmentRepository(AssignmentRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def get_all(self) -> dict[str, str]:
        result = await self._s.execute(
            select(AssignmentModel.code, AssignmentModel.assignee_id).where(
                AssignmentModel.assignee_id.is_not(None)
            )
        )
        return {code: assignee_id for code, assignee_id in result.all()}

    async def apply_diff(self, updates: Mapping[str, str | None]) -> None:
        for code, assignee_id in updates.items():
            if assignee_id is None:
                await self._s.execute(
                    delete(AssignmentModel).where(AssignmentModel.code == code)
                )
            else:
                await self._s.merge(AssignmentModel(code=code, assignee_id=assignee_id))
        await self._s.flush()

    async def clear_assignee(self, assignee_id: str) -> int:
        result = await self._s.execute(
            update(AssignmentModel)
            .where(AssignmentModel.assignee_id == assignee_id)
            .values(assignee_id=None)
        )
        await self._s.flush()
        return result.rowcount or 0
