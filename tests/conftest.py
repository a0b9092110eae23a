"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from contextlib import asynccontextmanager

import pytest

from app.adapters.file_store.file_backend import FileStorageBackend
from app.adapters.persistence.sql_backend import SqlStorageBackend
from app.application.ports.assignee_repo import AssigneeRepository
from app.application.ports.assignment_repo import AssignmentRepository
from app.application.ports.storage_backend import StorageBackend, UnitOfWork
from app.domain.entities.assignee import Assignee
from app.domain.errors import NotFoundError
from app.domain.value_objects.enums import BackendKind

# ─── In-memory fakes ────────────────────────────────────────────────


class FakeAssigneeRepo(AssigneeRepository):
    def __init__(self, strict_delete: bool = True):
        self.assignees: dict[str, Assignee] = {}
        self.strict_delete = strict_delete
        self.deleted: list[str] = []

    async def save(self, assignee):
        self.assignees[assignee.id] = assignee
        return assignee

    async def get_by_id(self, assignee_id):
        return self.assignees.get(assignee_id)

    async def get_all(self):
        return list(self.assignees.values())

    async def update(self, assignee_id, name, color):
        existing = self.assignees.get(assignee_id)
        if existing is None:
            return None
        if name is not None:
            existing.name = name
        if color is not None:
            existing.color = color
        return existing

    async def guard_delete(self, assignee_id):
        if self.strict_delete and assignee_id not in self.assignees:
            raise NotFoundError("Assignee", assignee_id)

    async def delete(self, assignee_id):
        self.assignees.pop(assignee_id, None)
        self.deleted.append(assignee_id)


class FakeAssignmentRepo(AssignmentRepository):
    def __init__(self):
        self.mapping: dict[str, str] = {}
        self.cleared: list[str] = []

    async def get_all(self):
        return dict(self.mapping)

    async def apply_diff(self, updates):
        for code, assignee_id in updates.items():
            if assignee_id is None:
                self.mapping.pop(code, None)
            else:
                self.mapping[code] = assignee_id

    async def clear_assignee(self, assignee_id):
        self.cleared.append(assignee_id)
        codes = [c for c, a in self.mapping.items() if a == assignee_id]
        for code in codes:
            del self.mapping[code]
        return len(codes)


class FakeBackend(StorageBackend):
    kind = BackendKind.FILE

    def __init__(self, strict_delete: bool = True):
        self.assignees = FakeAssigneeRepo(strict_delete=strict_delete)
        self.assignments = FakeAssignmentRepo()
        self.units_opened = 0

    async def initialize(self):
        return None

    @asynccontextmanager
    async def unit_of_work(self):
        self.units_opened += 1
        yield UnitOfWork(assignees=self.assignees, assignments=self.assignments)

    async def health_check(self):
        return True

    async def dispose(self):
        return None


# ─── Fixtures ────────────────────────────────────────────────────────


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
async def file_backend(tmp_path):
    backend = FileStorageBackend(tmp_path / "data")
    await backend.initialize()
    yield backend
    await backend.dispose()


@pytest.fixture
async def sql_backend(tmp_path):
    backend = SqlStorageBackend(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await backend.initialize()
    yield backend
    await backend.dispose()


@pytest.fixture(params=["file", "relational"])
async def backend(request, tmp_path):
    """Each test using this runs once per storage backend."""
    if request.param == "file":
        b = FileStorageBackend(tmp_path / "data")
    else:
        b = SqlStorageBackend(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await b.initialize()
    yield b
    await b.dispose()
