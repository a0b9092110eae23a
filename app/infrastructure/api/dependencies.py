"""FastAPI dependency injection — wires the selected backend into the stores."""

from __future__ import annotations

from fastapi import Depends, Request

from app.application.ports.storage_backend import StorageBackend
from app.application.use_cases.assignee_store import AssigneeStore
from app.application.use_cases.assignment_store import AssignmentStore


def get_backend(request: Request) -> StorageBackend:
    """The backend chosen at startup, kept on ``app.state``."""
    return request.app.state.backend


def get_assignee_store(backend: StorageBackend = Depends(get_backend)) -> AssigneeStore:
    return AssigneeStore(backend)


def get_assignment_store(backend: StorageBackend = Depends(get_backend)) -> AssignmentStore:
    return AssignmentStore(backend)
