"""Assignment endpoints — read the mapping, apply a diff."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends

from app.application.use_cases.assignment_store import AssignmentStore
from app.domain.policies.assignment_diff import unwrap_diff_payload
from app.infrastructure.api.dependencies import get_assignment_store

router = APIRouter(prefix="/assignments", tags=["assignments"])


@router.get("")
async def list_assignments(store: AssignmentStore = Depends(get_assignment_store)):
    return await store.get_all()


@router.post("")
async def apply_assignment_diff(
    payload: Any = Body(default=None),
    store: AssignmentStore = Depends(get_assignment_store),
):
    """Apply ``{code: assigneeId | null}``, bare or wrapped in ``{"assignments": ...}``."""
    await store.apply_diff(unwrap_diff_payload(payload))
    return {"success": True}
