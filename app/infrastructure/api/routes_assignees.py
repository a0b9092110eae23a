"""Assignee endpoints — list, create/upsert, patch, delete."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.application.use_cases.assignee_store import AssigneeStore
from app.infrastructure.api.dependencies import get_assignee_store
from app.infrastructure.api.schemas import AssigneePatchRequest, AssigneeWriteRequest

router = APIRouter(prefix="/assignees", tags=["assignees"])


@router.get("")
async def list_assignees(store: AssigneeStore = Depends(get_assignee_store)):
    return [a.to_dict() for a in await store.list()]


@router.post("")
async def create_or_delete_assignee(
    body: AssigneeWriteRequest | None = None,
    store: AssigneeStore = Depends(get_assignee_store),
):
    """Create or upsert an assignee.

    ``{"_delete": true, "id": ...}`` deletes instead, for hosts whose proxy
    blocks the DELETE verb.
    """
    body = body or AssigneeWriteRequest()
    if body.delete and body.assignee_id:
        await store.delete(body.assignee_id)
        return {"success": True}

    assignee = await store.create(body.name, body.color, assignee_id=body.assignee_id)
    return assignee.to_dict()


@router.patch("/{assignee_id}")
async def update_assignee(
    assignee_id: str,
    body: AssigneePatchRequest | None = None,
    store: AssigneeStore = Depends(get_assignee_store),
):
    body = body or AssigneePatchRequest()
    assignee = await store.update(assignee_id, name=body.name, color=body.color)
    return assignee.to_dict()


@router.delete("/{assignee_id}")
async def delete_assignee(
    assignee_id: str, store: AssigneeStore = Depends(get_assignee_store)
):
    await store.delete(assignee_id)
    return {"success": True}
