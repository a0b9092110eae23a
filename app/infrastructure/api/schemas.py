"""Request bodies for the assignee endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AssigneeWriteRequest(BaseModel):
    """``POST /assignees`` — create/upsert, or delete when ``_delete`` is set."""

    model_config = ConfigDict(populate_by_name=True)

    id: str | int | None = None
    name: str | None = None
    color: str | None = None
    delete: bool = Field(default=False, alias="_delete")

    @property
    def assignee_id(self) -> str | None:
        if self.id is None or self.id == "":
            return None
        return str(self.id)


class AssigneePatchRequest(BaseModel):
    """``PATCH /assignees/{id}`` — omitted or null fields are left unchanged."""

    name: str | None = None
    color: str | None = None
