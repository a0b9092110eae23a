"""HTTP client for the assignment API — implements AssignmentApiPort."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from app.application.ports.assignment_api import AssignmentApiPort
from app.domain.entities.assignee import Assignee

logger = logging.getLogger(__name__)


class AssignmentApiClient(AssignmentApiPort):
    """Talks to ``/api/assignees`` and ``/api/assignments``.

    Every call raises ``httpx.HTTPError`` (including ``HTTPStatusError`` for
    4xx/5xx answers); callers decide what a failure means.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
        use_delete_fallback: bool = True,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._use_delete_fallback = use_delete_fallback

    async def _request(self, method: str, path: str, json: Any = None) -> Any:
        async with httpx.AsyncClient(
            base_url=self._base_url, timeout=self._timeout, transport=self._transport
        ) as client:
            response = await client.request(method, f"/api{path}", json=json)
            response.raise_for_status()
            return response.json()

    # ─── Assignees ───────────────────────────────────────────────────

    async def get_assignees(self) -> list[Assignee]:
        data = await self._request("GET", "/assignees")
        return [Assignee.from_dict(item) for item in data]

    async def create_assignee(self, name: str, color: str) -> Assignee:
        data = await self._request("POST", "/assignees", json={"name": name, "color": color})
        return Assignee.from_dict(data)

    async def update_assignee(
        self, id_or_name: str, name: str | None = None, color: str | None = None
    ) -> Assignee:
        """Patch an assignee, resolving *id_or_name* by name if it is not an id.

        A failed lookup is not fatal: the value is then sent as an id.
        """
        target_id = id_or_name
        try:
            assignees = await self.get_assignees()
            if not any(a.id == id_or_name for a in assignees):
                by_name = next((a for a in assignees if a.name == id_or_name), None)
                if by_name:
                    target_id = by_name.id
        except httpx.HTTPError:
            logger.warning("Could not list assignees to resolve '%s'", id_or_name)

        patch = {}
        if name is not None:
            patch["name"] = name
        if color is not None:
            patch["color"] = color
        data = await self._request("PATCH", f"/assignees/{target_id}", json=patch)
        return Assignee.from_dict(data)

    async def delete_assignee(self, assignee_id: str) -> None:
        """Delete via ``POST {_delete: true}`` unless the client was told
        the host lets the DELETE verb through."""
        if self._use_delete_fallback:
            await self._request(
                "POST", "/assignees", json={"_delete": True, "id": assignee_id}
            )
        else:
            await self._request("DELETE", f"/assignees/{assignee_id}")

    # ─── Assignments ─────────────────────────────────────────────────

    async def get_assignments(self) -> dict[str, str]:
        return await self._request("GET", "/assignments")

    async def save_assignments(self, diff: Mapping[str, str | None]) -> None:
        if isinstance(diff.get("assignments"), Mapping):
            diff = diff["assignments"]
        await self._request("POST", "/assignments", json=dict(diff))
        logger.info("Saved assignment diff (%d change(s))", len(diff))
