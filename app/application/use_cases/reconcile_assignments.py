"""AssignmentReconciler — optimistic client-side copy of the assignment map."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from app.application.ports.assignment_api import AssignmentApiPort
from app.domain.entities.assignee import Assignee
from app.domain.policies.assignment_diff import compute_diff
from app.domain.value_objects.enums import SyncState

logger = logging.getLogger(__name__)


@dataclass
class SaveResult:
    """Outcome of one save attempt."""

    diff: dict[str, str | None]
    sent: bool
    state: SyncState
    error: str | None = None


@dataclass
class ClientState:
    assignees: list[Assignee] = field(default_factory=list)
    assignments: dict[str, str] = field(default_factory=dict)
    selected_departments: list[str] = field(default_factory=list)
    sync_state: SyncState = SyncState.SYNCED


class AssignmentReconciler:
    """Tracks the last-known server mapping and sends minimal diffs.

    Saves are optimistic: the desired mapping becomes the local state
    whether or not the server accepted it. A failed save leaves the client
    in DRIFTED_AFTER_FAILED_SAVE until the next successful refresh or save;
    nothing is retried.
    """

    def __init__(self, api: AssignmentApiPort):
        self._api = api
        self.state = ClientState()

    @property
    def assignments(self) -> dict[str, str]:
        return dict(self.state.assignments)

    @property
    def sync_state(self) -> SyncState:
        return self.state.sync_state

    async def refresh(self) -> bool:
        """Replace local state with the server's. Returns False on failure."""
        try:
            assignees = await self._api.get_assignees()
            assignments = await self._api.get_assignments()
        except Exception:
            logger.exception("Failed to fetch assignees/assignments")
            return False

        self.state.assignees = assignees
        self.state.assignments = dict(assignments)
        self.state.sync_state = SyncState.SYNCED
        return True

    def compute_diff(self, desired: Mapping[str, str | None]) -> dict[str, str | None]:
        return compute_diff(self.state.assignments, desired)

    async def save(self, desired: Mapping[str, str | None]) -> SaveResult:
        """Send the diff to the server and commit *desired* locally.

        An empty diff is not sent and leaves the sync state unchanged.
        """
        diff = self.compute_diff(desired)
        if not diff:
            return SaveResult(diff=diff, sent=False, state=self.state.sync_state)

        self.state.sync_state = SyncState.PENDING_SAVE
        error = None
        try:
            await self._api.save_assignments(diff)
            self.state.sync_state = SyncState.SYNCED
        except Exception as e:
            logger.exception("Failed to save assignments (%d change(s))", len(diff))
            self.state.sync_state = SyncState.DRIFTED_AFTER_FAILED_SAVE
            error = str(e) or type(e).__name__

        self.state.assignments = {
            code: assignee_id
            for code, assignee_id in desired.items()
            if assignee_id is not None
        }
        return SaveResult(diff=diff, sent=True, state=self.state.sync_state, error=error)

    # ─── Department selection ────────────────────────────────────────

    def toggle_department(self, code: str) -> None:
        selected = self.state.selected_departments
        if code in selected:
            selected.remove(code)
        else:
            selected.append(code)

    def clear_selection(self) -> None:
        self.state.selected_departments = []

    async def assign_selected(self, assignee_id: str) -> SaveResult | None:
        """Give every selected department to *assignee_id* and save.

        Returns None (and sends nothing) when no assignee or no department
        is selected.
        """
        if not assignee_id or not self.state.selected_departments:
            return None

        desired = dict(self.state.assignments)
        for code in self.state.selected_departments:
            desired[code] = assignee_id
        result = await self.save(desired)
        self.clear_selection()
        return result
