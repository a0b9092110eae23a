"""Assignment diff policy — compute, apply and unwrap department diffs."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from app.domain.entities.assignment import AssignmentDiff, AssignmentMap
from app.domain.errors import ValidationError


def compute_diff(
    last_known: Mapping[str, str], desired: Mapping[str, str | None]
) -> AssignmentDiff:
    """Minimal change-set turning *last_known* into *desired*.

    1. Codes in *desired* whose value differs from *last_known* are included.
    2. Codes in *last_known* missing from *desired* are included as None.
    3. Unchanged codes are omitted.

    A None value in *desired* for a code that is not in *last_known* is
    already satisfied and is omitted too.
    """
    diff: AssignmentDiff = {}
    for code, assignee_id in desired.items():
        if last_known.get(code) != assignee_id:
            diff[code] = assignee_id
    for code in last_known:
        if code not in desired:
            diff[code] = None
    return diff


def apply_diff(mapping: AssignmentMap, updates: Mapping[str, str | None]) -> AssignmentMap:
    """Apply *updates* to *mapping* in place, entry by entry, and return it."""
    for code, assignee_id in updates.items():
        if assignee_id is None:
            mapping.pop(code, None)
        else:
            mapping[code] = assignee_id
    return mapping


def unwrap_diff_payload(payload: Any) -> AssignmentDiff:
    """Accept a bare diff or one wrapped as ``{"assignments": {...}}``.

    Raises:
        ValidationError: if the payload is not an object or a value is
            neither a string nor null.
    """
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ValidationError("Assignments payload must be an object")
    if isinstance(payload.get("assignments"), Mapping):
        payload = payload["assignments"]

    diff: AssignmentDiff = {}
    for code, assignee_id in payload.items():
        if assignee_id is not None and not isinstance(assignee_id, str):
            raise ValidationError(f"Invalid assignee id for department {code}")
        diff[str(code)] = assignee_id
    return diff
