"""Tests for AssignmentStore with an in-memory fake backend."""

from __future__ import annotations

import pytest

from app.application.use_cases.assignment_store import AssignmentStore
from app.domain.errors import ValidationError


@pytest.mark.asyncio
async def test_apply_diff_and_read_back(fake_backend):
    store = AssignmentStore(fake_backend)
    await store.apply_diff({"75": "ca_1", "92": "ca_2"})
    await store.apply_diff({"75": None})
    assert await store.get_all() == {"92": "ca_2"}


@pytest.mark.asyncio
async def test_empty_diff_touches_nothing(fake_backend):
    await AssignmentStore(fake_backend).apply_diff({})
    assert fake_backend.units_opened == 0


@pytest.mark.asyncio
async def test_non_string_value_rejected_before_storage(fake_backend):
    with pytest.raises(ValidationError):
        await AssignmentStore(fake_backend).apply_diff({"75": 3})
    assert fake_backend.units_opened == 0
