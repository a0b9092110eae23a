"""Tests for AssigneeStore with an in-memory fake backend."""

from __future__ import annotations

import pytest

from app.application.use_cases.assignee_store import AssigneeStore
from app.domain.entities.assignee import Assignee
from app.domain.errors import NotFoundError, ValidationError


def _store(backend, ids=("ca_1", "ca_2", "ca_3")) -> AssigneeStore:
    it = iter(ids)
    return AssigneeStore(backend, id_factory=lambda: next(it))


# ─── create ──────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_create_mints_id(fake_backend):
    store = _store(fake_backend)
    a = await store.create("Alice", "#112233")
    assert a == Assignee(id="ca_1", name="Alice", color="#112233")
    assert fake_backend.assignees.assignees["ca_1"] == a


@pytest.mark.asyncio
async def test_create_with_supplied_id_upserts(fake_backend):
    store = _store(fake_backend)
    await store.create("Alice", "#112233", assignee_id="x")
    updated = await store.create("Alicia", "#445566", assignee_id="x")
    assert updated == Assignee(id="x", name="Alicia", color="#445566")
    assert len(await store.list()) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("name,color", [(None, "#112233"), ("", "#112233"), ("A", None), ("A", "")])
async def test_create_missing_fields(fake_backend, name, color):
    store = _store(fake_backend)
    with pytest.raises(ValidationError, match="Missing fields"):
        await store.create(name, color)
    assert fake_backend.units_opened == 0


@pytest.mark.asyncio
async def test_create_does_not_check_color_format(fake_backend):
    """Only update enforces #RRGGBB; creation accepts any non-empty colour."""
    store = _store(fake_backend)
    a = await store.create("Alice", "red")
    assert a.color == "red"


# ─── update ──────────────────────────────────────────────────────────


@pytest.fixture
def seeded(fake_backend):
    fake_backend.assignees.assignees["ca_1"] = Assignee(id="ca_1", name="Alice", color="#112233")
    return fake_backend


@pytest.mark.asyncio
async def test_update_requires_a_field(seeded):
    with pytest.raises(ValidationError, match="Nothing to update"):
        await _store(seeded).update("ca_1")
    assert seeded.units_opened == 0


@pytest.mark.asyncio
async def test_update_rejects_named_color(seeded):
    with pytest.raises(ValidationError, match="#RRGGBB"):
        await _store(seeded).update("ca_1", color="red")


@pytest.mark.asyncio
async def test_update_rejects_blank_name(seeded):
    with pytest.raises(ValidationError, match="Invalid name"):
        await _store(seeded).update("ca_1", name="   ")


@pytest.mark.asyncio
async def test_update_color_only_keeps_name(seeded):
    a = await _store(seeded).update("ca_1", color="#1a2b3c")
    assert a == Assignee(id="ca_1", name="Alice", color="#1a2b3c")


@pytest.mark.asyncio
async def test_update_trims_name(seeded):
    a = await _store(seeded).update("ca_1", name="  Bob  ")
    assert a.name == "Bob"
    assert a.color == "#112233"


@pytest.mark.asyncio
async def test_update_unknown_id(fake_backend):
    with pytest.raises(NotFoundError):
        await _store(fake_backend).update("nope", name="Bob")


# ─── delete / get ────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_delete_goes_through_cascade(seeded):
    seeded.assignments.mapping.update({"75": "ca_1", "92": "ca_2"})
    await _store(seeded).delete("ca_1")
    assert seeded.assignments.cleared == ["ca_1"]
    assert seeded.assignments.mapping == {"92": "ca_2"}
    assert "ca_1" not in seeded.assignees.assignees


@pytest.mark.asyncio
async def test_get_unknown_raises(fake_backend):
    with pytest.raises(NotFoundError):
        await _store(fake_backend).get("nope")


@pytest.mark.asyncio
async def test_get_known(seeded):
    a = await _store(seeded).get("ca_1")
    assert a.name == "Alice"
