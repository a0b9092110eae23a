"""Tests for AssignmentApiClient using httpx.MockTransport."""

from __future__ import annotations

import json

import httpx
import pytest

from app.adapters.http_client.assignment_api_client import AssignmentApiClient

ASSIGNEES = [
    {"id": "ca_1", "name": "Alice", "color": "#112233"},
    {"id": "ca_2", "name": "Bob", "color": "#445566"},
]


class Recorder:
    """Mock server: records requests, answers from a route table."""

    def __init__(self, routes=None):
        self.requests: list[httpx.Request] = []
        self.routes = routes or {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key in self.routes:
            status, body = self.routes[key]
            return httpx.Response(status, json=body)
        return httpx.Response(200, json={"success": True})

    def client(self, **kwargs) -> AssignmentApiClient:
        return AssignmentApiClient(
            base_url="http://api.test/", transport=httpx.MockTransport(self), **kwargs
        )


def _body(request: httpx.Request):
    return json.loads(request.content)


# ─── Reads ───────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_get_assignees_and_assignments():
    server = Recorder({
        ("GET", "/api/assignees"): (200, ASSIGNEES),
        ("GET", "/api/assignments"): (200, {"75": "ca_1"}),
    })
    client = server.client()
    assignees = await client.get_assignees()
    assert [a.name for a in assignees] == ["Alice", "Bob"]
    assert await client.get_assignments() == {"75": "ca_1"}


@pytest.mark.asyncio
async def test_http_error_is_raised():
    server = Recorder({("GET", "/api/assignments"): (500, {"error": "Database error"})})
    with pytest.raises(httpx.HTTPStatusError):
        await server.client().get_assignments()


# ─── Writes ──────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_save_assignments_posts_bare_diff():
    server = Recorder()
    await server.client().save_assignments({"75": "ca_1", "92": None})
    request = server.requests[-1]
    assert request.method == "POST"
    assert request.url.path == "/api/assignments"
    assert _body(request) == {"75": "ca_1", "92": None}


@pytest.mark.asyncio
async def test_save_assignments_unwraps_envelope():
    server = Recorder()
    await server.client().save_assignments({"assignments": {"75": "ca_1"}})
    assert _body(server.requests[-1]) == {"75": "ca_1"}


@pytest.mark.asyncio
async def test_create_assignee():
    created = {"id": "ca_9", "name": "Carol", "color": "#778899"}
    server = Recorder({("POST", "/api/assignees"): (200, created)})
    a = await server.client().create_assignee("Carol", "#778899")
    assert a.id == "ca_9"
    assert _body(server.requests[-1]) == {"name": "Carol", "color": "#778899"}


@pytest.mark.asyncio
async def test_delete_uses_post_fallback_by_default():
    server = Recorder()
    await server.client().delete_assignee("ca_1")
    request = server.requests[-1]
    assert (request.method, request.url.path) == ("POST", "/api/assignees")
    assert _body(request) == {"_delete": True, "id": "ca_1"}


@pytest.mark.asyncio
async def test_delete_verb_when_fallback_disabled():
    server = Recorder()
    await server.client(use_delete_fallback=False).delete_assignee("ca_1")
    request = server.requests[-1]
    assert (request.method, request.url.path) == ("DELETE", "/api/assignees/ca_1")


# ─── Update by id or name ────────────────────────────────────────────


@pytest.mark.asyncio
async def test_update_resolves_name_to_id():
    updated = {"id": "ca_2", "name": "Bob", "color": "#000000"}
    server = Recorder({
        ("GET", "/api/assignees"): (200, ASSIGNEES),
        ("PATCH", "/api/assignees/ca_2"): (200, updated),
    })
    a = await server.client().update_assignee("Bob", color="#000000")
    assert a.color == "#000000"
    patch = server.requests[-1]
    assert patch.url.path == "/api/assignees/ca_2"
    assert _body(patch) == {"color": "#000000"}


@pytest.mark.asyncio
async def test_update_by_id_is_sent_unchanged():
    server = Recorder({
        ("GET", "/api/assignees"): (200, ASSIGNEES),
        ("PATCH", "/api/assignees/ca_1"): (200, ASSIGNEES[0]),
    })
    await server.client().update_assignee("ca_1", name="Alice")
    assert server.requests[-1].url.path == "/api/assignees/ca_1"


@pytest.mark.asyncio
async def test_update_falls_back_to_id_when_lookup_fails():
    server = Recorder({
        ("GET", "/api/assignees"): (503, {"error": "down"}),
        ("PATCH", "/api/assignees/Bob"): (404, {"error": "Assignee not found"}),
    })
    with pytest.raises(httpx.HTTPStatusError):
        await server.client().update_assignee("Bob", name="Robert")
    assert server.requests[-1].url.path == "/api/assignees/Bob"
