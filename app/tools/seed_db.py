"""Seed the configured storage backend from JSON documents.

Usage:
    python -m app.tools.seed_db
    python -m app.tools.seed_db --data-dir seed
    python -m app.tools.seed_db --drop  # delete existing assignees first

The source directory holds ``assignees.json`` (object keyed by id, or a
legacy list of ``{id, name, color}``) and optionally ``assignments.json``
(``{code: assigneeId}``). The target is whatever DATABASE_URL / DATA_DIR
select, exactly as for the API server.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

from app.application.ports.storage_backend import StorageBackend
from app.application.use_cases.assignee_store import AssigneeStore
from app.application.use_cases.assignment_store import AssignmentStore
from app.config import settings
from app.domain.errors import AssignmentMapError
from app.domain.policies.assignment_diff import unwrap_diff_payload
from app.infrastructure.backend_selector import select_backend

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)


def _read_json(path: Path) -> Any:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def _assignee_records(raw: Any) -> list[dict]:
    """Accept both the keyed-object and the legacy list form."""
    if isinstance(raw, dict):
        records = []
        for key, value in raw.items():
            if isinstance(value, dict):
                records.append({**value, "id": str(value.get("id") or key)})
        return records
    if isinstance(raw, list):
        return [item for item in raw if isinstance(item, dict) and item.get("id")]
    raise ValueError("assignees.json must hold an object or a list")


async def _drop_data(store: AssigneeStore) -> int:
    """Delete every assignee; the cascade clears their assignments."""
    existing = await store.list()
    for assignee in existing:
        await store.delete(assignee.id)
    logger.info("Dropped %d existing assignee(s)", len(existing))
    return len(existing)


async def seed(data_dir: Path, backend: StorageBackend, drop: bool = False) -> dict[str, int]:
    """Main seed function. Returns counts of seeded records."""
    counts = {"assignees": 0, "assignments": 0, "skipped": 0}

    assignees_file = data_dir / "assignees.json"
    assignments_file = data_dir / "assignments.json"
    if not assignees_file.exists():
        raise FileNotFoundError(f"No assignees.json found in {data_dir}")

    assignee_store = AssigneeStore(backend)
    assignment_store = AssignmentStore(backend)

    if drop:
        await _drop_data(assignee_store)

    # 1. Assignees (upsert by id)
    for record in _assignee_records(_read_json(assignees_file)):
        try:
            await assignee_store.create(
                record.get("name"), record.get("color"), assignee_id=str(record["id"])
            )
            counts["assignees"] += 1
        except AssignmentMapError as e:
            logger.warning("Assignee %s skipped: %s", record.get("id"), e.message)
            counts["skipped"] += 1

    # 2. Assignments, as one diff
    if assignments_file.exists():
        diff = unwrap_diff_payload(_read_json(assignments_file))
        await assignment_store.apply_diff(diff)
        counts["assignments"] = sum(1 for v in diff.values() if v is not None)
    else:
        logger.info("No assignments.json found — skipping assignment import")

    logger.info(
        "Seed complete: %d assignees, %d assignments, %d skipped",
        counts["assignees"], counts["assignments"], counts["skipped"],
    )
    return counts


async def _verify_data(backend: StorageBackend) -> None:
    """Print sanity checks after seeding."""
    assignees = await AssigneeStore(backend).list()
    assignments = await AssignmentStore(backend).get_all()
    known_ids = {a.id for a in assignees}
    dangling = sorted(code for code, aid in assignments.items() if aid not in known_ids)

    print(f"\n{'='*50}")
    print("SEED VERIFICATION")
    print(f"{'='*50}")
    print(f"Backend:     {backend.kind.value}")
    print(f"Assignees:   {len(assignees)}")
    print(f"Assignments: {len(assignments)}")
    print(f"Dangling assignments: {dangling or 'none'}")
    print(f"{'='*50}\n")


def main():
    parser = argparse.ArgumentParser(description="Seed assignees and assignments from JSON")
    parser.add_argument(
        "--data-dir", type=str, default="seed",
        help="Directory containing assignees.json / assignments.json (default: seed)",
    )
    parser.add_argument(
        "--drop", action="store_true",
        help="Delete existing assignees (and their assignments) before seeding",
    )
    parser.add_argument(
        "--verify-only", action="store_true",
        help="Only run verification, don't seed",
    )
    args = parser.parse_args()

    data_dir = Path(args.data_dir)
    if not args.verify_only and not data_dir.exists():
        logger.error("Data directory not found: %s", data_dir)
        sys.exit(1)

    async def run_all():
        backend = select_backend(settings)
        await backend.initialize()
        try:
            if not args.verify_only:
                await seed(data_dir, backend, drop=args.drop)
            await _verify_data(backend)
        finally:
            await backend.dispose()

    asyncio.run(run_all())


if __name__ == "__main__":
    main()
