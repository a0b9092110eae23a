"""JSON document held in memory and persisted by atomic replace."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from app.domain.errors import BackendError

logger = logging.getLogger(__name__)


class JsonDocument:
    """One JSON object on disk plus its live in-memory copy.

    ``persist`` writes ``<name>.tmp`` and renames it over the document, so a
    failed write leaves the previous document intact. There is no lock:
    concurrent writers of the same path race and the last rename wins.
    """

    def __init__(self, path: Path):
        self.path = path
        self.data: dict[str, Any] = {}
        self.dirty = False

    @property
    def tmp_path(self) -> Path:
        return self.path.with_suffix(self.path.suffix + ".tmp")

    def load(self, default: Any = None) -> Any:
        """Read the document, creating it with *default* if missing.

        Returns the raw decoded value (which may not be an object for
        legacy documents); ``data`` is set only when it is one.
        """
        if not self.path.exists():
            self.data = dict(default or {})
            self.persist()
            return self.data

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Cannot read %s: %s", self.path, e)
            raise BackendError("Storage error", "load") from e

        if isinstance(raw, dict):
            self.data = raw
        return raw

    def mark_dirty(self) -> None:
        self.dirty = True

    def persist(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.tmp_path
            with tmp.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=2, ensure_ascii=False)
            tmp.replace(self.path)
        except OSError as e:
            logger.error("Atomic write of %s failed: %s", self.path, e)
            raise BackendError("Storage error", "persist") from e
        self.dirty = False
