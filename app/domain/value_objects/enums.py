"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class BackendKind(str, Enum):
    FILE = "file"
    RELATIONAL = "relational"


class SyncState(str, Enum):
    """Where the client's local mapping stands relative to the server."""

    SYNCED = "synced"
    PENDING_SAVE = "pending_save"
    DRIFTED_AFTER_FAILED_SAVE = "drifted_after_failed_save"
