"""Health check endpoints."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.application.ports.storage_backend import StorageBackend
from app.infrastructure.api.dependencies import get_backend

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Liveness: the process is up."""
    return {"ok": True}


@router.get("/health/ready")
async def readiness_check(backend: StorageBackend = Depends(get_backend)):
    """Readiness: the storage backend is reachable."""
    if not await backend.health_check():
        return JSONResponse(
            status_code=503,
            content={"ok": False, "backend": backend.kind.value},
        )
    return {"ok": True, "backend": backend.kind.value}
