"""Department assignment map — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.domain.value_objects.enums import BackendKind
from app.infrastructure.api.error_handlers import register_error_handlers
from app.infrastructure.api.routes_assignees import router as assignees_router
from app.infrastructure.api.routes_assignments import router as assignments_router
from app.infrastructure.api.routes_health import router as health_router
from app.infrastructure.backend_selector import select_backend

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Select and initialize the storage backend once; dispose it on shutdown."""
    backend = getattr(app.state, "backend", None)
    if backend is None:
        backend = select_backend(settings)
        app.state.backend = backend
    try:
        await backend.initialize()
        logger.info("Storage backend initialized: %s", backend.kind.value)
    except Exception as e:
        # Never serve file documents that were not read.
        if backend.kind is BackendKind.FILE:
            logger.error("File storage could not be loaded, refusing to start: %s", e)
            raise
        logger.warning("Storage backend not available on startup: %s", e)
    yield
    await backend.dispose()


def create_app() -> FastAPI:
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title="Department assignment map",
        description="Assignees, department assignments and diff-based sync",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(assignees_router, prefix="/api")
    app.include_router(assignments_router, prefix="/api")

    return app


app = create_app()
