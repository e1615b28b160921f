"""
PartnerHub prototype data service -- Application entry point.

Run with:
    uvicorn partnerhub.main:app --reload

Then open http://localhost:8000/docs for the interactive Swagger UI.

This file:
  1. Configures logging from the environment
  2. Builds the prototype store on startup (file or memory backend) and
     seeds it if it is empty
  3. Mounts all route modules (store, records, programs, partners, contexts)
  4. Defines the health check endpoint
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from partnerhub.config import Settings, load_settings
from partnerhub.dependencies import get_view
from partnerhub.routes import contexts, partners, programs, records, store
from partnerhub.storage.backends import FileBackend, MemoryBackend
from partnerhub.storage.store import PrototypeStore
from partnerhub.storage.view import DatabaseView

VERSION = "0.1.0"

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> PrototypeStore:
    if settings.storage_backend == "memory":
        backend = MemoryBackend()
    else:
        backend = FileBackend(settings.data_dir)
    return PrototypeStore(backend, key=settings.storage_key)


def create_app(settings: Settings | None = None, prototype_store: PrototypeStore | None = None) -> FastAPI:
    """Build the application.

    Pass a store to run against a specific backend (tests use an in-memory
    one); otherwise one is built from settings when the app starts.
    """
    settings = settings or load_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db_store = prototype_store or build_store(settings)
        view = DatabaseView(db_store).open(seed=settings.seed_on_start)
        app.state.view = view
        logger.info(
            "Prototype store ready (backend=%s, key=%s, seeded_at=%s)",
            db_store.backend.name, db_store.key, view.database.metadata.seeded_at,
        )
        try:
            yield
        finally:
            view.close()

    app = FastAPI(
        title="PartnerHub Prototype Data API",
        version=VERSION,
        description=(
            "Prototype data layer for the education-partnership dashboard: "
            "one persisted snapshot of programs, partners, institutions, teachers, "
            "coordinators, resources and invitations, plus role-scoped views.\n\n"
            "| Endpoint | Purpose |\n"
            "|----------|--------|\n"
            "| `/v1/store` | Snapshot, seed, reset |\n"
            "| `/v1/tables/{table}` | Generic record CRUD |\n"
            "| `/v1/programs` | Catalog, summaries, cascade delete |\n"
            "| `/v1/partners` | Partner programs, metrics, resources |\n"
            "| `/v1/parents`, `/v1/teachers`, `/v1/coordinators`, `/v1/schools` | Role dashboards |\n"
        ),
        lifespan=lifespan,
    )

    # Permissive for the prototype; the dashboards run on another origin.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(store.router)
    app.include_router(records.router)
    app.include_router(programs.router)
    app.include_router(partners.router)
    app.include_router(contexts.router)

    @app.get(
        "/v1/health",
        summary="Health check",
        description="Returns the current status of the API and the size of every table.",
        tags=["System"],
    )
    async def health(view: DatabaseView = Depends(get_view)):
        db = view.database
        return {
            "status": "healthy",
            "version": VERSION,
            "storage_backend": view.store.backend.name,
            "storage_key": view.store.key,
            "seeded_at": db.metadata.seeded_at if db else None,
            "tables": db.counts() if db else {},
        }

    return app


app = create_app()
