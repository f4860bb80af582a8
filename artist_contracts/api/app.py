"""FastAPI application factory"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from artist_contracts import __version__
from artist_contracts.api.routes.contracts import router as contracts_router
from artist_contracts.api.routes.drafts import router as drafts_router
from artist_contracts.api.routes.templates import router as templates_router
from artist_contracts.db import get_database
from artist_contracts.utils.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: make sure the schema exists"""
    get_database().init_db()
    logger.info("Database ready")
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application"""
    settings = get_settings()
    app = FastAPI(
        title="Artist Contracts API",
        description="Contract templates for artists: validate, preview and generate agreements",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health():
        return {"status": "ok", "version": __version__}

    app.include_router(templates_router)
    app.include_router(drafts_router)
    app.include_router(contracts_router)

    return app
