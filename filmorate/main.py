"""Filmorate API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map FilmorateError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Each create_app() call owns fresh tables: the RelationService lives on app.state
    - The Settings passed to create_app() (or get_settings()) are the only config
      the app reads: routes and lifespan take them from app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - App factory plus module-level `app`: uvicorn imports `filmorate.main:app`,
      tests call create_app() for isolation
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from filmorate.api.error_handlers import register_error_handlers
from filmorate.api.routes import films, health, users
from filmorate.config import Settings, get_settings
from filmorate.core.film_catalog import FilmCatalog
from filmorate.core.user_directory import UserDirectory
from filmorate.infrastructure.observability import setup_logging
from filmorate.services.relation_service import RelationService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Filmorate API started")
    yield
    logger.info("Filmorate API shutting down")


def create_app(
    settings: Settings | None = None, service: RelationService | None = None,
) -> FastAPI:
    """Build the app with its own in-memory tables unless a service is injected."""
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.app_title, version=settings.app_version, lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.relation_service = service or RelationService(
        users=UserDirectory(), films=FilmCatalog(),
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(films.router)
    app.include_router(users.router)

    register_error_handlers(app)
    return app


app = create_app()
