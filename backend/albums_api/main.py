"""Albums API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map AlbumsError → structured JSON responses
    - Each create_app() call owns exactly one AlbumCatalog (app.state.catalog),
      seeded at construction, discarded with the app
    - OpenAPI document at /openapi.json, interactive docs at settings.docs_url

Design Decisions:
    - Catalog built in create_app, not in lifespan: ASGI test transports skip
      lifespan events, the catalog must exist regardless
    - Lifespan over @app.on_event: FastAPI recommended pattern
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from albums_api.api.error_handlers import register_error_handlers
from albums_api.api.routes import albums, health
from albums_api.config import Settings, get_settings
from albums_api.core.catalog import AlbumCatalog
from albums_api.core.domain_types import ApiTag
from albums_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def _build_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info(
            f"Albums API started with {app.state.catalog.count()} album(s)",
        )
        yield
        logger.info("Albums API shutting down")

    return lifespan


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application with its own album catalog."""
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        separate_input_output_schemas=False,
        docs_url=settings.docs_url,
        openapi_tags=[
            {"name": ApiTag.ALBUM.value, "description": "Album catalog"},
            {"name": ApiTag.HEALTH.value, "description": "Liveness probe"},
        ],
        lifespan=_build_lifespan(settings),
    )
    app.state.catalog = (
        AlbumCatalog.seeded() if settings.seed_catalog else AlbumCatalog()
    )

    # CORS: configured from settings, not hardcoded
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Routes: explicit registration
    app.include_router(albums.router)
    app.include_router(health.router)

    register_error_handlers(app)
    return app


app = create_app()
