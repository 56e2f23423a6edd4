"""Wayfinder — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wayfinder.config import settings
from wayfinder.infrastructure.api.routes_endpoint import router as endpoint_router
from wayfinder.infrastructure.api.routes_health import router as health_router
from wayfinder.infrastructure.api.routes_suggestions import router as suggestions_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info(
        "Wayfinder starting (environment=%s, places key configured=%s, %d endpoint candidates)",
        settings.environment,
        settings.places_api_key_configured,
        len(settings.endpoint_candidates),
    )
    if not settings.places_api_key_configured and not settings.is_production:
        logger.warning("GOOGLE_PLACES_API_KEY is not set; remote suggestions will report a configuration error")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Wayfinder — endpoint detection and location suggestions",
        description="Backend endpoint detection and place autocomplete with offline fallback",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS for the Expo web dev server
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:8081",
            "http://127.0.0.1:8081",
            "http://localhost:19006",
            "http://127.0.0.1:19006",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    # Liveness target at the root, matching the default ENDPOINT_PROBE_PATH
    app.include_router(health_router)
    app.include_router(suggestions_router, prefix="/api")
    app.include_router(endpoint_router, prefix="/api")

    return app


app = create_app()
