"""Boatyard API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Every request passes the Basic auth middleware before routing
    - Global error handlers map BoatyardError → structured JSON responses
    - CORS configured from settings (not hardcoded), outermost so preflights
      are answered without credentials
    - Boat store built on startup via lifespan context manager and closed on
      shutdown; an app never touches another app's store

Design Decisions:
    - create_app(settings) factory: tests build isolated apps with their own
      principals; the module-level `app` serves uvicorn
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from boatyard.api.basic_auth import BasicAuthMiddleware
from boatyard.api.dependencies import build_boat_repository
from boatyard.api.error_handlers import register_error_handlers
from boatyard.api.routes import boats, health, profile
from boatyard.config import Settings, get_settings
from boatyard.core.principals import build_principals
from boatyard.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    principals = build_principals(
        settings.auth_username, settings.auth_password, settings.auth_users,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        if principals.generated_password:
            logger.warning(
                f"Using generated security password: {principals.generated_password}",
                extra={"principal": settings.auth_username},
            )
        app.state.boat_repository = await build_boat_repository(settings)
        logger.info("Boatyard API started")
        yield
        logger.info("Boatyard API shutting down")
        await app.state.boat_repository.close()

    app = FastAPI(title="Boatyard API", version="0.1.0", lifespan=lifespan)

    # Added first so it runs inside CORS
    app.add_middleware(BasicAuthMiddleware, principals=principals)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(profile.router)
    app.include_router(boats.router)

    register_error_handlers(app)
    return app


app = create_app()
