"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from campus.config import AuthSettings, Settings
from campus.interface.api.routes import comments, communities, health, likes
from campus.util.di.container import create_container, setup_di
from campus.util.error import ConfigurationError
from campus.util.observability import instrument_fastapi


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        settings: Settings for CORS (loaded from environment when omitted)
        container: DI container (production container when omitted)

    Raises:
        ConfigurationError: If production runs with the default JWT secret
    """
    settings = settings or Settings()
    _check_settings(settings)

    app_instance = FastAPI(
        title="Campus API",
        description="Backend API for Campus - communities, posts and threaded comments",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(likes.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(communities.router)

    return app_instance


def _check_settings(settings: Settings) -> None:
    if (
        settings.environment == "production"
        and settings.auth.jwt_secret == AuthSettings().jwt_secret
    ):
        raise ConfigurationError("AUTH__JWT_SECRET must be set in production")
