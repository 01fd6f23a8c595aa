"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from beatcrest.config import configure_structlog, get_settings
from beatcrest.error_handlers import register_exception_handlers
from beatcrest.middleware.logging import RequestLoggingMiddleware
from beatcrest.routers import auth, beats, health


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    configure_structlog(settings)

    app = FastAPI(title=settings.app.service)
    register_exception_handlers(app, environment=settings.app.environment)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allow_origins,
        allow_methods=settings.cors.allow_methods,
        allow_headers=settings.cors.allow_headers,
        allow_credentials=False,
    )
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(health.router)
    app.include_router(beats.router)
    app.include_router(auth.router)
    return app


app = create_app()
