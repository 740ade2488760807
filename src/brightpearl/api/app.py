"""
brightpearl.api.app

FastAPI app factory for the callback receiver.

Responsibilities:
- Configure structured logging once at startup.
- Register middleware and the health/callback routers.
"""

from __future__ import annotations

from fastapi import FastAPI

from brightpearl import __version__
from brightpearl.api.deps import settings_dep
from brightpearl.api.routers.callbacks import router as callbacks_router
from brightpearl.api.routers.health import router as health_router
from brightpearl.observability.logging import configure_logging, get_logger
from brightpearl.observability.middleware import RequestContextMiddleware
from brightpearl.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    app = FastAPI(
        title="Brightpearl callback receiver",
        version=__version__,
        docs_url="/docs" if settings.env != "prod" else None,
        openapi_url="/openapi.json" if settings.env != "prod" else None,
    )

    # Endpoints see the settings this app was built with, not the process env.
    app.dependency_overrides[settings_dep] = lambda: settings

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(callbacks_router)

    log.info("callback_receiver_created", env=settings.env)
    return app
