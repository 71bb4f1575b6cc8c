"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers
- Error handlers (centralized catch-all)
- JSON validation failure middleware
- Logging configuration

No business logic belongs here.
"""

from fastapi import FastAPI

from json_validation.core.config import settings
from json_validation.interfaces.accounts import router as accounts_router
from json_validation.interfaces.health import router as health_router
from json_validation.shared.errors.handlers import register_error_handlers
from json_validation.shared.http.middleware import JsonValidationFailureMiddleware
from json_validation.shared.logging import configure_logging


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and the validation failure
    middleware. This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # --- Validation Failures ---
    app.add_middleware(JsonValidationFailureMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(accounts_router, prefix="/api/v1")

    return app


app = create_app()
