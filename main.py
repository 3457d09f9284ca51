from __future__ import annotations

"""Legal practice site backend - Main Application Entry Point
FastAPI application factory for the backend that serves the marketing site's
contact form.
Entry Points:
    - /health - Health check endpoint
    - /api/contact - Contact form submission
    - /api/contact/schema - Published contact form constraints
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator

from core.utils.env import is_production
# Track startup time in non-production environments
start_time = time.time() if not is_production() else None

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config.contact import SERVER_FAILURE_MESSAGE
from core.config import Settings, settings as default_settings
from core.exceptions import ConfigurationError
from core.http.errors import format_configuration_error
from core.logging import setup_logging
from core.observability import register_http_request_logging
from core.pydantic_schemas import error as api_error
from features.contact import router as contact_router

setup_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown events."""
    logger.info("Application starting (environment=%s)", app.state.settings.environment)
    yield
    logger.info("Application shutting down...")


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Application factory returning a configured FastAPI instance."""

    app_settings = app_settings or default_settings

    app = FastAPI(
        title="Legal Practice Site Backend",
        description="Contact form endpoint for the law office marketing site",
        version=app_settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = app_settings

    if app_settings.environment == "production":
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(app_settings.cors_allowed_origins),
            allow_credentials=False,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )
    else:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(app_settings.cors_allowed_origins),
            # Allow any localhost port in dev (Vite/etc.)
            allow_origin_regex=r"^http://(localhost|127\.0\.0\.1)(:\d+)?$",
            allow_credentials=False,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(request: Request, exc: ConfigurationError):
        """Log configuration problems and answer with the generic failure envelope."""

        logger.error("Configuration error on %s: %s", request.url.path, format_configuration_error(exc))
        payload = api_error(code=status.HTTP_500_INTERNAL_SERVER_ERROR, message=SERVER_FAILURE_MESSAGE)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=payload)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy", "version": app_settings.app_version}

    register_http_request_logging(app)

    app.include_router(contact_router)

    timing_info = ""
    if start_time is not None:
        elapsed = time.time() - start_time
        timing_info = f" (loaded in {elapsed:.2f}s)"

    logger.info(f"Application created with contact router{timing_info}")
    return app


app = create_app()


if __name__ == "__main__":  # pragma: no cover - manual execution helper
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
