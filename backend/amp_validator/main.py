"""AMP validator bridge: HTTP service.

FastAPI application with lifespan management and error mapping for engine faults.
"""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from amp_validator.config import get_settings
from amp_validator.api.router import api_router
from amp_validator.errors import EngineLoadError, EngineUninitializedError
from amp_validator.logging_config import configure_logging
from amp_validator.services.engine_context import ValidatorContext, default_context

configure_logging()

logger = structlog.get_logger()


def create_app(context: Optional[ValidatorContext] = None) -> FastAPI:
    """Build the application around a validator context (the default one if not given)."""
    validator_context = context or default_context

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application startup and shutdown lifecycle."""
        settings = get_settings()

        # ── Startup ──
        logger.info("app_starting", debug=settings.DEBUG)
        app.state.validator_context = validator_context

        if settings.EAGER_ENGINE_LOAD:
            try:
                await validator_context.init()
            except EngineLoadError as e:
                # App can still start; requests retry the load lazily
                logger.error("engine_eager_load_failed", error=str(e))

        logger.info("app_started", engine=validator_context.state.value)

        yield

        # ── Shutdown ──
        logger.info("app_stopped")

    app = FastAPI(
        title="AMP Validator Bridge",
        description=(
            "Validates documents with the AMP validator engine and returns "
            "plain, inspectable results with engine-rendered messages."
        ),
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # ── Exception Handlers ──

    @app.exception_handler(EngineLoadError)
    @app.exception_handler(EngineUninitializedError)
    async def engine_unavailable_handler(request: Request, exc: Exception):
        """The engine could not be loaded; the request may succeed later."""
        logger.error("engine_unavailable", path=request.url.path, error=str(exc))
        return JSONResponse(
            status_code=503,
            content={"error": "engine_unavailable", "message": str(exc)},
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        """Handle bad input."""
        return JSONResponse(
            status_code=422,
            content={"error": "validation_error", "message": str(exc)},
        )

    # ── Routes ──

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/")
    async def root():
        """Root endpoint: API info."""
        return {
            "name": "AMP Validator Bridge",
            "version": "1.0.0",
            "docs": "/docs",
            "health": "/api/v1/health",
        }

    return app


app = create_app()
