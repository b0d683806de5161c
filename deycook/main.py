"""FastAPI application entry point."""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from deycook import __version__
from deycook.api.routes import health, recipes, send
from deycook.config import Settings, get_settings
from deycook.core.request_id import get_request_id
from deycook.middleware.logging import RequestLoggingMiddleware
from deycook.middleware.rate_limit import get_rate_limit_exceeded_handler, limiter
from deycook.middleware.security import SecurityHeadersMiddleware, setup_compression, setup_cors
from deycook.utils.exceptions import DeyCookException, UpstreamError
from deycook.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

# Path prefix the browser client calls
LEGACY_PREFIX = "/api"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request validation errors with detailed messages."""
    request_id = get_request_id()

    logger.warning(
        f"Validation error: {str(exc)}",
        extra={"request_id": request_id, "path": request.url.path, "errors": exc.errors()},
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"error": "Validation error", "details": exc.errors(), "request_id": request_id},
    )


async def deycook_exception_handler(request: Request, exc: DeyCookException) -> JSONResponse:
    """Render application exceptions as structured JSON."""
    request_id = get_request_id()

    log = logger.error if exc.status_code >= 500 or isinstance(exc, UpstreamError) else logger.warning
    log(
        f"{type(exc).__name__}: {exc.message}",
        extra={"request_id": request_id, "path": request.url.path, "status_code": exc.status_code},
    )

    content = exc.to_payload()
    content["request_id"] = request_id
    return JSONResponse(status_code=exc.status_code, content=content)


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    request_id = get_request_id()

    logger.error(
        f"Unexpected exception: {str(exc)}",
        extra={"request_id": request_id, "path": request.url.path},
        exc_info=True,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error", "request_id": request_id},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Explicit settings replace ``get_settings()`` for every route dependency.
    """
    explicit_settings = settings is not None
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="DeyCook API",
        description="Recipe generation from ingredients using Gemini",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    if explicit_settings:
        app.dependency_overrides[get_settings] = lambda: settings

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, get_rate_limit_exceeded_handler())
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(DeyCookException, deycook_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # Added last runs first: request ID is set before anything else logs
    app.add_middleware(SecurityHeadersMiddleware)
    setup_compression(app)
    setup_cors(app, settings)
    app.add_middleware(RequestLoggingMiddleware)

    for router in (health.router, recipes.router, send.router):
        app.include_router(router)
        app.include_router(router, prefix=LEGACY_PREFIX, include_in_schema=False)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {"name": "DeyCook API", "version": __version__, "docs": "/docs"}

    @app.on_event("startup")
    async def startup_event():
        logger.info("DeyCook API starting up...")
        logger.info(f"Model: {settings.model_id}, mock mode: {settings.use_mock}")
        logger.info(f"Video lookup: {'enabled' if settings.youtube_api_key else 'disabled'}")

    return app


app = create_app()


def run() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run("deycook.main:app", host=settings.host, port=settings.port)
