"""
Main entrypoint for the Virtual Catalog API.

This module assembles the FastAPI application, sets up logging, CORS,
JSON error responses and the versioned routers.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``, e.g.::

    uvicorn virtual_catalog_api.app.main:app --reload

Error responses always carry an ``error`` key instead of FastAPI's
default ``detail``: unknown routes return 404 ``{"error": "Not found"}``,
malformed bodies and invalid ids return 400, and unexpected faults
return 500 with a generic message.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.errors import CatalogInternalError
from .core.logging_config import setup_logging
from .services.catalog_service import CatalogService


logger = logging.getLogger(__name__)


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "invalid value")
    return f"Invalid request: {location}: {message}" if location else f"Invalid request: {message}"


def register_exception_handlers(app: FastAPI, app_settings: Settings) -> None:
    """Render every error as ``{"error": ...}`` JSON."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            logger.warning("Route not found: %s %s", request.method, request.url.path)
            detail = "Not found"
        else:
            detail = exc.detail
        return JSONResponse(status_code=exc.status_code, content={"error": detail}, headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = _describe_validation_error(exc)
        logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})

    @app.exception_handler(CatalogInternalError)
    async def catalog_error_handler(request: Request, exc: CatalogInternalError) -> JSONResponse:
        content = {"error": exc.public_message}
        if app_settings.debug and exc.detail:
            content["message"] = exc.detail
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Server error on %s %s", request.method, request.url.path)
        content = {"error": "Internal server error"}
        if app_settings.debug:
            content["message"] = str(exc)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module-level ``settings``.  Each
        application gets its own :class:`CatalogService`, so separate
        apps never share catalog state.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level, app_settings.log_file)

    app = FastAPI(title=app_settings.project_name, version=app_settings.api_version)
    app.state.settings = app_settings
    app.state.catalog = CatalogService.from_settings(app_settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origin_list(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        query = request.url.query
        logger.info("%s %s%s", request.method, request.url.path, f"?{query}" if query else "")
        return await call_next(request)

    register_exception_handlers(app, app_settings)

    # Existing clients call /api/...; /api/v1/... is the versioned alias.
    app.include_router(v1_router, prefix="/api")
    app.include_router(v1_router, prefix="/api/v1")

    logger.info("Catalog ready with %s items", app_settings.catalog_size)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
