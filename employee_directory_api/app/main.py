"""
Main entrypoint for the Employee Directory API.

This module assembles the FastAPI application, sets up logging,
installs the error handlers and includes the API router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn employee_directory_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router as api_router
from .core.config import settings
from .core.db import init_db
from .core.errors import EmployeeDirectoryError, MethodNotSupportedError
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def error_response(exc: EmployeeDirectoryError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as ``{"error": ...}`` or ``{"errors": {...}}``."""

    @app.exception_handler(EmployeeDirectoryError)
    async def directory_error_handler(request: Request, exc: EmployeeDirectoryError) -> JSONResponse:
        # Database causes are logged by the service layer before raising.
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Malformed JSON or a non-integer id; FastAPI would answer 422.
        errors = {}
        for error in exc.errors():
            if error.get("type") == "json_invalid":
                # loc is ("body", <byte offset>)
                key = "body"
            else:
                key = ".".join(str(part) for part in error.get("loc", ())[1:]) or "body"
            errors[key] = error.get("msg", "Invalid value")
        return JSONResponse(status_code=400, content={"errors": errors})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 405:
            response = error_response(MethodNotSupportedError())
            if exc.headers:
                response.headers.update(exc.headers)
            return response
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=exc.headers,
        )


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Performs one-time setup: logging, error handlers, the API router
    and the startup hook that creates the database schema.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file if needed and brings the schema up to date.
        init_db()
        logger.info("Employee database ready at %s", settings.database_url)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
