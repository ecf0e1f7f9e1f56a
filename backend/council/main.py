"""
Student Council API — FastAPI Application Factory
===================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       with its own store, credential issuer, PDF renderer and upload service.
Who:   uvicorn (`council.main:app`), `python -m council` and the test suite.

Application Architecture:
    ┌──────────────────────────────────────────────────────┐
    │                    FastAPI App                       │
    │                                                      │
    │  Middleware: Request ID → Logging → GZip → CORS      │
    │                                                      │
    │  app.state:                                          │
    │    store               InMemoryStore (seeded)        │
    │    credential_issuer   DemoCredentialIssuer          │
    │    pdf_renderer        PlaceholderPdfRenderer        │
    │    upload_service      UploadService(UPLOAD_DIR)     │
    │                                                      │
    │  Exception Handlers:                                 │
    │    CouncilError → its status │ 422 │ 404 │ 500       │
    └──────────────────────────────────────────────────────┘

Lifecycle:
    Construction: settings read, upload directory created, store seeded.
    Startup:      logging configured, startup logged.
    Shutdown:     store cleared, shutdown logged.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from council import __version__
from council.config import Settings, settings
from council.exceptions import CouncilError, FileStorageError, UnauthenticatedError
from council.middleware.logging import RequestLoggingMiddleware
from council.middleware.request_id import RequestIDMiddleware, request_id_var
from council.routes import (
    announcements,
    auth,
    dashboard,
    documents,
    health,
    meetings,
    minutes,
    uploads,
)
from council.schemas.common import ErrorResponse
from council.services.credentials import CredentialIssuer, DemoCredentialIssuer
from council.services.pdf_service import PdfRenderer, PlaceholderPdfRenderer
from council.services.upload_service import UploadService
from council.store import InMemoryStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str) -> None:
    """
    Configure logging for the entire application.

    Format: 2030-01-01T12:00:00 [INFO] council.services.meeting_service: ...
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # The access middleware already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    app_settings: Settings = app.state.settings
    setup_logging(app_settings.log_level)

    logger.info("=" * 60)
    logger.info("Student Council API %s starting up...", __version__)
    logger.info("Upload directory: %s", app.state.upload_service.upload_dir)
    logger.info("Seeded users: %d", len(app.state.store.users))
    logger.info("Server ready at http://%s:%d", app_settings.host, app_settings.port)
    logger.info("=" * 60)

    yield

    logger.info("Student Council API shutting down...")
    app.state.store.clear()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def error_response(
    status_code: int,
    error: str,
    message: str,
    details: Optional[dict] = None,
    headers: Optional[dict] = None,
) -> JSONResponse:
    body = ErrorResponse(
        error=error,
        message=message,
        details=details or None,
        request_id=request_id_var.get("") or None,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        CouncilError subclasses  → the subclass's status_code / error_code
        FileStorageError         → 500, generic message, details logged only
        RequestValidationError   → 422 (malformed or missing request fields)
        Starlette HTTPException  → its status (unknown route 404, 405, ...)
        Exception (fallback)     → 500, generic message, traceback logged

    Bodies never contain stack traces, file paths or OS error text.
    """

    @app.exception_handler(CouncilError)
    async def handle_council_error(request: Request, exc: CouncilError):
        rid = request_id_var.get("")
        headers = None

        if isinstance(exc, FileStorageError):
            logger.error("[%s] File storage error: %s | Context: %s", rid, exc.message, exc.context)
            return error_response(500, exc.error_code, "An internal error occurred. Please try again later.")

        if isinstance(exc, UnauthenticatedError):
            headers = {"WWW-Authenticate": "Bearer"}

        if exc.status_code >= 500:
            logger.error("[%s] %s: %s | Context: %s", rid, type(exc).__name__, exc.message, exc.context)
        else:
            logger.info("[%s] %s: %s", rid, type(exc).__name__, exc.message)

        # Only validation failures echo their context back to the client
        details = exc.context if exc.status_code in (400, 413, 415) else None
        return error_response(exc.status_code, exc.error_code, exc.message, details, headers)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        return error_response(
            422,
            "request_validation_error",
            "The request body or parameters are invalid.",
            details={"errors": [
                {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
                for err in exc.errors()
            ]},
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        error = "not_found" if exc.status_code == 404 else "http_error"
        return error_response(
            exc.status_code,
            error,
            str(exc.detail),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return error_response(
            500,
            "internal_server_error",
            "Something went wrong! Please try again later.",
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    app_settings: Optional[Settings] = None,
    store: Optional[InMemoryStore] = None,
    credential_issuer: Optional[CredentialIssuer] = None,
    pdf_renderer: Optional[PdfRenderer] = None,
    upload_service: Optional[UploadService] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Every collaborator can be overridden; anything not supplied is built
    from `app_settings` (default: the module-level settings singleton).
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title="Student Council API",
        description=(
            "Backend for the student-council management tool: meetings, minutes, "
            "announcements, uploads and dashboard statistics."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.store = store or InMemoryStore.seeded()
    app.state.credential_issuer = credential_issuer or DemoCredentialIssuer()
    app.state.pdf_renderer = pdf_renderer or PlaceholderPdfRenderer()
    app.state.upload_service = upload_service or UploadService(
        upload_dir=app_settings.upload_dir,
        max_file_size=app_settings.max_file_size,
        max_files=app_settings.max_files_per_request,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → GZip → CORS
    origins = app_settings.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(meetings.router)
    app.include_router(minutes.router)
    app.include_router(announcements.router)
    app.include_router(uploads.router)
    app.include_router(documents.router)
    app.include_router(dashboard.router)

    return app


# uvicorn expects `council.main:app` to be importable
app = create_app()
