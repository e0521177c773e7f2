"""
Sikkim Tourism Backend — FastAPI Application Factory
======================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app(settings) wires settings, storage, middleware, exception
       handlers, routers and the optional static site, and returns the app.
Who:   uvicorn (`uvicorn sikkim.main:app`), `python -m sikkim`, and tests.
When:  Once per process (or once per test).

Application Architecture:
    ┌─────────────────────────────────────────────────────────┐
    │                     FastAPI App                         │
    │                                                         │
    │  Middleware Chain:                                      │
    │  ┌──────────┐ ┌──────────┐ ┌──────────┐ ┌──────────┐    │
    │  │ Req ID   │→│ Logging  │→│  GZip    │→│  CORS    │    │
    │  └──────────┘ └──────────┘ └──────────┘ └──────────┘    │
    │                                                         │
    │  Routes (/api):                                         │
    │  health · destinations · bookings · contact(s)          │
    │  Protected routes depend on security.require_admin      │
    │                                                         │
    │  Mount "/": SPAStaticFiles(PUBLIC_DIR) if it exists     │
    │                                                         │
    │  Exception Handlers:                                    │
    │  Validation→400 │ Auth→401 │ NotFound→404 │ DB→500      │
    └─────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Create tables and seed destinations (fatal on failure)
    3. Log the listen address; uvicorn starts accepting connections only now

    Shutdown:
    1. Dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncGenerator, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from sikkim import __version__
from sikkim.bootstrap import init_db
from sikkim.config import Settings, get_settings
from sikkim.database import Database
from sikkim.exceptions import (
    AuthorizationError,
    DatabaseError,
    NotFoundError,
    TourismError,
    ValidationError,
)
from sikkim.middleware.logging import RequestLoggingMiddleware
from sikkim.middleware.request_id import RequestIDMiddleware, request_id_var
from sikkim.routes import bookings, contacts, destinations, health
from sikkim.security import ADMIN_TOKEN_HEADER
from sikkim.static import build_static_app

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once, at startup.

    Format: 2025-01-15T12:00:00 [INFO] sikkim.bootstrap: Seeded destinations
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our own access log replaces uvicorn's
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: logging, then database bootstrap. A StartupError raised by
    init_db is not caught here; uvicorn reports "Application startup failed"
    and exits without ever listening.

    Shutdown: dispose the engine so the SQLite file is released cleanly.
    """
    settings: Settings = app.state.settings
    database: Database = app.state.database

    setup_logging(settings.log_level)
    logger.info("Sikkim backend starting up (database: %s)", settings.db_path)
    if app.state.static_app is not None:
        logger.info("Serving static files from %s", Path(settings.public_dir).resolve())
    else:
        logger.info("Public directory not found at %s", Path(settings.public_dir).resolve())

    await init_db(database)

    logger.info("Sikkim backend listening on http://%s:%d", settings.host, settings.port)
    logger.info("Use %s header to access admin endpoints", ADMIN_TOKEN_HEADER)

    yield

    logger.info("Sikkim backend shutting down...")
    await database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def error_body(error: str, details: Any = None) -> Dict[str, Any]:
    """{"error": ..., ["details": ...], "request_id": ...}"""
    content: Dict[str, Any] = {"error": error}
    if details is not None:
        content["details"] = details
    content["request_id"] = request_id_var.get("")
    return content


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and JSON error bodies.

    Handler hierarchy:
        ValidationError          → 400 {"error": "<which fields are required>"}
        RequestValidationError   → 400 {"error": "invalid request"}
        AuthorizationError       → 401 {"error": "unauthorized"}
        NotFoundError            → 404 {"error": "not found"}
        DatabaseError            → 500 {"error": "db error", "details": "<driver text>"}
        TourismError (base)      → 500
        HTTPException (framework)→ its own status, {"error": ...}
        Exception (fallback)     → 500 {"error": "internal server error"}
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.info("[%s] Validation error: %s %s", request_id_var.get(""), exc.message, exc.context)
        return JSONResponse(status_code=400, content=error_body(exc.message))

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content=error_body("invalid request"))

    @app.exception_handler(AuthorizationError)
    async def handle_authorization_error(request: Request, exc: AuthorizationError):
        return JSONResponse(status_code=401, content=error_body(exc.message))

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content=error_body(exc.message))

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.details, exc.context)
        return JSONResponse(status_code=500, content=error_body(exc.message, exc.details))

    @app.exception_handler(TourismError)
    async def handle_tourism_error(request: Request, exc: TourismError):
        logger.error("[%s] Application error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context)
        return JSONResponse(status_code=500, content=error_body(exc.message))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            error = "not found"
        elif exc.status_code == 405:
            error = "method not allowed"
        else:
            error = str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(error),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Stack trace goes to the log only; the client gets a generic 500."""
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        # Runs outside RequestIDMiddleware, so the header is not added for us
        headers = {"X-Request-ID": rid} if rid else None
        return JSONResponse(
            status_code=500,
            content=error_body("internal server error"),
            headers=headers,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration to run with; defaults to get_settings().
                  Tests pass their own instance (temporary DB, known token).

    Returns:
        Configured FastAPI instance. `app.state.settings` and
        `app.state.database` hold the injected configuration and storage.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Sikkim Tourism API",
        description=(
            "Destination listings, booking requests and contact messages for the "
            "Sikkim tourism site. Admin endpoints require the X-ADMIN-TOKEN header."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = Database(settings.database_url, echo=settings.log_level == "DEBUG")

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → GZip → CORS → routes
    origins = settings.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers reject credentialed requests against a wildcard origin
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(destinations.router)
    app.include_router(bookings.router)
    app.include_router(contacts.router)

    # Static site last: the "/" mount must never shadow an API route
    static_app = build_static_app(settings.public_dir, settings.entry_document)
    app.state.static_app = static_app
    if static_app is not None:
        app.mount("/", static_app, name="static")

    return app


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `sikkim.main:app` to be importable
app = create_app()
