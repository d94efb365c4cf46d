"""
Brewery Backend — FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes assembly of engine, repositories, mappers and services,
       plus middleware, exception handlers and routes, in one place.
How:   Factory pattern: create_app(settings) returns a configured FastAPI instance.
Who:   Called by uvicorn (uvicorn brewery.main:app) and by the test suite.

Application Architecture:
    ┌──────────────────────────────────────────────────────┐
    │                    FastAPI App                       │
    │                                                      │
    │  Middleware Chain:                                   │
    │  ┌──────────┐ ┌─────────────┐ ┌──────────┐           │
    │  │  Req ID  │→│  Logging    │→│  CORS    │           │
    │  └──────────┘ └─────────────┘ └──────────┘           │
    │                                                      │
    │  Routes:                                             │
    │  ┌────────────────┐ ┌──────────────────┐ ┌─────────┐ │
    │  │ /api/v2/beer   │ │ /api/v2/customer │ │ /health │ │
    │  └────────────────┘ └──────────────────┘ └─────────┘ │
    │                                                      │
    │  Exception Handlers:                                 │
    │  Validation→400 │ NotFound→404 │ Database→500        │
    └──────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, validate settings, optionally create the
              schema, log row counts
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from brewery import __version__
from brewery.config import Settings, settings as default_settings
from brewery.database import Base, build_engine, build_session_factory, dispose_engine
from brewery.exceptions import (
    BreweryError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)
from brewery.mappers import BeerMapper, CustomerMapper
from brewery.middleware.logging import RequestLoggingMiddleware
from brewery.middleware.request_id import RequestIDMiddleware, request_id_var
from brewery.repositories import BeerRepository, CustomerRepository
from brewery.routes import beers, customers, health
from brewery.services.beer_service import BeerService
from brewery.services.customer_service import CustomerService

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    When:   Called once during app startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Docker captures stdout
        ],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    app_settings: Settings = app.state.settings

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(app_settings.log_level)
    logger.info("=" * 60)
    logger.info("Brewery Backend %s starting up...", __version__)

    try:
        app_settings.validate_required_for_production()
    except ValueError as e:
        # Keep serving; /health reports the broken database
        logger.error("Configuration error: %s", str(e))

    if app_settings.create_schema_on_startup:
        async with app.state.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ensured (create_all)")

    try:
        logger.info("Beer count is: %d", await app.state.beer_service.count_beers())
        logger.info("Customer count is: %d", await app.state.customer_service.count_customers())
    except DatabaseError:
        logger.warning("Could not count rows at startup; is the schema migrated?")

    logger.info("Server ready at http://%s:%d", app_settings.backend_host, app_settings.backend_port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Brewery Backend shutting down...")
    await dispose_engine(app.state.engine)
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _validation_response(exc: ValidationError) -> JSONResponse:
    rid = request_id_var.get("")
    logger.warning("[%s] Validation error: %s %s", rid, exc.message, exc.violations)
    return JSONResponse(
        status_code=400,
        content={
            "error": "validation_error",
            "message": exc.message,
            "details": {"violations": exc.violations},
            "request_id": rid,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        RequestValidationError  → 400 Bad Request (body/path failed pydantic checks)
        ValidationError         → 400 Bad Request
        NotFoundError           → 404 Not Found
        DatabaseError           → 500 Internal Server Error
        BreweryError (base)     → 500 Internal Server Error
        Exception (fallback)    → 500 Internal Server Error

    Exception handlers never expose internal details (stack traces, SQL)
    in the response body; those are logged server-side.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """Every violated constraint in one 400, instead of FastAPI's default 422."""
        return _validation_response(ValidationError.from_errors(exc.errors()))

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        return _validation_response(exc)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=404,
            content={
                "error": "not_found",
                "message": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        """Generic message to the client, context logged server-side."""
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "An internal error occurred. Please try again later.",
                "request_id": rid,
            },
        )

    @app.exception_handler(BreweryError)
    async def handle_brewery_error(request: Request, exc: BreweryError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again or contact support.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Dependencies are assembled here exactly once and passed down through
    constructors: engine → session factory → repositories → services.
    The services are parked on `app.state` for `brewery.dependencies`.

    Args:
        app_settings: Settings to use; defaults to the module-level instance.
    """
    app_settings = app_settings or default_settings

    app = FastAPI(
        title="Brewery API",
        description="Reactive CRUD service for beers and customers.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Assemble persistence and services ─────────────────────────────────
    engine = build_engine(app_settings)
    session_factory = build_session_factory(engine)

    app.state.settings = app_settings
    app.state.engine = engine
    app.state.beer_service = BeerService(BeerRepository(session_factory), BeerMapper())
    app.state.customer_service = CustomerService(
        CustomerRepository(session_factory), CustomerMapper()
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Total-Count", "Location"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(beers.router)
    app.include_router(customers.router)
    app.include_router(health.router)

    return app


# uvicorn expects `brewery.main:app` to be importable
app = create_app()
