# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.v1.router import api_router
from src.config import Settings, settings
from src.database import create_db_engine, create_session_factory, init_db
from src.exceptions import RBACError
from src.schemas.common import HealthResponse
from src.services.rbac_seed_service import seed_rbac_data

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema and seed the store before serving any request."""
    app_settings: Settings = app.state.settings
    init_db(app.state.engine)

    if app_settings.seed_on_startup:
        logger.info("Seeding access control data...")
        db = app.state.session_factory()
        try:
            # A SeedError propagates and aborts startup
            seed_rbac_data(
                db,
                admin_username=app_settings.admin_username,
                admin_email=app_settings.admin_email,
                admin_password=app_settings.admin_password,
            )
        finally:
            db.close()

    yield

    logger.info("Shutting down, disposing database engine...")
    app.state.engine.dispose()


def _format_validation_error(error: dict) -> str:
    location = ".".join(str(part) for part in error["loc"] if part != "body")
    return f"{location}: {error['msg']}" if location else error["msg"]


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain and HTTP errors to JSON bodies with an ``error`` field."""

    @app.exception_handler(RBACError)
    async def rbac_error_handler(request: Request, exc: RBACError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "Validation failed",
                "details": [_format_validation_error(e) for e in exc.errors()],
            },
        )


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the application with its own engine and session factory."""
    app_settings = app_settings or settings

    app = FastAPI(
        title="RBAC Admin Console",
        description="Role-based access control for users, groups, roles and modules",
        version="1.0.0",
        lifespan=lifespan,
    )

    engine = create_db_engine(app_settings.database_url)
    app.state.settings = app_settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    register_exception_handlers(app)

    @app.get("/health", response_model=HealthResponse)
    def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy")

    app.include_router(api_router, prefix="/api/v1")
    return app


app = create_app()
