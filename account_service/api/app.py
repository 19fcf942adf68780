"""
FastAPI application factory.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from account_service.api.middleware.error_handler import ErrorHandlerMiddleware
from account_service.api.middleware.logging import LoggingMiddleware
from account_service.api.routes import accounts, addresses, health
from account_service.config.database import (
    create_engine,
    create_tables,
    get_async_session_factory,
)
from account_service.config.logging import configure_logging, get_logger
from account_service.config.settings import Settings, settings

logger = get_logger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure FastAPI application."""
    app_settings = app_settings or settings
    configure_logging(app_settings)

    engine = create_engine(app_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Application startup", environment=app_settings.ENVIRONMENT)
        if app_settings.CREATE_TABLES_ON_STARTUP:
            await create_tables(engine)
        try:
            yield
        finally:
            await engine.dispose()
            logger.info("Application shutdown")

    app = FastAPI(
        title=app_settings.APP_NAME,
        version=app_settings.APP_VERSION,
        description="Account and address book service for the marketplace",
        openapi_url=f"{app_settings.API_PREFIX}/openapi.json" if app_settings.DEBUG else None,
        docs_url=f"{app_settings.API_PREFIX}/docs" if app_settings.DEBUG else None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.engine = engine
    app.state.session_factory = get_async_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add custom middleware
    ErrorHandlerMiddleware(app)
    LoggingMiddleware(app)

    # Add routes
    app.include_router(health.router)
    app.include_router(accounts.router, prefix=app_settings.API_PREFIX)
    app.include_router(addresses.router, prefix=app_settings.API_PREFIX)

    if app_settings.ENABLE_METRICS:
        app.include_router(health.metrics_router)

    return app
