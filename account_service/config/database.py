"""
Database engine and session factory construction.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool, StaticPool

from account_service.config.logging import get_logger
from account_service.config.settings import Settings, settings

logger = get_logger(__name__)


def create_engine(app_settings: Optional[Settings] = None) -> AsyncEngine:
    """Create async SQLAlchemy engine."""
    app_settings = app_settings or settings
    url = app_settings.DATABASE_URL

    if app_settings.uses_sqlite:
        # In-memory databases only live as long as their single connection
        return create_async_engine(
            url,
            echo=app_settings.DATABASE_ECHO,
            poolclass=StaticPool if ":memory:" in url else NullPool,
            connect_args={"check_same_thread": False},
        )

    return create_async_engine(
        url,
        echo=app_settings.DATABASE_ECHO,
        pool_size=app_settings.DATABASE_POOL_SIZE,
        max_overflow=app_settings.DATABASE_MAX_OVERFLOW,
        pool_pre_ping=True,
    )


def get_async_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Get async session factory bound to an engine."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """Create all tables registered on the declarative base."""
    from account_service.infrastructure.database.models import Base

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured", url=engine.url.render_as_string())
