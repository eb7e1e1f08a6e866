# portkey/core/database.py

"""
Database connection and session management.

- Builds the SQLModel async engine from settings.
- Provides the per-request session dependency and a standalone session
  context manager for scripts.
- Creates tables on demand (development only; migrations are handled outside
  the application).
"""

import logging
from typing import Any, AsyncGenerator, Dict
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.orm import sessionmaker

from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from portkey.core.config import settings

# Every table model must be imported so SQLModel.metadata knows about it.
from portkey.domains.usr import models as usr_models  # noqa: F401
from portkey.domains.shp import models as shp_models  # noqa: F401
from portkey.domains.att import models as att_models  # noqa: F401
from portkey.domains.inv import models as inv_models  # noqa: F401

logger = logging.getLogger(__name__)


def engine_options(url: str) -> Dict[str, Any]:
    """
    Keyword arguments for create_async_engine.
    Pool sizing only applies to server databases; SQLite uses its own pool.
    """
    options: Dict[str, Any] = {"echo": settings.DEBUG_MODE, "future": True}
    if not url.startswith("sqlite"):
        options.update(
            pool_recycle=3600,  # recycle connections hourly
            pool_size=10,
            max_overflow=20,
            pool_pre_ping=True,
        )
    return options


_database_url = settings.DATABASE_URL.get_secret_value()

engine: AsyncEngine = create_async_engine(_database_url, **engine_options(_database_url))

AsyncSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# =============================================================================
# Table creation
# =============================================================================
async def create_db_and_tables(bind: AsyncEngine = engine) -> None:
    """
    Creates every registered table. Existing tables are left untouched.
    """
    logger.info("Creating database tables (if missing)...")
    async with bind.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database tables ready.")


# =============================================================================
# Session dependencies
# =============================================================================
async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding one async session per request.
    """
    async with AsyncSessionLocal() as session:
        yield session


@asynccontextmanager
async def get_async_session_context() -> AsyncGenerator[AsyncSession, None]:
    """
    Standalone session for scripts and other code running outside a request.
    Commits on success, rolls back on error.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
