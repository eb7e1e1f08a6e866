# portkey/main.py

"""
FastAPI application entry point.

Wires logging, CORS, the application lifespan and every domain router.
Run with: uvicorn portkey.main:app --reload
"""

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import FastAPI, Depends, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware

from portkey import API_PREFIX
from portkey.core.config import settings
from portkey.core.database import engine, get_session, create_db_and_tables

from portkey.domains.usr.routers import router as usr_router
from portkey.domains.shp.routers import router as shp_router
from portkey.domains.att.routers import router as att_router
from portkey.domains.inv.routers import router as inv_router
from portkey.domains.dash.routers import router as dash_router, seed_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


# -- Application lifespan --
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Creates tables on startup when AUTO_CREATE_TABLES is set and releases the
    connection pool on shutdown.
    """
    logger.info("Starting %s %s (%s)", settings.APP_NAME, settings.APP_VERSION, settings.APP_ENV)
    if settings.AUTO_CREATE_TABLES:
        await create_db_and_tables()

    yield

    logger.info("Shutting down %s", settings.APP_NAME)
    await engine.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# -- CORS --
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    max_age=3600,
)

# -- Domain routers --
app.include_router(usr_router, prefix=f"{API_PREFIX}/users")
app.include_router(shp_router, prefix=f"{API_PREFIX}/shipments")
app.include_router(att_router, prefix=f"{API_PREFIX}/attendance")
app.include_router(inv_router, prefix=f"{API_PREFIX}/products")
app.include_router(dash_router, prefix=f"{API_PREFIX}/dashboard")
app.include_router(seed_router, prefix=f"{API_PREFIX}/seed")


@app.get("/", summary="API Root", response_description="Welcome message and documentation link.")
async def read_root():
    return {"message": f"Welcome to {settings.APP_NAME}. Visit /docs for interactive API documentation."}


@app.get("/health-check", summary="Health Check", response_description="Status of the application and database connection.")
async def health_check(session: AsyncSession = Depends(get_session)):
    """
    Runs `SELECT 1` to confirm the database is reachable.
    """
    try:
        result = await session.exec(select(1))
        if result.first():
            return {"status": "ok", "database_connection": "successful"}
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Database health check failed: No result from test query"
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error("Health check failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Database connection error during health check: {e}"
        )
