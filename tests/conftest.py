# tests/conftest.py

import os
import uuid
from typing import AsyncGenerator, Callable, Awaitable
from contextlib import asynccontextmanager

# Settings are read at import time, so defaults must be in place first.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret-with-enough-length-for-hs256")

import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402

from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import NullPool, StaticPool  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

from portkey.main import app as main_app  # noqa: E402
from portkey.core import dependencies as deps  # noqa: E402
from portkey.core.database import get_session  # noqa: E402
from portkey.core.security import create_access_token  # noqa: E402
from portkey.domains.usr import models as usr_models  # noqa: E402


# --- Test database ---
# In-memory SQLite by default; point TEST_DATABASE_URL at PostgreSQL to run
# the suite against the production driver.
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite://")


def _make_test_engine():
    if TEST_DATABASE_URL.startswith("sqlite"):
        return create_async_engine(
            TEST_DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,  # one shared connection keeps the in-memory database alive
        )
    return create_async_engine(TEST_DATABASE_URL, poolclass=NullPool)


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Fresh schema and session for every test function.
    """
    test_engine = _make_test_engine()
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)

    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        await session.close()
        async with test_engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.drop_all)
        await test_engine.dispose()


# --- Users by role ---
@pytest_asyncio.fixture(scope="function")
def user_factory(db_session: AsyncSession) -> Callable[..., Awaitable[usr_models.User]]:
    """
    Returns a coroutine that inserts a profile with the given role.
    """
    async def _create_user(
        name: str,
        role: usr_models.UserRole = usr_models.UserRole.CLIENT,
        **kwargs,
    ) -> usr_models.User:
        user = usr_models.User(
            id=kwargs.pop("id", uuid.uuid4()),
            email=f"{name}@example.com",
            full_name=name.title(),
            role=role,
            **kwargs,
        )
        db_session.add(user)
        await db_session.commit()
        await db_session.refresh(user)
        return user
    return _create_user


@pytest_asyncio.fixture(scope="function")
async def test_admin_user(user_factory: Callable) -> usr_models.User:
    return await user_factory("admin", role=usr_models.UserRole.ADMIN)


@pytest_asyncio.fixture(scope="function")
async def test_broker_user(user_factory: Callable) -> usr_models.User:
    return await user_factory("broker", role=usr_models.UserRole.BROKER)


@pytest_asyncio.fixture(scope="function")
async def test_user(user_factory: Callable) -> usr_models.User:
    """Plain client profile."""
    return await user_factory("client", role=usr_models.UserRole.CLIENT)


@pytest_asyncio.fixture(scope="function")
async def other_user(user_factory: Callable) -> usr_models.User:
    return await user_factory("other", role=usr_models.UserRole.CLIENT)


# --- Clients ---
@asynccontextmanager
async def _client_context(db_session: AsyncSession, token: str = None) -> AsyncGenerator[AsyncClient, None]:
    """
    AsyncClient bound to the app with the session dependencies pointed at
    the test session. Authentication is not overridden: the bearer token
    goes through the real verification path.
    """
    def override_get_session():
        yield db_session

    original_overrides = main_app.dependency_overrides.copy()
    try:
        main_app.dependency_overrides.update({
            get_session: override_get_session,
            deps.get_db_session: override_get_session,
        })
        transport = ASGITransport(app=main_app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            if token:
                client.headers["Authorization"] = f"Bearer {token}"
            yield client
    finally:
        main_app.dependency_overrides.clear()
        main_app.dependency_overrides.update(original_overrides)


@pytest_asyncio.fixture(scope="function")
def authorized_client_factory(db_session: AsyncSession):
    """
    Returns a context-manager factory yielding a client authenticated as
    the given user.
    """
    def _factory(user: usr_models.User):
        token = create_access_token(data={"sub": str(user.id), "email": user.email})
        return _client_context(db_session, token)
    return _factory


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Unauthenticated client."""
    async with _client_context(db_session) as async_client:
        yield async_client


@pytest_asyncio.fixture(scope="function")
async def admin_client(authorized_client_factory, test_admin_user: usr_models.User) -> AsyncGenerator[AsyncClient, None]:
    async with authorized_client_factory(test_admin_user) as async_client:
        yield async_client


@pytest_asyncio.fixture(scope="function")
async def broker_client(authorized_client_factory, test_broker_user: usr_models.User) -> AsyncGenerator[AsyncClient, None]:
    async with authorized_client_factory(test_broker_user) as async_client:
        yield async_client


@pytest_asyncio.fixture(scope="function")
async def authorized_client(authorized_client_factory, test_user: usr_models.User) -> AsyncGenerator[AsyncClient, None]:
    """Client authenticated as the plain client profile."""
    async with authorized_client_factory(test_user) as async_client:
        yield async_client


@pytest_asyncio.fixture(scope="function")
async def other_client(authorized_client_factory, other_user: usr_models.User) -> AsyncGenerator[AsyncClient, None]:
    async with authorized_client_factory(other_user) as async_client:
        yield async_client
