# File: tests/conftest.py
"""Pytest configuration and fixtures."""

import os
import tempfile
from pathlib import Path

# Point the app's engine at the test database before anything imports zerobudget
_TEST_DB_DIR = tempfile.mkdtemp(prefix="zerobudget-tests-")
TEST_DATABASE_URL = os.getenv(
    "TEST_DATABASE_URL",
    f"sqlite+aiosqlite:///{Path(_TEST_DB_DIR) / 'pytest.db'}",
)
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ.setdefault("ENVIRONMENT", "test")

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402

from zerobudget.core.db import Base, get_db  # noqa: E402
from zerobudget.core.security import hash_password  # noqa: E402
from zerobudget.main import create_app  # noqa: E402

# Import all models so Base.metadata knows every table
import zerobudget.models  # noqa: E402,F401
from tests.factories import UserFactory  # noqa: E402


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Fresh schema for each test."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def session_factory(test_engine):
    """Session factory bound to the test engine (for CLI runs and concurrent sessions)."""
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture(scope="function")
async def db_session(session_factory):
    """Create fresh DB session for each test."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession, request):
    """A user with a password, unique per test."""
    return await UserFactory.create(
        db_session,
        name="Test User",
        email=f"testuser_{request.node.name[:40]}@example.com".lower(),
        hashed_password=hash_password("testpass123"),
    )


@pytest_asyncio.fixture
async def client(db_session: AsyncSession, test_user):
    """Async test client authenticated as test_user."""
    from zerobudget.api.auth import get_current_user

    app = create_app()

    async def override_get_db():
        yield db_session

    async def override_get_current_user():
        return test_user

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_current_user] = override_get_current_user

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        ac.test_user = test_user
        ac.db_session = db_session
        yield ac


@pytest_asyncio.fixture
async def unauthenticated_client(db_session: AsyncSession):
    """AsyncClient with the real session-based auth (for testing auth failures and login)."""
    app = create_app()

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        ac.db_session = db_session
        yield ac
