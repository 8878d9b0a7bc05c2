"""Pytest configuration for all tests."""

import os
from typing import AsyncGenerator
from unittest.mock import AsyncMock

os.environ.setdefault("STUDYFI_ENVIRONMENT", "testing")
os.environ.setdefault("STUDYFI_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from studyfi.infrastructure.persistence import models  # noqa: F401
from studyfi.infrastructure.persistence.database import Base


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session.

    Uses an in-memory SQLite database for testing.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session_maker = sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def mock_email_service():
    """Email service double that records reset emails and reports success."""
    service = AsyncMock()
    service.send_password_reset_email.return_value = True
    return service


@pytest_asyncio.fixture
async def client(db_session, mock_email_service) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the app, using the test session and email double."""
    from studyfi.infrastructure.api.app import app
    from studyfi.infrastructure.api.dependencies import get_email_service
    from studyfi.infrastructure.persistence.database import get_db_session

    async def override_get_db_session():
        yield db_session

    def override_get_email_service():
        return mock_email_service

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_email_service] = override_get_email_service

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
