"""Shared fixtures: per-test SQLite database, FastAPI test client, admin token.

Invariants:
    - Every test gets a fresh SQLite database file under tmp_path
    - get_db dependency overridden to use the test session factory
    - Uploads land under tmp_path, never in the working tree
"""

import os

os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from portfolio_api.core.auth import create_access_token
from portfolio_api.core.config import settings
from portfolio_api.core.database import get_db
from portfolio_api.main import app
from portfolio_api.models import Base
from portfolio_api.services.admin_service import admin_service

ADMIN_EMAIL = "admin@portfolio.dev"
ADMIN_PASSWORD = "s3cret-pass"


@pytest.fixture
async def test_engine(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def upload_root(tmp_path, monkeypatch):
    root = tmp_path / "uploads"
    monkeypatch.setattr(settings, "upload_root", str(root))
    return root


@pytest.fixture
async def client(test_session_factory, upload_root):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def admin_credentials():
    return {"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}


@pytest.fixture
async def admin(test_db):
    return await admin_service.ensure_admin(
        test_db, email=ADMIN_EMAIL, password=ADMIN_PASSWORD,
    )


@pytest.fixture
def auth_headers(admin):
    token = create_access_token(admin_id=str(admin.id), email=admin.email)
    return {"Authorization": f"Bearer {token}"}
