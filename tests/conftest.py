"""Shared fixtures: in-memory SQLite engine, recording sync client, ASGI test client."""
import os

# Settings are read at import time; point them at test values first.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("PORT", "3000")
os.environ.setdefault("SALES_SERVICE_URL", "http://localhost:3001")
os.environ.setdefault("ENVIRONMENT", "test")

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.core.deps import get_sales_sync
from app.core.sales_sync import build_sync_payload
from app.main import app
from app.models import vehicle  # noqa: F401


class RecordingSalesSync:
    """Stands in for SalesServiceSync and keeps the payloads it was asked to send."""

    def __init__(self):
        self.payloads = []

    async def sync_vehicle(self, vehicle) -> bool:
        self.payloads.append(build_sync_payload(vehicle))
        return True

    async def aclose(self) -> None:
        return None


@pytest_asyncio.fixture
async def db_engine():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(db_engine):
    return async_sessionmaker(db_engine, expire_on_commit=False, class_=AsyncSession)


@pytest_asyncio.fixture
async def db_session(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
def sales_sync():
    return RecordingSalesSync()


@pytest_asyncio.fixture
async def client(session_maker, sales_sync):
    async def override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_sales_sync] = lambda: sales_sync
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def corolla():
    return {
        "brand": "Toyota",
        "model": "Corolla",
        "year": 2024,
        "color": "Silver",
        "price": 35000,
        "status": "AVAILABLE",
    }
