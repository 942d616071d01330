"""Test fixtures for the fleet availability backend."""
from __future__ import annotations

import os
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")
os.environ.setdefault("CALENDAR_TIMEZONE", "UTC")

from chauffeur.core.config import get_settings
from chauffeur.db.base import Base
from chauffeur.db.session import dispose_engine, get_sessionmaker
from chauffeur.main import app
from chauffeur.models import (
    ServicePackage,
    Vehicle,
    VehicleStatus,
    VehicleUnit,
)


@pytest.fixture(scope="session")
def db_url(tmp_path_factory: pytest.TempPathFactory) -> str:
    """Provide a temporary SQLite database URL for the test session."""
    db_path = tmp_path_factory.mktemp("db") / "test.db"
    return f"sqlite+aiosqlite:///{db_path}"


@pytest_asyncio.fixture()
async def reset_database(db_url: str) -> AsyncIterator[None]:
    """Drop and recreate the database schema for an isolated test."""
    os.environ["DATABASE_URL"] = db_url
    get_settings.cache_clear()
    get_settings()

    await dispose_engine(db_url)
    engine = create_async_engine(db_url)
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.drop_all)
        await connection.run_sync(Base.metadata.create_all)
    await engine.dispose()
    yield
    await dispose_engine(db_url)


@pytest_asyncio.fixture()
async def session(reset_database: None, db_url: str) -> AsyncIterator[AsyncSession]:
    """Yield a session bound to the freshly created schema."""
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as db_session:
        yield db_session


@pytest_asyncio.fixture()
async def app_context(
    reset_database: None, db_url: str
) -> AsyncIterator[dict[str, object]]:
    """Yield an async client and a small seeded fleet."""
    sessionmaker = get_sessionmaker(db_url)

    async with sessionmaker() as db_session:
        sedan = Vehicle(name="Mercedes-Benz S-Class", status=VehicleStatus.ACTIVE)
        sedan.unit = VehicleUnit(quantity=2)
        suv = Vehicle(name="Cadillac Escalade", status=VehicleStatus.ACTIVE)
        retired = Vehicle(name="Lincoln Town Car", status=VehicleStatus.INACTIVE)
        package = ServicePackage(name="Airport Transfer", active=True)
        db_session.add_all([sedan, suv, retired, package])
        await db_session.commit()

        context: dict[str, object] = {
            "sedan_id": sedan.id,
            "suv_id": suv.id,
            "retired_id": retired.id,
            "package_id": package.id,
        }

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        context["client"] = client
        yield context
