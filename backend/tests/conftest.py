"""Shared fixtures: a throwaway SQLite file per test and a TestClient wired to it."""

import os

# Must be in place before carrental.core.config builds its settings
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["SEED_ON_STARTUP"] = "false"
os.environ.pop("ADMIN_PASSWORD", None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import NullPool

from carrental import main
from carrental.db.base import Base
from carrental.db.session import get_db, make_engine, make_session_factory

ADMIN_HEADERS = {"Authorization": "Bearer admin123"}


@pytest.fixture
def engine(tmp_path):
    return make_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)


@pytest.fixture
def client(engine, monkeypatch):
    TestSession = make_session_factory(engine)

    async def override_get_db():
        async with TestSession() as session:
            yield session

    # startup hook creates the tables on the test database
    monkeypatch.setattr(main, "engine", engine)
    main.app.dependency_overrides[get_db] = override_get_db
    with TestClient(main.app) as c:
        yield c
    main.app.dependency_overrides.clear()


@pytest.fixture
async def db(engine):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with AsyncSession(bind=engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
def admin_headers():
    return dict(ADMIN_HEADERS)


def make_car(**overrides):
    car = {
        "name": "Test Car",
        "category": "SUV",
        "image_url": "http://x",
        "price_per_day": 100.0,
        "transmission": "Auto",
    }
    car.update(overrides)
    return car


def make_booking(**overrides):
    booking = {
        "car_id": 1,
        "car_name": "Test Car",
        "start_date": "2026-11-01",
        "end_date": "2026-11-04",
        "total_days": 3,
        "total_price": 300.0,
    }
    booking.update(overrides)
    return booking
