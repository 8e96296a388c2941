import os
from datetime import datetime, timedelta

import pytest

# Point the app's own engine at a throwaway in-memory DB before it is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.core.clock import get_clock
from app.db.base import Base
from app.db.session import enable_sqlite_foreign_keys, get_db

NOW = datetime(2030, 1, 15, 12, 0, 0)
USER_HEADER = "X-Sharer-User-Id"


def at(**delta) -> str:
    """ISO timestamp relative to the pinned clock, e.g. at(days=-2)."""
    return (NOW + timedelta(**delta)).isoformat()


def as_user(user_id: int) -> dict:
    return {USER_HEADER: str(user_id)}


@pytest.fixture
def client():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Session = sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

    async def override_db():
        async with Session() as session:
            yield session

    async def create_all():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    app.dependency_overrides[get_db] = override_db
    app.dependency_overrides[get_clock] = lambda: (lambda: NOW)
    try:
        with TestClient(app) as c:
            c.portal.call(create_all)
            yield c
            c.portal.call(engine.dispose)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_user(client):
    counter = {"n": 0}

    def _make(name: str = "user") -> int:
        counter["n"] += 1
        res = client.post(
            "/users",
            json={"name": name, "email": f"{name}{counter['n']}@example.com"},
        )
        assert res.status_code == 200, res.text
        return res.json()["id"]

    return _make


@pytest.fixture
def make_item(client):
    def _make(owner_id: int, name: str = "Drill", available: bool = True, **extra) -> int:
        body = {"name": name, "description": f"{name} for rent", "available": available}
        body.update(extra)
        res = client.post("/items", json=body, headers=as_user(owner_id))
        assert res.status_code == 200, res.text
        return res.json()["id"]

    return _make


@pytest.fixture
def make_booking(client):
    def _make(booker_id: int, item_id: int, start: str, end: str) -> int:
        res = client.post(
            "/bookings",
            json={"itemId": item_id, "start": start, "end": end},
            headers=as_user(booker_id),
        )
        assert res.status_code == 200, res.text
        return res.json()["id"]

    return _make


@pytest.fixture
def decide(client):
    def _decide(owner_id: int, booking_id: int, approved: bool = True):
        return client.patch(
            f"/bookings/{booking_id}",
            params={"approved": str(approved).lower()},
            headers=as_user(owner_id),
        )

    return _decide
