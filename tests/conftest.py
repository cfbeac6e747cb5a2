"""
tests/conftest.py — Fixtures and helpers shared by the API tests.

  - Every test runs against a fresh SQLite database file (aiosqlite driver),
    selected through DATABASE_URI before the app is imported.
  - Tables are dropped and recreated before each test, so auto-assigned ids
    start at 1 in every test.
  - Requests go through httpx.AsyncClient on an ASGITransport; no server runs.

Helper functions (not fixtures):
  - create_user(client, ...)   → created user dict
  - add_friend(client, ...)    → HTTP response
  - count_edges(session)       → number of rows in friends
"""

import os
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="game-social-tests-")
os.environ["DATABASE_URI"] = f"sqlite+aiosqlite:///{os.path.join(_DB_DIR, 'test.db')}"

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import func, select  # noqa: E402

from app.core.database import AsyncSessionLocal, Base, engine  # noqa: E402
from app.main import app  # noqa: E402
from app.models.friendship import Friendship  # noqa: E402


@pytest_asyncio.fixture(autouse=True)
async def db_tables():
    """Recreates every table before each test."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield


@pytest_asyncio.fixture
async def client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def session():
    """A session outside the request cycle, for inspecting stored rows."""
    async with AsyncSessionLocal() as db:
        yield db


async def create_user(client, username: str = "alice", password: str = "pw1") -> dict:
    resp = await client.post("/api/User/AddUser", json={"username": username, "password": password})
    assert resp.status_code == 200, f"create_user failed: {resp.text}"
    return resp.json()


async def add_friend(client, user_id: int, friend_user_id: int):
    return await client.post(
        "/api/Friend/AddFriend",
        json={"userId": user_id, "friendUserId": friend_user_id},
    )


async def count_edges(session) -> int:
    result = await session.execute(select(func.count()).select_from(Friendship))
    return result.scalar_one()
