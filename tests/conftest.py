"""Pytest configuration: a fresh SQLite database per test."""
import os
import sys
from pathlib import Path
from types import SimpleNamespace

# Make the src.app package importable and keep the app from touching a real database
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ["SEED_ON_STARTUP"] = "false"

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from src.app.crud.crud_role import role as role_crud
from src.app.crud.crud_user import user as user_crud
from src.app.db.init_db import seed_db
from src.app.db.session import get_db, init_models
from src.app.main import app


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def seeded(session_factory):
    """Run the seed in its own session and return the records by name."""
    async with session_factory() as session:
        await seed_db(session)
        users = {u.username: u for u in await user_crud.get_multi(session, limit=None)}
        roles = {r.name: r for r in await role_crud.get_multi(session, limit=None)}
    return SimpleNamespace(users=users, roles=roles)


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
