"""Root conftest: shared DB and HTTP fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - Seed fixtures insert rows directly through the ORM, bypassing services

Design Decisions:
    - SQLite in-memory via aiosqlite: fast, no external dependency; the
      services enforce parent existence themselves, so SQLite's disabled
      foreign keys do not hide behaviour
    - StaticPool: every session shares the one in-memory connection
"""

import os

# Must be set before pm_api.main reads settings at import time
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

from datetime import datetime, timedelta, timezone  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

import pm_api.infrastructure.database as db_module  # noqa: E402
import pm_api.models  # noqa: E402,F401
from pm_api.db.base import Base  # noqa: E402
from pm_api.infrastructure.database import get_db, DatabaseSessionManager  # noqa: E402
from pm_api.main import app  # noqa: E402
from pm_api.models.account import Account  # noqa: E402
from pm_api.models.project import Project  # noqa: E402
from pm_api.models.status import Status  # noqa: E402
from pm_api.models.task import Task  # noqa: E402

T0 = datetime(2026, 1, 5, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
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
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    # Readiness probe talks to db_manager directly
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_account(test_db):
    account = Account(email="owner@example.com", name="Owner")
    test_db.add(account)
    await test_db.commit()
    await test_db.refresh(account)
    return account


@pytest.fixture
async def seed_project(test_db, seed_account):
    project = Project(
        name="Roadmap", description="Q1 roadmap", owner_id=seed_account.id,
    )
    test_db.add(project)
    await test_db.commit()
    await test_db.refresh(project)
    return project


@pytest.fixture
async def seed_status(test_db, seed_project):
    status = Status(name="todo", project_id=seed_project.id)
    test_db.add(status)
    await test_db.commit()
    await test_db.refresh(status)
    return status


@pytest.fixture
async def seed_task(test_db, seed_project, seed_status):
    task = Task(
        name="Write plan",
        project_id=seed_project.id,
        status_id=seed_status.id,
        start=T0,
        end=T0 + timedelta(days=1),
    )
    test_db.add(task)
    await test_db.commit()
    await test_db.refresh(task)
    return task
