"""Shared fixtures: fresh task stores and an API client wired to one."""

from collections.abc import AsyncIterator, Iterator
from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from app import database
from app.core.config import get_settings
from app.dependencies import get_task_repository
from app.main import app
from app.repositories.task_repository import (
    InMemoryTaskRepository,
    SqlTaskRepository,
    TaskRepository,
)
from app.services.task_service import TaskService


@asynccontextmanager
async def sqlite_repository() -> AsyncIterator[SqlTaskRepository]:
    """SQL store over a private in-memory SQLite database."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield SqlTaskRepository(session)

    await engine.dispose()


@pytest_asyncio.fixture(params=["memory", "sql"])
async def repo(request: pytest.FixtureRequest) -> AsyncIterator[TaskRepository]:
    """Every store implementation, each one empty."""
    if request.param == "memory":
        yield InMemoryTaskRepository()
    else:
        async with sqlite_repository() as sql_repo:
            yield sql_repo


@pytest.fixture
def service() -> TaskService:
    return TaskService(InMemoryTaskRepository())


@pytest.fixture
def memory_repo() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()


@pytest.fixture
def client(memory_repo: InMemoryTaskRepository) -> Iterator[TestClient]:
    """API client whose requests all share one fresh in-memory store."""
    app.dependency_overrides[get_task_repository] = lambda: memory_repo
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def sql_repo() -> AsyncIterator[SqlTaskRepository]:
    async with sqlite_repository() as repository:
        yield repository


@pytest.fixture
def sqlite_file_app(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """The real app on the SQL backend, pointed at a throwaway SQLite file."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'tasks.db'}")
    monkeypatch.setattr(database, "engine", engine)
    monkeypatch.setattr(
        database,
        "async_session",
        async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False),
    )
    settings = get_settings()
    monkeypatch.setattr(settings, "task_store", "sql")
    monkeypatch.setattr(settings, "create_tables_on_startup", True)
    app.dependency_overrides.clear()
    return app
