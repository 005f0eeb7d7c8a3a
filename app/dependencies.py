from collections.abc import AsyncIterator
from functools import lru_cache

from fastapi import Depends
from typing_extensions import Annotated

from app import database
from app.core.config import SettingsDep
from app.repositories.task_repository import (
    InMemoryTaskRepository,
    SqlTaskRepository,
    TaskRepository,
)
from app.services.task_service import TaskService


@lru_cache
def get_memory_repository() -> InMemoryTaskRepository:
    """Single in-process store shared by every request of this worker."""
    return InMemoryTaskRepository()


async def get_task_repository(settings: SettingsDep) -> AsyncIterator[TaskRepository]:
    """Store for one request; a DB session is opened only for the SQL backend."""
    if settings.task_store == "memory":
        yield get_memory_repository()
        return

    async with database.async_session() as session:
        yield SqlTaskRepository(session)


def get_task_service(
    repo: TaskRepository = Depends(get_task_repository),
) -> TaskService:
    return TaskService(repo)


TaskServiceDep = Annotated[TaskService, Depends(get_task_service)]
