from abc import ABC, abstractmethod

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.models import Task


class TaskRepository(ABC):
    """
    Identity-keyed storage of Task records.

    Implementations never raise for a missing id: lookups return None
    and deletes of unknown ids are no-ops.
    """

    @abstractmethod
    async def find_all(self, completed: bool | None = None) -> list[Task]:
        """Return every stored task in id order, optionally filtered by status."""

    @abstractmethod
    async def find_by_id(self, task_id: int) -> Task | None:
        """Return the task with this id, or None."""

    @abstractmethod
    async def save(self, task: Task) -> Task:
        """
        Insert a task without an id (assigning a fresh one) or replace the
        stored record that has the same id. Returns the stored record.
        """

    @abstractmethod
    async def delete_by_id(self, task_id: int) -> bool:
        """Remove the task if present. Returns whether a record was removed."""


class SqlTaskRepository(TaskRepository):
    """Task store backed by an async SQLModel session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_all(self, completed: bool | None = None) -> list[Task]:
        query = select(Task)
        if completed is not None:
            query = query.where(Task.completed == completed)
        query = query.order_by(Task.id)

        result = await self.session.exec(query)
        return list(result.all())

    async def find_by_id(self, task_id: int) -> Task | None:
        return await self.session.get(Task, task_id)

    async def save(self, task: Task) -> Task:
        if task.id is None:
            self.session.add(task)
        else:
            task = await self.session.merge(task)
        await self.session.commit()
        await self.session.refresh(task)
        return task

    async def delete_by_id(self, task_id: int) -> bool:
        task = await self.session.get(Task, task_id)
        if not task:
            return False
        await self.session.delete(task)
        await self.session.commit()
        return True


class InMemoryTaskRepository(TaskRepository):
    """
    Process-local task store.

    Records are copied on the way in and out so callers never hold a
    reference to the stored instance. Ids always move past the highest
    one ever stored, so they are never reused after a delete.
    """

    def __init__(self) -> None:
        self._tasks: dict[int, Task] = {}
        self._next_id = 1

    @staticmethod
    def _copy(task: Task) -> Task:
        # table-model __init__ does not validate; checks belong to the service
        return Task(**task.model_dump())

    async def find_all(self, completed: bool | None = None) -> list[Task]:
        return [
            self._copy(task)
            for _, task in sorted(self._tasks.items())
            if completed is None or task.completed == completed
        ]

    async def find_by_id(self, task_id: int) -> Task | None:
        task = self._tasks.get(task_id)
        return self._copy(task) if task is not None else None

    async def save(self, task: Task) -> Task:
        stored = self._copy(task)
        if stored.id is None:
            stored.id = self._next_id
        self._next_id = max(self._next_id, stored.id + 1)
        self._tasks[stored.id] = stored
        return self._copy(stored)

    async def delete_by_id(self, task_id: int) -> bool:
        return self._tasks.pop(task_id, None) is not None
