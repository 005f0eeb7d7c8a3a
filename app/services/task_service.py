import logging

from app.core.errors import TaskValidationError
from app.models import Task, TaskCreate, TaskStats, TaskUpdate
from app.repositories.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    """
    Orchestrates task store operations for the API.

    Holds no state between calls besides the injected repository. Missing
    tasks are reported as None (or False for deletes), never as exceptions.
    """

    def __init__(self, repo: TaskRepository):
        self.repo = repo

    async def get_all_tasks(self, completed: bool | None = None) -> list[Task]:
        return await self.repo.find_all(completed=completed)

    async def get_task(self, task_id: int) -> Task | None:
        task = await self.repo.find_by_id(task_id)
        if task is None:
            logger.debug(f"Task {task_id} not found")
        return task

    async def save_task(self, task: Task) -> Task:
        self._validate(task)
        return await self.repo.save(task)

    async def create_task(self, task_data: TaskCreate) -> Task:
        task = Task.model_validate(task_data.model_dump())
        task = await self.save_task(task)
        logger.info(f"Created task {task.id}")
        return task

    # Wholesale replace: every mutable field is overwritten.
    async def update_task(self, task_id: int, task_data: TaskUpdate) -> Task | None:
        task = await self.get_task(task_id)
        if task is None:
            return None
        task.title = task_data.title
        task.description = task_data.description
        task.completed = task_data.completed
        task = await self.save_task(task)
        logger.info(f"Updated task {task_id} (completed={task.completed})")
        return task

    async def delete_task(self, task_id: int) -> bool:
        deleted = await self.repo.delete_by_id(task_id)
        if deleted:
            logger.info(f"Deleted task {task_id}")
        else:
            logger.debug(f"Delete of missing task {task_id} ignored")
        return deleted

    async def get_stats(self) -> TaskStats:
        tasks = await self.repo.find_all()
        total = len(tasks)
        completed = sum(1 for task in tasks if task.completed)
        return TaskStats(
            total=total,
            completed=completed,
            pending=total - completed,
            progress=round(completed * 100 / total) if total else 0,
        )

    @staticmethod
    def _validate(task: Task) -> None:
        if task.title is None or not task.title.strip():
            raise TaskValidationError("Task title must not be blank")
        if len(task.title) > 200:
            raise TaskValidationError("Task title must be at most 200 characters")
