from fastapi import APIRouter, HTTPException, Response, status

from app.core.config import get_settings
from app.dependencies import TaskServiceDep
from app.models import TaskCreate, TaskResponse, TaskStats, TaskUpdate

router = APIRouter(prefix=get_settings().api_prefix, tags=["tasks"])


def _not_found(task_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Task with id {task_id} not found",
    )


@router.get("", response_model=list[TaskResponse])
async def get_tasks(service: TaskServiceDep, completed: bool | None = None):
    """List all tasks, optionally only completed or only pending ones"""
    return await service.get_all_tasks(completed=completed)


@router.get("/stats", response_model=TaskStats)
async def get_task_stats(service: TaskServiceDep):
    """Totals of completed and pending tasks"""
    return await service.get_stats()


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(task_id: int, service: TaskServiceDep):
    """Get a specific task by ID"""
    task = await service.get_task(task_id)
    if not task:
        raise _not_found(task_id)
    return task


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(task_data: TaskCreate, service: TaskServiceDep):
    """Create a new task"""
    return await service.create_task(task_data)


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(task_id: int, task_data: TaskUpdate, service: TaskServiceDep):
    """Replace title, description and completed of an existing task"""
    task = await service.update_task(task_id, task_data)
    if not task:
        raise _not_found(task_id)
    return task


@router.delete(
    "/{task_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
async def delete_task(task_id: int, service: TaskServiceDep):
    """Delete a task"""
    if not await service.delete_task(task_id):
        raise _not_found(task_id)
