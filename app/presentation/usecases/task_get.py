from __future__ import annotations

from uuid import UUID

from app.application.tasks.task_manager import TaskManager
from app.domain.task import Task
from app.domain.value_objects import TaskId


async def get_task_usecase(
    manager: TaskManager,
    task_id: UUID,
) -> Task:
    """
    Возвращает одну задачу по id или бросает NotFoundError.
    """
    return manager.get_by_id(TaskId(task_id)).unwrap()
