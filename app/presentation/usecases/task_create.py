from __future__ import annotations

from typing import Optional

from app.application.tasks.task_manager import TaskManager
from app.domain.task import Task


async def create_task_usecase(
    manager: TaskManager,
    title: Optional[str],
    description: Optional[str],
) -> Task:
    """
    Создаёт задачу и возвращает её.
    Ошибка валидации пробрасывается наверх как ValidationError —
    HTTP-слой превращает её в 400.
    """
    return manager.create(title, description).unwrap()
