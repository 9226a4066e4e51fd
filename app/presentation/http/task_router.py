from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from app.application.tasks.task_manager import TaskManager
from app.domain.task import Task
from app.presentation.http.dependencies import get_task_manager
from app.presentation.usecases.task_create import create_task_usecase
from app.presentation.usecases.task_get import get_task_usecase

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
)

# {
#   "title": "Купить молоко",
#   "description": "2 литра, 3.2%"
# }


# ---------- Схемы (Swagger-модели) ----------


class CreateTaskRequest(BaseModel):
    # Длины и пустоту проверяет TaskManager, чтобы ошибки по обоим полям
    # возвращались одним ответом.
    title: Optional[str] = Field(
        None,
        description="Название задачи (1..200 символов без пробелов по краям)",
        examples=["Купить молоко"],
    )
    description: Optional[str] = Field(
        None,
        description="Необязательное описание (до 1000 символов)",
        examples=["2 литра, 3.2%"],
    )


class TaskResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(
        ...,
        description="Идентификатор задачи (UUID)",
    )
    title: str = Field(
        ...,
        description="Название задачи",
        examples=["Купить молоко"],
    )
    description: Optional[str] = Field(
        None,
        description="Описание задачи",
    )
    status: str = Field(
        ...,
        description="Статус задачи",
        examples=["PENDING"],
    )
    created_at: datetime = Field(
        ...,
        alias="createdAt",
        description="Момент создания задачи (ISO 8601, UTC)",
    )


def _to_response(task: Task) -> TaskResponse:
    return TaskResponse(
        id=str(task.id),
        title=task.title,
        description=task.description,
        status=task.status.value,
        created_at=task.created_at,
    )


# ---------- Эндпоинты ----------


@router.post(
    "",
    response_model=TaskResponse,
    status_code=201,
    summary="Создать задачу",
    description=(
        "Создаёт задачу со статусом PENDING. "
        "При ошибках валидации возвращает 400 со списком полей."
    ),
)
async def create_task(
    payload: CreateTaskRequest,
    manager: TaskManager = Depends(get_task_manager),
) -> TaskResponse:
    task = await create_task_usecase(
        manager=manager,
        title=payload.title,
        description=payload.description,
    )
    logger.info("Task created id=%s", task.id)
    return _to_response(task)


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Получить задачу",
    description="Возвращает задачу по идентификатору или 404, если её нет.",
)
async def get_task(
    task_id: UUID,
    manager: TaskManager = Depends(get_task_manager),
) -> TaskResponse:
    task = await get_task_usecase(manager=manager, task_id=task_id)
    return _to_response(task)
