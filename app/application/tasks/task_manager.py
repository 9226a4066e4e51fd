from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Dict, Optional
from uuid import UUID, uuid4

from app.config import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH
from app.domain.errors import NotFoundError, ValidationError
from app.domain.repositories.task_repository import TaskRepository
from app.domain.result import TaskResult
from app.domain.task import Task
from app.domain.value_objects import TaskId, TaskStatus


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def validate_task_fields(
    title: Optional[str],
    description: Optional[str],
) -> Dict[str, str]:
    """
    Проверяет поля задачи независимо друг от друга.

    Возвращает словарь "поле -> сообщение"; пустой словарь — всё ок.
    Длина title считается после strip().
    """
    errors: Dict[str, str] = {}

    stripped = (title or "").strip()
    if not stripped:
        errors["title"] = "Title cannot be empty"
    elif len(stripped) > TITLE_MAX_LENGTH:
        errors["title"] = f"Title must be between 1 and {TITLE_MAX_LENGTH} characters"

    if description is not None and len(description) > DESCRIPTION_MAX_LENGTH:
        errors["description"] = (
            f"Description must not exceed {DESCRIPTION_MAX_LENGTH} characters"
        )

    return errors


class TaskManager:
    """
    Создание и получение задач поверх TaskRepository.

    Менеджер не хранит собственного состояния (кроме зависимостей),
    поэтому один экземпляр можно использовать из любого числа потоков.
    Ошибки не выбрасываются, а возвращаются в TaskResult.
    """

    def __init__(
        self,
        repo: TaskRepository,
        clock: Callable[[], datetime] = _utc_now,
        id_factory: Callable[[], UUID] = uuid4,
    ) -> None:
        self._repo = repo
        self._clock = clock
        self._id_factory = id_factory

    def create(self, title: Optional[str], description: Optional[str] = None) -> TaskResult:
        field_errors = validate_task_fields(title, description)
        if field_errors:
            return TaskResult.failure(ValidationError(field_errors))

        assert title is not None
        task = Task(
            id=TaskId(self._id_factory()),
            title=title.strip(),
            description=description,
            status=TaskStatus.PENDING,
            created_at=self._clock(),
        )
        return TaskResult.success(self._repo.save(task))

    def get_by_id(self, task_id: TaskId) -> TaskResult:
        task = self._repo.find_by_id(task_id)
        if task is None:
            return TaskResult.failure(NotFoundError(task_id))
        return TaskResult.success(task)
