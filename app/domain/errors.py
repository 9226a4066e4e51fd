from __future__ import annotations

from enum import Enum
from typing import Dict, Mapping

from .value_objects import TaskId


class ErrorKind(str, Enum):
    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"


class TaskError(Exception):
    """
    Базовая ошибка операций над задачами.
    Верхний слой (HTTP) матчится по `kind`, а не по тексту.
    """

    kind: ErrorKind


class ValidationError(TaskError):
    """
    Одно или несколько полей запроса не прошли проверку.

    field_errors — имя поля -> сообщение для клиента.
    """

    kind = ErrorKind.VALIDATION

    def __init__(self, field_errors: Mapping[str, str]) -> None:
        self.field_errors: Dict[str, str] = dict(field_errors)
        details = "; ".join(f"{name}: {msg}" for name, msg in self.field_errors.items())
        super().__init__(f"Validation failed ({details})")


class NotFoundError(TaskError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, task_id: TaskId) -> None:
        self.task_id = task_id
        super().__init__(f"Task not found with id: {task_id}")
