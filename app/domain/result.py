from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import TaskError
from .task import Task


@dataclass(frozen=True)
class TaskResult:
    """
    Результат операции менеджера задач: либо задача, либо ошибка.

    Ошибки не выбрасываются из ядра, а возвращаются здесь —
    вызывающая сторона смотрит на `ok` / `error.kind` или зовёт `unwrap()`.
    """
    task: Optional[Task] = None
    error: Optional[TaskError] = None

    def __post_init__(self) -> None:
        if (self.task is None) == (self.error is None):
            raise ValueError("TaskResult must carry exactly one of task or error")

    @classmethod
    def success(cls, task: Task) -> TaskResult:
        return cls(task=task)

    @classmethod
    def failure(cls, error: TaskError) -> TaskResult:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Task:
        """
        Returns the task or raises the carried error.
        """
        if self.error is not None:
            raise self.error
        assert self.task is not None
        return self.task
