from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.task import Task
from app.domain.value_objects import TaskId


class TaskRepository(ABC):
    """
    Абстракция над хранилищем задач.
    Реализации обязаны быть потокобезопасными.
    """

    @abstractmethod
    def save(self, task: Task) -> Task:
        """
        Persist task entity under its id (overwrites an existing record).
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        """
        Return task entity by id or None if not found.
        """
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        raise NotImplementedError
