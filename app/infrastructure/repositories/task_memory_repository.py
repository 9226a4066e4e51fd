from __future__ import annotations

import threading
from typing import Dict, Optional

from app.domain.task import Task
from app.domain.value_objects import TaskId
from app.domain.repositories.task_repository import TaskRepository


class TaskInMemoryRepository(TaskRepository):
    """
    In-memory implementation of TaskRepository.

    Данные живут только в памяти процесса. Все обращения к словарю
    идут под одним lock'ом, поэтому репозиторий можно шарить между потоками.
    """

    def __init__(self) -> None:
        self._tasks: Dict[TaskId, Task] = {}
        self._lock = threading.Lock()

    def save(self, task: Task) -> Task:
        """
        Stores task under task.id, last write wins.
        """
        with self._lock:
            self._tasks[task.id] = task
        return task

    def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        with self._lock:
            return self._tasks.get(task_id)

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)
