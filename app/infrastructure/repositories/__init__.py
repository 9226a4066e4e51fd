from .task_memory_repository import TaskInMemoryRepository

__all__ = [
    "TaskInMemoryRepository",
]
