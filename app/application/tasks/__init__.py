from .task_manager import TaskManager, validate_task_fields

__all__ = [
    "TaskManager",
    "validate_task_fields",
]
