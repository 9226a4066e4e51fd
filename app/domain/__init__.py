from .task import Task
from .errors import ErrorKind, TaskError, ValidationError, NotFoundError
from .result import TaskResult
from .value_objects import TaskId, TaskStatus

__all__ = [
    "Task",
    "TaskId",
    "TaskStatus",
    "TaskResult",
    "ErrorKind",
    "TaskError",
    "ValidationError",
    "NotFoundError",
]
