from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .value_objects import TaskId, TaskStatus


@dataclass(frozen=True)
class Task:
    """
    Сущность задачи.

    title       — название задачи (уже без пробелов по краям)
    description — необязательное описание
    status      — статус задачи, при создании всегда PENDING
    created_at  — момент создания (UTC), не меняется
    """
    id: TaskId
    title: str
    description: Optional[str]
    status: TaskStatus
    created_at: datetime
