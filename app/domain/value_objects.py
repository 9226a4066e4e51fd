from __future__ import annotations

from enum import Enum
from typing import NewType
from uuid import UUID

TaskId = NewType("TaskId", UUID)


class TaskStatus(str, Enum):
    PENDING = "PENDING"
