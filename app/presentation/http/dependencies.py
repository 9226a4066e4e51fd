from __future__ import annotations

from fastapi import Request

from app.application.tasks.task_manager import TaskManager


def get_task_manager(request: Request) -> TaskManager:
    """
    Менеджер задач создаётся в main.create_app() и живёт в app.state.
    """
    return request.app.state.task_manager
