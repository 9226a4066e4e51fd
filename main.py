from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from app.application.tasks.task_manager import TaskManager
from app.env_config import APP_HOST, APP_PORT, APP_RELOAD, LOG_LEVEL
from app.infrastructure.repositories.task_memory_repository import TaskInMemoryRepository
from app.logging_setup import setup_logging
from app.presentation.http.errors import register_error_handlers
from app.presentation.http.task_router import router as task_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """
    Собирает приложение: своё хранилище и менеджер задач на каждый вызов,
    поэтому тесты получают чистое состояние.
    """
    app = FastAPI(title="Task Tracker")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    repo = TaskInMemoryRepository()
    app.state.task_repository = repo
    app.state.task_manager = TaskManager(repo)

    register_error_handlers(app)
    app.include_router(task_router)

    logger.info("Task store ready total=%s", repo.count())
    return app


setup_logging(LOG_LEVEL)

app = create_app()


if __name__ == "__main__":
    # Для reload нужно указывать строку "main:app",
    # иначе uvicorn не сможет отслеживать изменения в файлах
    uvicorn.run(
        "main:app",
        host=APP_HOST,
        port=APP_PORT,
        reload=APP_RELOAD,
        log_config=None,
    )
