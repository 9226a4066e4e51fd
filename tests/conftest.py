"""Pytest fixtures for the task tracker."""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from app.application.tasks.task_manager import TaskManager
from app.infrastructure.repositories.task_memory_repository import TaskInMemoryRepository

FIXED_NOW = datetime(2025, 1, 1, 10, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def repository():
    return TaskInMemoryRepository()


@pytest.fixture
def manager(repository):
    return TaskManager(repository)


@pytest.fixture
def fixed_clock_manager(repository):
    return TaskManager(repository, clock=lambda: FIXED_NOW)


@pytest.fixture
def client():
    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client
