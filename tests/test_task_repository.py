"""Tests for the in-memory task store."""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from uuid import uuid4

from app.domain.task import Task
from app.domain.value_objects import TaskId, TaskStatus


def _task(title="Task", task_id=None):
    return Task(
        id=TaskId(task_id or uuid4()),
        title=title,
        description=None,
        status=TaskStatus.PENDING,
        created_at=datetime.now(timezone.utc),
    )


class TestSave:
    def test_save_returns_task(self, repository):
        task = _task()
        assert repository.save(task) is task

    def test_save_then_find(self, repository):
        task = _task()
        repository.save(task)
        assert repository.find_by_id(task.id) == task
        assert repository.count() == 1

    def test_save_same_id_last_write_wins(self, repository):
        task_id = uuid4()
        repository.save(_task("first", task_id))
        repository.save(_task("second", task_id))

        assert repository.find_by_id(TaskId(task_id)).title == "second"
        assert repository.count() == 1


class TestFindById:
    def test_find_missing_returns_none(self, repository):
        assert repository.find_by_id(TaskId(uuid4())) is None

    def test_find_on_empty_store(self, repository):
        assert repository.count() == 0
        assert repository.find_by_id(TaskId(uuid4())) is None


class TestConcurrency:
    def test_concurrent_saves_keep_all_entries(self, repository):
        tasks = [_task(f"task-{i}") for i in range(200)]

        with ThreadPoolExecutor(max_workers=16) as pool:
            list(pool.map(repository.save, tasks))

        assert repository.count() == len(tasks)
        for task in tasks:
            assert repository.find_by_id(task.id) == task
