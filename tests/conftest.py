# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional

import pendulum
import pytest

from ganttline.errors import StoreError
from ganttline.model.entity_id import EntityId
from ganttline.model.task import Task
from ganttline.repository.task import TaskRepository


class RecordingStore:
    """In-memory task store that remembers every call it receives."""

    def __init__(self, tasks: Optional[list[Task]] = None) -> None:
        self.tasks: dict[EntityId, Task] = {
            task["id"]: deepcopy(task) for task in tasks or [] if task["id"] is not None
        }
        self.calls: list[tuple[str, EntityId]] = []
        self.fail_load = False
        self.fail_writes = False

    def load_all(self) -> list[Task]:
        if self.fail_load:
            raise StoreError("store is offline")
        return sorted(
            (deepcopy(task) for task in self.tasks.values()),
            key=lambda task: task["start_date"],
        )

    def insert(self, task: Task) -> None:
        self.__write("insert", task)

    def update(self, task: Task) -> None:
        self.__write("update", task)

    def delete(self, task_id: EntityId) -> None:
        self.calls.append(("delete", task_id))
        if self.fail_writes:
            raise StoreError("store is read-only")
        self.tasks.pop(task_id, None)

    def __write(self, kind: str, task: Task) -> None:
        assert task["id"] is not None
        self.calls.append((kind, task["id"]))
        if self.fail_writes:
            raise StoreError("store is read-only")
        self.tasks[task["id"]] = deepcopy(task)


def make_task(**overrides: Any) -> Task:
    task: Task = {
        "id": None,
        "name": "Write API",
        "category": "development",
        "start_date": pendulum.date(2024, 1, 15),
        "end_date": pendulum.date(2024, 1, 20),
        "progress": 0,
        "responsible": ["kim"],
        "status": "not-started",
        "dependencies": [],
        "description": None,
        "is_milestone": False,
    }
    task.update(overrides)  # type: ignore[typeddict-item]
    return task


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def repository(store: RecordingStore) -> TaskRepository:
    return TaskRepository(store)
