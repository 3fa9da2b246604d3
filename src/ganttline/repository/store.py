# SPDX-License-Identifier: MIT

import datetime
from copy import deepcopy
from pathlib import Path
from typing import Any, Protocol, cast

import pendulum
from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from ganttline import time
from ganttline.errors import StoreError
from ganttline.model.entity_id import EntityId
from ganttline.model.task import Task


class TaskStore(Protocol):
    """Durable home of the task collection."""

    def load_all(self) -> list[Task]: ...

    def insert(self, task: Task) -> None: ...

    def update(self, task: Task) -> None: ...

    def delete(self, task_id: EntityId) -> None: ...


class YamlTaskStore:
    """Keeps one YAML file per task, named after the task id."""

    def __init__(self, tasks_dir: Path) -> None:
        self.tasks_dir = tasks_dir

    def load_all(self) -> list[Task]:
        tasks: list[Task] = []
        if not self.tasks_dir.is_dir():
            return tasks
        try:
            for file_path in sorted(self.tasks_dir.iterdir()):
                if file_path.suffix != ".yaml":
                    continue
                raw_task = load(file_path.read_text(), Loader=Loader)
                if raw_task is not None:
                    tasks.append(self.__convert_task_for_deserialization(raw_task))
        except (OSError, YAMLError, KeyError, TypeError, ValueError) as e:
            raise StoreError(f"could not load tasks from {self.tasks_dir}: {e}") from e
        # Ties keep file name order, which is the task id
        return sorted(tasks, key=lambda task: task["start_date"])

    def insert(self, task: Task) -> None:
        self.__write(task)

    def update(self, task: Task) -> None:
        self.__write(task)

    def delete(self, task_id: EntityId) -> None:
        file_path = self.__file_path(task_id)
        try:
            if file_path.exists():
                file_path.unlink()
        except OSError as e:
            raise StoreError(f"could not delete task {task_id}: {e}") from e

    def __file_path(self, task_id: EntityId) -> Path:
        return self.tasks_dir / f"{task_id}.yaml"

    def __write(self, task: Task) -> None:
        if task["id"] is None:
            raise StoreError("cannot store a task without an id")
        serializable_task = self.__convert_task_for_serialization(deepcopy(task))
        try:
            self.tasks_dir.mkdir(parents=True, exist_ok=True)
            self.__file_path(task["id"]).write_text(
                dump(serializable_task, Dumper=Dumper, sort_keys=False, allow_unicode=True)
            )
        except OSError as e:
            raise StoreError(f"could not write task {task['id']}: {e}") from e

    def __convert_task_for_serialization(self, task: Task) -> dict[str, Any]:
        serializable_task = cast(dict[str, Any], task)
        serializable_task["start_date"] = time.date_to_iso_str(task["start_date"])
        serializable_task["end_date"] = time.date_to_iso_str(task["end_date"])
        return serializable_task

    def __convert_task_for_deserialization(self, task: dict[str, Any]) -> Task:
        deserializable_task = task
        deserializable_task["start_date"] = self.__coerce_date(task["start_date"])
        deserializable_task["end_date"] = self.__coerce_date(task["end_date"])
        # Older files may predate these keys
        deserializable_task.setdefault("dependencies", [])
        deserializable_task.setdefault("description", None)
        deserializable_task.setdefault("is_milestone", False)
        deserializable_task["responsible"] = list(task.get("responsible") or [])
        deserializable_task["dependencies"] = list(task["dependencies"] or [])
        return cast(Task, deserializable_task)

    def __coerce_date(self, value: Any) -> pendulum.Date:
        # Hand-edited files may hold unquoted dates, which YAML reads as dates
        if isinstance(value, datetime.date):
            return pendulum.date(value.year, value.month, value.day)
        return time.date_from_str(str(value))
