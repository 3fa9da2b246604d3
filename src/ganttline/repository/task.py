# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Mapping, Optional, cast

from ganttline import configuration
from ganttline.errors import StoreError, TaskValidationError
from ganttline.model.command import CommandKindType, StoreCommand
from ganttline.model.entity_id import EntityId, generate_entity_id
from ganttline.model.task import TASK_MUTABLE_FIELDS, Task
from ganttline.repository.store import TaskStore, YamlTaskStore
from ganttline.service.progress import infer_status_from_progress
from ganttline.service.task import normalize_task, validate_task

logger = logging.getLogger(__name__)


class TaskRepository:
    """
    Owner of the in-memory task collection.

    Mutations apply to the collection immediately and queue exactly one store
    command each. Pending commands are written by flush(); a failed write is
    logged and never rolls back the collection.
    """

    def __init__(self, store: Optional[TaskStore] = None) -> None:
        self._store = store
        self._tasks: Optional[list[Task]] = None
        self._pending: list[StoreCommand] = []

    @property
    def store(self) -> TaskStore:
        if self._store is None:
            self._store = YamlTaskStore(configuration.DATA_TASKS_DIR)
        return self._store

    @property
    def is_loading(self) -> bool:
        return self._tasks is None

    @property
    def is_dirty(self) -> bool:
        return len(self._pending) > 0

    @property
    def pending_commands(self) -> list[StoreCommand]:
        return deepcopy(self._pending)

    @property
    def tasks(self) -> list[Task]:
        if self._tasks is None:
            self.load()
        if self._tasks is None:
            raise ValueError()
        return self._tasks

    def load(self) -> None:
        try:
            self._tasks = self.store.load_all()
            logger.debug("loaded %d tasks", len(self._tasks))
        except StoreError:
            logger.error("could not load tasks, continuing with none", exc_info=True)
            self._tasks = []

    def snapshot(self) -> Optional[list[Task]]:
        """The current tasks, or None while the initial load has not happened."""
        if self._tasks is None:
            return None
        return deepcopy(self._tasks)

    def flush(self) -> bool:
        if not self._pending:
            return False
        pending, self._pending = self._pending, []
        for command in pending:
            try:
                self.__apply(command)
            except StoreError:
                logger.warning(
                    "could not persist %s of task %s",
                    command["kind"],
                    command["task_id"],
                    exc_info=True,
                )
        return True

    def add_task(self, task: Task, team_members: Optional[list[str]] = None) -> EntityId:
        new_task = deepcopy(task)
        # Optional fields may be left out by the caller
        new_task.setdefault("dependencies", [])
        new_task.setdefault("description", None)
        new_task.setdefault("is_milestone", False)

        problems = validate_task(new_task, team_members)
        if problems:
            raise TaskValidationError(problems)

        existing_ids = {existing["id"] for existing in self.tasks}
        new_id = generate_entity_id()
        while new_id in existing_ids:
            new_id = generate_entity_id()
        new_task["id"] = new_id
        normalize_task(new_task)

        self.tasks.append(new_task)
        self.__record("insert", new_id, new_task)
        return new_id

    def update_task(
        self,
        id: EntityId,
        changes: Mapping[str, Any],
        team_members: Optional[list[str]] = None,
    ) -> bool:
        """
        Merge a partial set of fields into a task.

        Returns:
            False when no task has the id, in which case nothing changes
        """
        unknown = [key for key in changes if key not in TASK_MUTABLE_FIELDS]
        if unknown:
            raise TaskValidationError([f"unknown task field: {key}" for key in unknown])

        index = self.__find_index(id)
        if index is None:
            logger.debug("ignoring update of unknown task %s", id)
            return False

        merged = cast(Task, {**self.tasks[index], **deepcopy(dict(changes))})
        # A roster change should not lock existing assignments
        roster = team_members if "responsible" in changes else None
        problems = validate_task(merged, roster)
        if problems:
            raise TaskValidationError(problems)
        normalize_task(merged)

        self.tasks[index] = merged
        self.__record("update", id, merged)
        return True

    def update_progress(self, id: EntityId, progress: int) -> bool:
        """Set progress the way the progress slider does, deriving the status."""
        index = self.__find_index(id)
        if index is None:
            logger.debug("ignoring progress update of unknown task %s", id)
            return False
        status = infer_status_from_progress(progress, self.tasks[index]["status"])
        return self.update_task(id, {"progress": progress, "status": status})

    def delete_task(self, id: EntityId) -> bool:
        index = self.__find_index(id)
        if index is None:
            logger.debug("ignoring delete of unknown task %s", id)
            return False
        del self.tasks[index]
        self.__record("delete", id, None)
        return True

    def get_all_tasks(self) -> list[Task]:
        return deepcopy(self.tasks)

    def get_task(self, id: EntityId) -> Task:
        return deepcopy([task for task in self.tasks if task["id"] == id][0])

    def __find_index(self, id: EntityId) -> Optional[int]:
        for index, task in enumerate(self.tasks):
            if task["id"] == id:
                return index
        return None

    def __record(
        self, kind: CommandKindType, task_id: EntityId, task: Optional[Task]
    ) -> None:
        self._pending.append(
            {
                "kind": kind,
                "task_id": task_id,
                "task": deepcopy(task) if task is not None else None,
            }
        )

    def __apply(self, command: StoreCommand) -> None:
        if command["kind"] == "delete":
            self.store.delete(command["task_id"])
            return
        task = cast(Task, command["task"])
        if command["kind"] == "insert":
            self.store.insert(task)
        else:
            self.store.update(task)


TASK_REPO = TaskRepository()
