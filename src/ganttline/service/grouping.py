# SPDX-License-Identifier: MIT

from typing import Iterable, Optional

from ganttline.model.category import CategoryType
from ganttline.model.task import Task


def group_tasks_by_category(tasks: Iterable[Task]) -> dict[CategoryType, list[Task]]:
    """
    Partition tasks by category.

    Categories appear in the order they are first seen and tasks keep their
    relative order inside each category. No tasks gives an empty mapping.
    """
    grouped: dict[CategoryType, list[Task]] = {}
    for task in tasks:
        grouped.setdefault(task["category"], []).append(task)
    return grouped


def filter_tasks_by_category(
    tasks: Iterable[Task], category: Optional[CategoryType]
) -> list[Task]:
    if category is None:
        return list(tasks)
    return [task for task in tasks if task["category"] == category]


def resolve_dependency_names(task: Task, tasks: Iterable[Task]) -> list[str]:
    """Names of the task's dependencies, skipping ids that no longer exist."""
    names_by_id = {other["id"]: other["name"] for other in tasks}
    return [
        names_by_id[dependency_id]
        for dependency_id in task["dependencies"]
        if dependency_id in names_by_id
    ]
