# SPDX-License-Identifier: MIT

from typing import Any, Mapping, Optional

import pendulum

from ganttline.model.category import CATEGORIES
from ganttline.model.status import STATUSES
from ganttline.model.task import Task


def validate_task(
    task: Mapping[str, Any], team_members: Optional[list[str]] = None
) -> list[str]:
    """
    Collect every reason a task record cannot enter the collection.

    Args:
        task: The full task record to check
        team_members: The configured roster. When given and non-empty, every
            responsible person must belong to it.

    Returns:
        Human readable problems; an empty list means the task is valid
    """
    problems: list[str] = []

    name = task.get("name")
    if not isinstance(name, str) or not name.strip():
        problems.append("name is required")

    start_date = task.get("start_date")
    end_date = task.get("end_date")
    if start_date is None:
        problems.append("start_date is required")
    elif not isinstance(start_date, pendulum.Date):
        problems.append("start_date must be a date")
    if end_date is None:
        problems.append("end_date is required")
    elif not isinstance(end_date, pendulum.Date):
        problems.append("end_date must be a date")
    if (
        isinstance(start_date, pendulum.Date)
        and isinstance(end_date, pendulum.Date)
        and start_date > end_date
    ):
        problems.append("start_date must not be after end_date")

    responsible = task.get("responsible") or []
    if not isinstance(responsible, list):
        problems.append("responsible must be a list of names")
    elif len(responsible) == 0:
        problems.append("at least one responsible team member is required")
    elif any(
        not isinstance(member, str) or not member.strip() for member in responsible
    ):
        problems.append("responsible team members must not be blank")
    elif team_members:
        unknown = [member for member in responsible if member not in team_members]
        if unknown:
            problems.append(f"not on the team roster: {', '.join(unknown)}")

    progress = task.get("progress")
    if not isinstance(progress, int) or isinstance(progress, bool):
        problems.append("progress must be an integer")
    elif not (0 <= progress <= 100):
        problems.append("progress must be between 0 and 100 (inclusive)")

    if task.get("category") not in CATEGORIES:
        problems.append(f"category must be one of: {', '.join(CATEGORIES)}")
    if task.get("status") not in STATUSES:
        problems.append(f"status must be one of: {', '.join(STATUSES)}")

    dependencies = task.get("dependencies", [])
    if not isinstance(dependencies, list) or not all(
        isinstance(dependency_id, str) for dependency_id in dependencies
    ):
        problems.append("dependencies must be a list of task ids")
    if not isinstance(task.get("description"), (str, type(None))):
        problems.append("description must be text")
    if not isinstance(task.get("is_milestone", False), bool):
        problems.append("is_milestone must be true or false")

    return problems


def normalize_task(task: Task) -> Task:
    """Deduplicate list fields and drop a task's reference to itself."""
    task["responsible"] = list(dict.fromkeys(task["responsible"]))
    task["dependencies"] = [
        dependency_id
        for dependency_id in dict.fromkeys(task["dependencies"])
        if dependency_id != task["id"]
    ]
    if task["description"] is not None and task["description"].strip() == "":
        task["description"] = None
    return task
