# SPDX-License-Identifier: MIT

from typing import Iterable, Optional, cast

import pendulum

from ganttline.model.entity_id import EntityId
from ganttline.model.milestone import Milestone
from ganttline.model.task import Task
from ganttline.time import days_between


def project_milestones(tasks: Iterable[Task]) -> list[Milestone]:
    """
    Derive milestones from tasks flagged as milestones, in task order.

    The result is rebuilt from the tasks on every call; nothing is cached.
    """
    return [
        {
            "id": cast(EntityId, task["id"]),
            "name": task["name"],
            "date": task["end_date"],
            "status": "completed" if task["status"] == "completed" else "upcoming",
            "description": task["description"] or "",
        }
        for task in tasks
        if task["is_milestone"]
    ]


def get_milestone_countdown(milestone: Milestone, today: pendulum.Date) -> Optional[str]:
    """
    Countdown label for an upcoming milestone: "today" or "D-N".

    Completed milestones and milestones whose date has passed have none.
    """
    if milestone["status"] == "completed":
        return None
    days_until = days_between(today, milestone["date"])
    if days_until < 0:
        return None
    if days_until == 0:
        return "today"
    return f"D-{days_until}"
