# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from ganttline.model.deadline import URGENT_DAYS, WARNING_DAYS, DeadlineBadge
from ganttline.model.task import Task
from ganttline.time import days_between


def get_days_remaining(task: Task, today: pendulum.Date) -> int:
    """
    Whole days from today until the task's end date.

    Dates carry no time of day, so the difference is already the ceiling of
    the day count. The result is negative exactly when today is after the
    end date.
    """
    return days_between(today, task["end_date"])


def is_overdue(task: Task, today: pendulum.Date) -> bool:
    return task["status"] != "completed" and get_days_remaining(task, today) < 0


def get_deadline_badge(task: Task, today: pendulum.Date) -> Optional[DeadlineBadge]:
    """
    Classify how close a task is to its deadline.

    Completed tasks never carry a badge.

    Returns:
        A badge with tier "overdue", "due_today", "urgent" (1-3 days),
        "warning" (4-7 days) or "normal" (more than 7 days), or None
    """
    if task["status"] == "completed":
        return None

    days_remaining = get_days_remaining(task, today)

    if days_remaining < 0:
        overdue_days = abs(days_remaining)
        unit = "day" if overdue_days == 1 else "days"
        return {
            "tier": "overdue",
            "days_remaining": days_remaining,
            "label": f"overdue by {overdue_days} {unit}",
        }
    if days_remaining == 0:
        return {"tier": "due_today", "days_remaining": 0, "label": "due today"}
    if days_remaining <= URGENT_DAYS:
        tier = "urgent"
    elif days_remaining <= WARNING_DAYS:
        tier = "warning"
    else:
        tier = "normal"
    return {
        "tier": tier,
        "days_remaining": days_remaining,
        "label": f"D-{days_remaining}",
    }
