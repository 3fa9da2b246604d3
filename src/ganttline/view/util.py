# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from ganttline.color import COMPLETED_TASK_COLOR, DEADLINE_COLORS
from ganttline.model.deadline import DeadlineBadge
from ganttline.model.status import StatusType
from ganttline.model.task import Task
from ganttline.state import get_today_override
from ganttline.time import date_from_str, today_local

SHORT_ID_LENGTH = 8

STATUS_SYMBOLS: dict[StatusType, str] = {
    "not-started": " ",
    "in-progress": "~",
    "completed": "X",
    "delayed": "!",
}


def resolve_today() -> pendulum.Date:
    """Today's local date, unless the invocation pinned a different one."""
    override = get_today_override()
    if override is not None:
        return date_from_str(override)
    return today_local()


def short_id(task: Task) -> str:
    if task["id"] is None:
        return ""
    return task["id"][:SHORT_ID_LENGTH]


def task_state(task: Task) -> str:
    return STATUS_SYMBOLS[task["status"]]


def format_responsible(responsible: list[str]) -> str:
    return ", ".join(responsible)


def render_progress_bar(progress: int, width: int = 10) -> str:
    filled = round(progress / 100 * width)
    return "█" * filled + "░" * (width - filled)


def render_deadline_badge(badge: Optional[DeadlineBadge]) -> str:
    if badge is None:
        return ""
    color = DEADLINE_COLORS[badge["tier"]]
    return f"[{color}]{badge['label']}[/{color}]"


def fit_to_width(text: str, width: int) -> str:
    """Truncate with an ellipsis when too long, otherwise pad to the width."""
    if len(text) > width:
        if width <= 3:
            return text[: max(width, 0)]
        return text[: width - 3] + "..."
    return text.ljust(width)


def task_style(task: Task, color: str) -> str:
    if task["status"] == "completed":
        return COMPLETED_TASK_COLOR
    return color
