# SPDX-License-Identifier: MIT

from ganttline.model.category import CategoryType
from ganttline.model.deadline import DeadlineTierType
from ganttline.model.status import StatusType

# Color constant for completed tasks
COMPLETED_TASK_COLOR = "bright_black"

TODAY_MARKER_COLOR = "red"
MILESTONE_COLOR = "purple"

CATEGORY_COLORS: dict[CategoryType, str] = {
    "development": "blue",
    "operation": "green",
    "marketing": "magenta",
    "legal": "dark_orange",
}

STATUS_COLORS: dict[StatusType, str] = {
    "not-started": "grey50",
    "in-progress": "dodger_blue1",
    "completed": "green3",
    "delayed": "red3",
}

DEADLINE_COLORS: dict[DeadlineTierType, str] = {
    "overdue": "bold red",
    "due_today": "red",
    "urgent": "red",
    "warning": "yellow",
    "normal": "blue",
}
