# SPDX-License-Identifier: MIT

from typing import Literal, get_args

StatusType = Literal["not-started", "in-progress", "completed", "delayed"]

STATUSES: tuple[StatusType, ...] = get_args(StatusType)

STATUS_LABELS: dict[StatusType, str] = {
    "not-started": "Not started",
    "in-progress": "In progress",
    "completed": "Completed",
    "delayed": "Delayed",
}
