# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from ganttline.model.category import CategoryType
from ganttline.model.entity_id import EntityId
from ganttline.model.status import StatusType


class Task(TypedDict):
    id: Optional[EntityId]
    name: str
    category: CategoryType
    start_date: pendulum.Date
    end_date: pendulum.Date
    progress: int
    responsible: list[str]
    status: StatusType
    dependencies: list[EntityId]
    description: Optional[str]
    is_milestone: bool


# Keys a caller may change through a partial update
TASK_MUTABLE_FIELDS = (
    "name",
    "category",
    "start_date",
    "end_date",
    "progress",
    "responsible",
    "status",
    "dependencies",
    "description",
    "is_milestone",
)
