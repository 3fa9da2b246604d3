# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

from ganttline.model.entity_id import EntityId
from ganttline.model.task import Task

CommandKindType = Literal["insert", "update", "delete"]


class StoreCommand(TypedDict):
    """One pending write against the task store, produced by a single mutation."""

    kind: CommandKindType
    task_id: EntityId
    task: Optional[Task]
