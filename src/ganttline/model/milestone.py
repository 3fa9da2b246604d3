# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

import pendulum

from ganttline.model.entity_id import EntityId

MilestoneStatusType = Literal["upcoming", "completed"]


class Milestone(TypedDict):
    """
    A task flagged as a key deliverable.

    Milestones are projected from the task collection on every read and are
    never stored on their own.
    """

    id: EntityId
    name: str
    date: pendulum.Date
    status: MilestoneStatusType
    description: str
