# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

DeadlineTierType = Literal["overdue", "due_today", "urgent", "warning", "normal"]

URGENT_DAYS = 3
WARNING_DAYS = 7


class DeadlineBadge(TypedDict):
    tier: DeadlineTierType
    days_remaining: int
    label: str
