# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class MonthBucket(TypedDict):
    label: str
    year: int
    month: int
    days: int
    start_offset: int


class TimelineGrid(TypedDict):
    min_date: pendulum.Date
    max_date: pendulum.Date
    grid_start: pendulum.Date
    grid_end: pendulum.Date
    total_days: int
    months: list[MonthBucket]


class TaskOffset(TypedDict):
    start_offset_days: int
    duration_days: int
    left: float
    width: float
