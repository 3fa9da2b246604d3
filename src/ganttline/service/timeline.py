# SPDX-License-Identifier: MIT

from typing import Optional, Sequence

import pendulum

from ganttline.errors import EmptyTimelineError
from ganttline.model.task import Task
from ganttline.model.timeline import MonthBucket, TaskOffset, TimelineGrid
from ganttline.time import days_between


def build_timeline_grid(tasks: Sequence[Task]) -> TimelineGrid:
    """
    Build the month-aligned calendar grid that covers every task.

    The grid starts on the first day of the month holding the earliest start
    or end date and finishes on the last day of the month holding the latest
    one. Each month bucket records its real day count and its offset in days
    from the grid start.

    Raises:
        EmptyTimelineError: If there are no tasks. Callers are expected to
            show a "no tasks" state instead of asking for a grid.
    """
    if len(tasks) == 0:
        raise EmptyTimelineError("a timeline grid needs at least one task")

    all_dates = [date for task in tasks for date in (task["start_date"], task["end_date"])]
    min_date = min(all_dates)
    max_date = max(all_dates)

    grid_start = min_date.start_of("month")
    grid_end = max_date.end_of("month")
    total_days = days_between(grid_start, grid_end) + 1

    months: list[MonthBucket] = []
    current = grid_start
    day_counter = 0
    while current <= grid_end:
        days = current.days_in_month
        months.append(
            {
                "label": current.format("YYYY MMM"),
                "year": current.year,
                "month": current.month,
                "days": days,
                "start_offset": day_counter,
            }
        )
        day_counter += days
        current = current.add(months=1)

    return {
        "min_date": min_date,
        "max_date": max_date,
        "grid_start": grid_start,
        "grid_end": grid_end,
        "total_days": total_days,
        "months": months,
    }


def map_task_offset(task: Task, grid: TimelineGrid) -> TaskOffset:
    """
    Position a task on the grid as fractions of the grid's total day span.

    The duration counts both endpoints, so a single-day task is one day wide.
    Values are not clamped; the grid is built from the same tasks so every
    task falls inside it.
    """
    total_days = grid["total_days"]
    start_offset_days = days_between(grid["grid_start"], task["start_date"])
    duration_days = days_between(task["start_date"], task["end_date"]) + 1
    return {
        "start_offset_days": start_offset_days,
        "duration_days": duration_days,
        "left": start_offset_days / total_days,
        "width": duration_days / total_days,
    }


def map_today_offset(today: pendulum.Date, grid: TimelineGrid) -> Optional[float]:
    """Fraction for the today marker, or None when today is off the grid."""
    total_days = grid["total_days"]
    today_offset_days = days_between(grid["grid_start"], today)
    if today_offset_days < 0 or today_offset_days > total_days:
        return None
    return today_offset_days / total_days
