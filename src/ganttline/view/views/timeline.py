# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich.console import Console, Group
from rich.padding import Padding
from rich.text import Text

from ganttline.color import CATEGORY_COLORS, STATUS_COLORS, TODAY_MARKER_COLOR
from ganttline.model.category import CATEGORY_LABELS, CategoryType
from ganttline.model.status import STATUS_LABELS, STATUSES
from ganttline.model.task import Task
from ganttline.model.timeline import MonthBucket, TimelineGrid
from ganttline.service.grouping import group_tasks_by_category
from ganttline.service.timeline import (
    build_timeline_grid,
    map_task_offset,
    map_today_offset,
)
from ganttline.time import date_to_iso_str
from ganttline.view.util import fit_to_width, task_state, task_style
from ganttline.view.views.header import header

MIN_TIMELINE_WIDTH = 20
BAR_CHAR = " "
TODAY_CHAR = "│"


def timeline_view(
    report_name: str,
    tasks: Optional[list[Task]],
    today: pendulum.Date,
    left_column_width: int = 32,
    timeline_width: Optional[int] = None,
) -> None:
    """
    Display tasks on a month-bucketed gantt timeline.

    The grid runs from the first day of the earliest task month to the last
    day of the latest one. Tasks are grouped under their category and each
    bar is colored by status and labelled with the task progress. A today
    marker is drawn when today falls on the grid.

    Args:
        report_name: The name of the report
        tasks: The tasks to draw, or None while they are still loading
        today: The date used for the today marker
        left_column_width: Width of the left column for task names
        timeline_width: Width of the bar area (defaults to the rest of the terminal)
    """
    header(report_name)

    console = Console()

    if tasks is None:
        console.print("\n[dim]Loading tasks...[/dim]\n")
        return
    # No grid exists for zero tasks
    if len(tasks) == 0:
        console.print("\n[dim]No tasks to display[/dim]\n")
        return

    grid = build_timeline_grid(tasks)

    if timeline_width is None:
        timeline_width = console.width - left_column_width
    timeline_width = max(MIN_TIMELINE_WIDTH, timeline_width)

    today_fraction = map_today_offset(today, grid)
    today_column = (
        _fraction_to_column(today_fraction, timeline_width)
        if today_fraction is not None
        else None
    )

    console.print(
        f"\n[bold]{date_to_iso_str(grid['grid_start'])} to "
        f"{date_to_iso_str(grid['grid_end'])}[/bold] ({grid['total_days']} days)\n"
    )

    chart_elements: list[Text] = []
    if today_column is not None:
        chart_elements.append(
            _build_today_label_row(today_column, timeline_width, left_column_width)
        )
    chart_elements.append(_build_month_header(grid, timeline_width, left_column_width))
    chart_elements.append(
        _no_wrap(Text("─" * (left_column_width + timeline_width), style="dim"))
    )

    for category, category_tasks in group_tasks_by_category(tasks).items():
        chart_elements.append(
            _build_category_row(
                category, timeline_width, left_column_width, today_column
            )
        )
        for task in category_tasks:
            chart_elements.append(
                _build_task_row(
                    task, grid, timeline_width, left_column_width, today_column
                )
            )

    chart_elements.append(Text())
    chart_elements.append(_build_legend())

    console.print(Padding(Group(*chart_elements), (0, 0, 1, 0)))


def _no_wrap(text: Text) -> Text:
    text.no_wrap = True
    text.overflow = "crop"
    return text


def _fraction_to_column(fraction: float, timeline_width: int) -> int:
    return min(int(fraction * timeline_width), timeline_width - 1)


def _month_columns(
    grid: TimelineGrid, timeline_width: int
) -> list[tuple[MonthBucket, int, int]]:
    """Start and end columns of each month, so month widths follow day counts."""
    total_days = grid["total_days"]
    columns = []
    for bucket in grid["months"]:
        start_col = round(bucket["start_offset"] / total_days * timeline_width)
        end_col = round(
            (bucket["start_offset"] + bucket["days"]) / total_days * timeline_width
        )
        columns.append((bucket, start_col, end_col))
    return columns


def _build_today_label_row(
    today_column: int, timeline_width: int, left_column_width: int
) -> Text:
    row = Text(" " * left_column_width)
    label = "today ▼"
    # Keep the arrow above the marker column
    label_start = max(0, today_column - len(label) + 1)
    row.append(" " * label_start)
    row.append(label[: timeline_width - label_start], style=TODAY_MARKER_COLOR)
    return _no_wrap(row)


def _build_month_header(
    grid: TimelineGrid, timeline_width: int, left_column_width: int
) -> Text:
    row = Text(fit_to_width("task", left_column_width), style="bold")

    for i, (bucket, start_col, end_col) in enumerate(
        _month_columns(grid, timeline_width)
    ):
        width = end_col - start_col
        if width <= 0:
            continue
        label = bucket["label"]
        if len(label) > width:
            # Fall back to the month name alone, then to whatever fits
            label = pendulum.date(bucket["year"], bucket["month"], 1).format("MMM")
        style = "bold on grey23" if i % 2 == 1 else "bold"
        row.append(label[:width].ljust(width), style=style)

    return _no_wrap(row)


def _build_category_row(
    category: CategoryType,
    timeline_width: int,
    left_column_width: int,
    today_column: Optional[int],
) -> Text:
    color = CATEGORY_COLORS[category]
    row = Text()
    row.append("■ ", style=color)
    row.append(
        fit_to_width(CATEGORY_LABELS[category], left_column_width - 2),
        style="bold " + color,
    )
    for col in range(timeline_width):
        if col == today_column:
            row.append(TODAY_CHAR, style=TODAY_MARKER_COLOR)
        else:
            row.append(" ")
    return _no_wrap(row)


def _build_task_row(
    task: Task,
    grid: TimelineGrid,
    timeline_width: int,
    left_column_width: int,
    today_column: Optional[int],
) -> Text:
    """
    Build one task row: "[state] name" on the left and the bar on the right.

    The bar covers at least one column so single-day tasks stay visible, and
    its progress label is written inside the bar when it fits.
    """
    row = Text()

    left_col = fit_to_width(f"[{task_state(task)}] {task['name']}", left_column_width - 1)
    row.append(left_col + " ", style=task_style(task, "white"))

    offset = map_task_offset(task, grid)
    start_col = _fraction_to_column(offset["left"], timeline_width)
    end_col = min(
        timeline_width, round((offset["left"] + offset["width"]) * timeline_width)
    )
    end_col = max(start_col + 1, end_col)

    bar_color = STATUS_COLORS[task["status"]]
    bar_style = f"white on {bar_color}"
    bar_label = f"{task['progress']}%"
    bar_width = end_col - start_col
    bar_text = bar_label if len(bar_label) <= bar_width else ""
    bar_text = bar_text.ljust(bar_width, BAR_CHAR)

    for col in range(timeline_width):
        if start_col <= col < end_col:
            row.append(bar_text[col - start_col], style=bar_style)
        elif col == today_column:
            row.append(TODAY_CHAR, style=TODAY_MARKER_COLOR)
        else:
            row.append(" ")

    return _no_wrap(row)


def _build_legend() -> Text:
    legend = Text()
    for status in STATUSES:
        legend.append("  ", style=f"on {STATUS_COLORS[status]}")
        legend.append(f" {STATUS_LABELS[status]}   ")
    legend.append(TODAY_CHAR, style=TODAY_MARKER_COLOR)
    legend.append(" today")
    return _no_wrap(legend)
