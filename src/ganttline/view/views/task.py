# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ganttline.color import CATEGORY_COLORS, MILESTONE_COLOR, STATUS_COLORS
from ganttline.model.category import CATEGORY_LABELS
from ganttline.model.status import STATUS_LABELS
from ganttline.model.task import Task
from ganttline.service.deadline import get_deadline_badge
from ganttline.service.grouping import group_tasks_by_category, resolve_dependency_names
from ganttline.time import date_to_display_str, date_to_iso_str
from ganttline.view.util import (
    format_responsible,
    render_deadline_badge,
    render_progress_bar,
    short_id,
    task_state,
    task_style,
)
from ganttline.view.views.header import header


def tasks_view(
    report_name: str,
    tasks: Optional[list[Task]],
    today: pendulum.Date,
    use_color: bool = True,
) -> None:
    """
    Display tasks as one table per category.

    Categories are listed in the order they first appear in the tasks and
    every table keeps the tasks in the order they were given.

    Args:
        report_name: The name of the report
        tasks: The tasks to show, or None while they are still loading
        today: The date deadlines are measured from
        use_color: Whether to color rows by status
    """
    header(report_name)

    console = Console()

    if tasks is None:
        console.print("\n[dim]Loading tasks...[/dim]\n")
        return
    if len(tasks) == 0:
        console.print("\n[dim]No tasks to display[/dim]\n")
        return

    for category, category_tasks in group_tasks_by_category(tasks).items():
        color = CATEGORY_COLORS[category]
        title = f"[{color}]■[/{color}] {CATEGORY_LABELS[category]} ({len(category_tasks)} tasks)"
        table = Table(box=box.SIMPLE, title=title, title_justify="left")
        table.add_column("id")
        table.add_column("state")
        table.add_column("name")
        table.add_column("dates")
        table.add_column("responsible")
        table.add_column("progress")
        table.add_column("deadline")
        table.add_column("depends on")

        for task in category_tasks:
            name = escape(task["name"])
            if task["is_milestone"]:
                name = f"[{MILESTONE_COLOR}]◆[/{MILESTONE_COLOR}] {name}"
            row = [
                short_id(task),
                escape(f"[{task_state(task)}]"),
                name,
                f"{date_to_iso_str(task['start_date'])} ~ {date_to_iso_str(task['end_date'])}",
                escape(format_responsible(task["responsible"])),
                f"{render_progress_bar(task['progress'])} {task['progress']:>3}%",
                render_deadline_badge(get_deadline_badge(task, today)),
                escape(", ".join(resolve_dependency_names(task, tasks))),
            ]
            style = task_style(task, STATUS_COLORS[task["status"]]) if use_color else None
            table.add_row(*row, style=style)

        console.print(table)


def single_task_view(task: Task, all_tasks: list[Task], today: pendulum.Date) -> None:
    header("task")

    task_table = Table(box=box.SIMPLE)
    task_table.add_column("property")
    task_table.add_column("value")

    task_table.add_row("id", task["id"] or "")
    task_table.add_row("name", escape(task["name"]))
    task_table.add_row("category", CATEGORY_LABELS[task["category"]])
    task_table.add_row("status", STATUS_LABELS[task["status"]])
    task_table.add_row("progress", f"{task['progress']}%")
    task_table.add_row("start", date_to_display_str(task["start_date"]))
    task_table.add_row("end", date_to_display_str(task["end_date"]))
    task_table.add_row("responsible", escape(format_responsible(task["responsible"])))
    task_table.add_row("milestone", "yes" if task["is_milestone"] else "no")
    task_table.add_row("description", escape(task["description"] or ""))
    task_table.add_row(
        "depends on", escape(", ".join(resolve_dependency_names(task, all_tasks)))
    )
    task_table.add_row(
        "deadline", render_deadline_badge(get_deadline_badge(task, today))
    )

    console = Console()
    console.print(task_table)
