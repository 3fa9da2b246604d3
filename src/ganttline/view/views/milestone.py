# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ganttline.color import COMPLETED_TASK_COLOR, MILESTONE_COLOR
from ganttline.model.milestone import Milestone
from ganttline.service.milestone import get_milestone_countdown
from ganttline.time import date_to_display_str
from ganttline.view.views.header import header


def milestones_view(
    report_name: str, milestones: Optional[list[Milestone]], today: pendulum.Date
) -> None:
    header(report_name)

    console = Console()

    if milestones is None:
        console.print("\n[dim]Loading tasks...[/dim]\n")
        return
    if len(milestones) == 0:
        console.print(
            "\n[dim]No milestones yet. Mark a task as a milestone to pin it here.[/dim]\n"
        )
        return

    table = Table(box=box.SIMPLE)
    table.add_column("")
    table.add_column("milestone")
    table.add_column("date")
    table.add_column("status")
    table.add_column("countdown")
    table.add_column("description")

    for milestone in milestones:
        countdown = get_milestone_countdown(milestone, today) or ""
        style = COMPLETED_TASK_COLOR if milestone["status"] == "completed" else None
        table.add_row(
            f"[{MILESTONE_COLOR}]◆[/{MILESTONE_COLOR}]",
            escape(milestone["name"]),
            date_to_display_str(milestone["date"]),
            milestone["status"],
            countdown,
            escape(milestone["description"]),
            style=style,
        )

    console.print(table)
