# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import typer

from ganttline.model.category import CategoryType
from ganttline.model.task import Task
from ganttline.repository.configuration import CONFIGURATION_REPO
from ganttline.repository.task import TASK_REPO
from ganttline.service.grouping import filter_tasks_by_category
from ganttline.service.milestone import project_milestones
from ganttline.terminal.custom_typer import AliasedTyperGroup
from ganttline.terminal.validate import validate_category
from ganttline.view.util import resolve_today
from ganttline.view.views.milestone import milestones_view
from ganttline.view.views.task import tasks_view
from ganttline.view.views.timeline import timeline_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _load_tasks(category: Optional[str] = None) -> Optional[list[Task]]:
    if TASK_REPO.is_loading:
        TASK_REPO.load()
    tasks = TASK_REPO.snapshot()
    if tasks is None:
        return None
    return filter_tasks_by_category(tasks, cast(Optional[CategoryType], category))


@app.command("list, l")
def list_tasks(
    category: Annotated[
        Optional[str],
        typer.Option(
            "--category",
            "-c",
            callback=validate_category,
            help="Only show tasks of this category",
        ),
    ] = None,
    no_color: Annotated[
        bool, typer.Option("--no-color", help="Render the tables without colors")
    ] = False,
) -> None:
    """List tasks grouped by category with deadline badges."""
    tasks_view("tasks", _load_tasks(category), resolve_today(), use_color=not no_color)


@app.command("timeline, tl")
def timeline(
    category: Annotated[
        Optional[str],
        typer.Option(
            "--category",
            "-c",
            callback=validate_category,
            help="Only show tasks of this category",
        ),
    ] = None,
    left_width: Annotated[
        Optional[int],
        typer.Option(
            "--left-width", "-lw", min=8, help="Width of the task name column"
        ),
    ] = None,
    width: Annotated[
        Optional[int],
        typer.Option("--width", "-w", min=20, help="Width of the bar area"),
    ] = None,
) -> None:
    """Draw the tasks on a month-bucketed gantt timeline."""
    config = CONFIGURATION_REPO.get_config()

    timeline_view(
        "timeline",
        _load_tasks(category),
        resolve_today(),
        left_column_width=left_width or config["left_column_width"],
        timeline_width=width or config.get("timeline_width"),
    )


@app.command("milestones, ms")
def milestones() -> None:
    """List tasks pinned as milestones with their countdown."""
    tasks = _load_tasks()
    milestones_view(
        "milestones",
        project_milestones(tasks) if tasks is not None else None,
        resolve_today(),
    )
