# SPDX-License-Identifier: MIT

from typing import Annotated, Any, NoReturn, Optional, cast

import pendulum
import typer
from rich.console import Console

from ganttline.errors import TaskValidationError
from ganttline.model.category import CategoryType
from ganttline.model.entity_id import EntityId
from ganttline.model.status import StatusType
from ganttline.repository.configuration import CONFIGURATION_REPO
from ganttline.repository.task import TASK_REPO
from ganttline.template.task import get_task_template
from ganttline.terminal.custom_typer import AliasedTyperGroup
from ganttline.terminal.parse import (
    DATE_HELP,
    parse_date,
    resolve_task_id,
    resolve_task_ids,
)
from ganttline.terminal.validate import (
    validate_category,
    validate_progress,
    validate_status,
)
from ganttline.view.util import resolve_today
from ganttline.view.views import task as task_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

error_console = Console(stderr=True)


def _reject(error: TaskValidationError) -> NoReturn:
    for problem in error.problems:
        error_console.print(f"[red]✗ {problem}[/red]")
    raise typer.Exit(1)


def _show_task(task_id: EntityId) -> None:
    task_report.single_task_view(
        TASK_REPO.get_task(task_id), TASK_REPO.get_all_tasks(), resolve_today()
    )


@app.command("add, a", no_args_is_help=True)
def add(
    name: str,
    start: Annotated[
        Optional[pendulum.Date],
        typer.Option("--start", "-s", parser=parse_date, help=DATE_HELP),
    ] = None,
    end: Annotated[
        Optional[pendulum.Date],
        typer.Option("--end", "-e", parser=parse_date, help=DATE_HELP),
    ] = None,
    responsible: Annotated[
        Optional[list[str]],
        typer.Option(
            "--responsible", "-r", help="team member in charge (repeatable)"
        ),
    ] = None,
    category: Annotated[
        str,
        typer.Option(
            "--category",
            "-c",
            callback=validate_category,
            help="development, operation, marketing or legal",
        ),
    ] = "development",
    status: Annotated[
        str,
        typer.Option(
            "--status",
            "-st",
            callback=validate_status,
            help="not-started, in-progress, completed or delayed",
        ),
    ] = "not-started",
    progress: Annotated[
        int,
        typer.Option(
            "--progress", "-p", callback=validate_progress, help="valid input: 0-100"
        ),
    ] = 0,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    depends_on: Annotated[
        Optional[list[str]],
        typer.Option("--depends-on", "-dep", help="task id or id prefix (repeatable)"),
    ] = None,
    milestone: Annotated[
        bool, typer.Option("--milestone", "-m", help="pin the task as a milestone")
    ] = False,
) -> None:
    """Add a task. Name, start, end and at least one responsible are required."""
    task = get_task_template()
    task["name"] = name
    # Missing dates are left for validation to report
    task["start_date"] = cast(pendulum.Date, start)
    task["end_date"] = cast(pendulum.Date, end)
    task["responsible"] = responsible or []
    task["category"] = cast(CategoryType, category)
    task["status"] = cast(StatusType, status)
    task["progress"] = progress
    task["description"] = description
    task["dependencies"] = resolve_task_ids(TASK_REPO, depends_on or [])
    task["is_milestone"] = milestone

    try:
        task_id = TASK_REPO.add_task(task, CONFIGURATION_REPO.get_team_members())
    except TaskValidationError as e:
        _reject(e)

    _show_task(task_id)


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: str,
    name: Annotated[Optional[str], typer.Option("--name", "-n")] = None,
    start: Annotated[
        Optional[pendulum.Date],
        typer.Option("--start", "-s", parser=parse_date, help=DATE_HELP),
    ] = None,
    end: Annotated[
        Optional[pendulum.Date],
        typer.Option("--end", "-e", parser=parse_date, help=DATE_HELP),
    ] = None,
    responsible: Annotated[
        Optional[list[str]],
        typer.Option(
            "--responsible", "-r", help="replaces the responsible list (repeatable)"
        ),
    ] = None,
    category: Annotated[
        Optional[str],
        typer.Option("--category", "-c", callback=validate_category),
    ] = None,
    status: Annotated[
        Optional[str],
        typer.Option("--status", "-st", callback=validate_status),
    ] = None,
    progress: Annotated[
        Optional[int],
        typer.Option(
            "--progress",
            "-p",
            callback=validate_progress,
            help="sets progress without touching the status",
        ),
    ] = None,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    depends_on: Annotated[
        Optional[list[str]],
        typer.Option(
            "--depends-on", "-dep", help="replaces the dependency list (repeatable)"
        ),
    ] = None,
    milestone: Annotated[
        Optional[bool], typer.Option("--milestone/--no-milestone")
    ] = None,
    remove_description: Annotated[
        bool, typer.Option("--remove-description", "-rd")
    ] = False,
    remove_dependencies: Annotated[
        bool, typer.Option("--remove-dependencies", "-rdep")
    ] = False,
) -> None:
    """Change some fields of a task, leaving the rest as they are."""
    task_id = resolve_task_id(TASK_REPO, id)

    changes: dict[str, Any] = {}
    if name is not None:
        changes["name"] = name
    if start is not None:
        changes["start_date"] = start
    if end is not None:
        changes["end_date"] = end
    if responsible is not None:
        changes["responsible"] = responsible
    if category is not None:
        changes["category"] = category
    if status is not None:
        changes["status"] = status
    if progress is not None:
        changes["progress"] = progress
    if description is not None:
        changes["description"] = description
    if depends_on is not None:
        changes["dependencies"] = resolve_task_ids(TASK_REPO, depends_on)
    if milestone is not None:
        changes["is_milestone"] = milestone
    if remove_description:
        changes["description"] = None
    if remove_dependencies:
        changes["dependencies"] = []

    try:
        TASK_REPO.update_task(task_id, changes, CONFIGURATION_REPO.get_team_members())
    except TaskValidationError as e:
        _reject(e)

    _show_task(task_id)


@app.command("progress, p", no_args_is_help=True)
def progress(
    id: str,
    value: Annotated[int, typer.Argument(callback=validate_progress)],
) -> None:
    """
    Move the progress slider of a task.

    100 completes the task, anything between 1 and 99 marks it in progress
    and 0 keeps the current status.
    """
    task_id = resolve_task_id(TASK_REPO, id)

    try:
        TASK_REPO.update_progress(task_id, value)
    except TaskValidationError as e:
        _reject(e)

    _show_task(task_id)


@app.command("status, st", no_args_is_help=True)
def status(
    id: str,
    value: Annotated[str, typer.Argument(callback=validate_status)],
) -> None:
    """Set the status of a task directly. Progress is left unchanged."""
    task_id = resolve_task_id(TASK_REPO, id)

    try:
        TASK_REPO.update_task(task_id, {"status": value})
    except TaskValidationError as e:
        _reject(e)

    _show_task(task_id)


@app.command("milestone, ms", no_args_is_help=True)
def milestone(id: str) -> None:
    """Pin a task as a milestone, or unpin it if it already is one."""
    task_id = resolve_task_id(TASK_REPO, id)
    task = TASK_REPO.get_task(task_id)

    try:
        TASK_REPO.update_task(task_id, {"is_milestone": not task["is_milestone"]})
    except TaskValidationError as e:
        _reject(e)

    _show_task(task_id)


@app.command("delete, d", no_args_is_help=True)
def delete(
    id: str,
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="skip the confirmation prompt")
    ] = False,
) -> None:
    """Delete a task. Tasks that depended on it simply lose the reference."""
    task_id = resolve_task_id(TASK_REPO, id)
    task = TASK_REPO.get_task(task_id)

    if not yes and not typer.confirm(f'Delete task "{task["name"]}"?'):
        raise typer.Exit(0)

    TASK_REPO.delete_task(task_id)
    Console().print(f"[green]Deleted[/green] {task['name']}")
