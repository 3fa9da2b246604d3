# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from ganttline.model.entity_id import EntityId, match_entity_id
from ganttline.repository.task import TaskRepository
from ganttline.time import date_from_str, today_local

DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.Date]:
    if date_param is None:
        return None

    date = str(date_param).strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return date_from_str(date)
        except ValueError:
            raise typer.BadParameter(f"Not a calendar date: {date}")

    # Numeric input is a day offset from today (e.g., "1", "-1", "30")
    if re.match(r"^-?\d+$", date):
        return today_local().add(days=int(date))

    if date == "today" or date == "t":
        return today_local()
    if date == "yesterday" or date == "y":
        return today_local().subtract(days=1)
    if date == "tomorrow" or date == "o":
        return today_local().add(days=1)
    raise typer.BadParameter("Incorrect date format")


def resolve_task_id(repository: TaskRepository, id_param: str) -> EntityId:
    """
    Resolve a full task id or a unique id prefix to a task id.

    Raises:
        typer.BadParameter: If no task or more than one task matches
    """
    task_ids = [task["id"] for task in repository.tasks if task["id"] is not None]
    task_id = match_entity_id(id_param, task_ids)
    if task_id is None:
        raise typer.BadParameter(f"No single task matches id '{id_param}'")
    return task_id


def resolve_task_ids(repository: TaskRepository, id_params: list[str]) -> list[EntityId]:
    return [resolve_task_id(repository, id_param) for id_param in id_params]
