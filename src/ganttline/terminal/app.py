# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from ganttline import state as app_state
from ganttline.terminal import configuration, task, view
from ganttline.terminal.custom_typer import AliasedTyperGroup
from ganttline.terminal.parse import DATE_HELP, parse_date
from ganttline.time import date_to_iso_str

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="ganttline - Project timelines in the CLI",
    no_args_is_help=True,
)
app.add_typer(task.app, name="task, t", help="Add and change tasks")
app.add_typer(view.app, name="view, v", help="Task list, timeline and milestones")
app.add_typer(configuration.app, name="config, c", help="Settings and team roster")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    today: Annotated[
        Optional[str],
        typer.Option(
            "--today",
            help=f"Pretend today is this date for badges and markers ({DATE_HELP})",
        ),
    ] = None,
) -> None:
    """
    ganttline - Project timelines in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        app_state.set_show_header(False)
    if today is not None:
        date = parse_date(today)
        if date is not None:
            app_state.set_today_override(date_to_iso_str(date))


def run() -> None:
    app()
