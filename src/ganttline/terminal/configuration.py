# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ganttline import configuration
from ganttline.repository.configuration import CONFIGURATION_REPO
from ganttline.terminal.custom_typer import AliasedTyperGroup
from ganttline.terminal.validate import validate_log_level

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)
team_app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)
app.add_typer(team_app, name="team, tm", help="Manage the team roster")


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "team_members",
        escape(", ".join(config["team_members"]))
        if config["team_members"]
        else "None (any responsible is accepted)",
    )
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row(
        "show_header", "✓ Enabled" if config["show_header"] else "✗ Disabled"
    )
    table.add_row("log_level", config["log_level"])
    table.add_row("left_column_width", str(config["left_column_width"]))
    timeline_width = config.get("timeline_width")
    table.add_row(
        "timeline_width",
        str(timeline_width) if timeline_width is not None else "terminal width",
    )

    console.print(table)


@app.command("set, s")
def set(
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory path for storing data files (None = default data dir)",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path",
            help="Reset data path to None (use the default data dir)",
        ),
    ] = False,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable the report header",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            callback=validate_log_level,
            help="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        ),
    ] = None,
    left_column_width: Annotated[
        Optional[int],
        typer.Option("--left-column-width", min=8, help="Width of the timeline name column"),
    ] = None,
    timeline_width: Annotated[
        Optional[int],
        typer.Option("--timeline-width", min=20, help="Width of the timeline bar area"),
    ] = None,
    remove_timeline_width: Annotated[
        bool,
        typer.Option(
            "--remove-timeline-width",
            help="Size the timeline to the terminal again",
        ),
    ] = False,
) -> None:
    """Update configuration settings."""
    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        show_header=show_header,
        log_level=log_level,
        left_column_width=left_column_width,
        timeline_width=timeline_width,
        remove_timeline_width=remove_timeline_width,
    )
    view()


@team_app.command("list, l")
def team_list() -> None:
    """Show the team roster."""
    console = Console()
    team_members = CONFIGURATION_REPO.get_team_members()
    if len(team_members) == 0:
        console.print("[dim]No team members configured[/dim]")
        return
    for name in team_members:
        console.print(escape(name))


@team_app.command("add, a", no_args_is_help=True)
def team_add(name: str) -> None:
    """Add a member to the team roster."""
    if not CONFIGURATION_REPO.add_team_member(name):
        Console().print(f"[yellow]{escape(name)} is already on the team[/yellow]")
        return
    team_list()


@team_app.command("remove, r", no_args_is_help=True)
def team_remove(name: str) -> None:
    """Remove a member from the team roster. Existing tasks keep the name."""
    if not CONFIGURATION_REPO.remove_team_member(name):
        Console().print(f"[yellow]{escape(name)} is not on the team[/yellow]")
        return
    team_list()
