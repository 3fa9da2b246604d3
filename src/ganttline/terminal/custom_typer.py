# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core

COMMAND_ORDER = [
    "task, t",
    "view, v",
    "config, c",
]


class AliasedTyperGroup(typer.core.TyperGroup):
    """TyperGroup whose command names may list aliases, e.g. "task, t"."""

    _CMD_SPLIT_P = re.compile(r" ?, ?")

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self._full_name(cmd_name))

    def _full_name(self, alias: str) -> str:
        for name in self.commands:
            if alias in self._CMD_SPLIT_P.split(name):
                return name
        return alias

    def list_commands(self, ctx: click.Context) -> list[str]:
        """Top-level groups come first in a fixed order, the rest as registered."""
        ordered = [name for name in COMMAND_ORDER if name in self.commands]
        return ordered + [name for name in self.commands if name not in ordered]
