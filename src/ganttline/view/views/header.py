# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from ganttline.state import get_show_header


def header(sub_header: Optional[str] = None) -> None:
    """Print the application header followed by the report name."""
    if not get_show_header():
        return

    print(Padding("[dark_orange]ganttline[/dark_orange]", (1, 0, 0, 1)))
    if sub_header is not None:
        print(Padding(f"[sandy_brown]{sub_header}[/sandy_brown]", (0, 1)))
