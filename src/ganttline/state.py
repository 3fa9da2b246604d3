# SPDX-License-Identifier: MIT

from contextvars import ContextVar
from typing import Optional

_show_header: ContextVar[bool] = ContextVar("show_header", default=True)
_today_override: ContextVar[Optional[str]] = ContextVar("today_override", default=None)


def set_show_header(value: bool) -> None:
    _show_header.set(value)


def get_show_header() -> bool:
    return _show_header.get()


def set_today_override(value: Optional[str]) -> None:
    """Pin "today" to a YYYY-MM-DD date for every view in this invocation."""
    _today_override.set(value)


def get_today_override() -> Optional[str]:
    return _today_override.get()
