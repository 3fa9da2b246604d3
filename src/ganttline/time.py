# SPDX-License-Identifier: MIT

import pendulum


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def date_to_iso_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD")


def date_from_str(date: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string into a pendulum.Date."""
    return pendulum.from_format(date, "YYYY-MM-DD").date()


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")


def days_between(start: pendulum.Date, end: pendulum.Date) -> int:
    """Signed number of whole days from start to end."""
    return start.diff(end, False).in_days()
