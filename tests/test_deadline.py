# SPDX-License-Identifier: MIT

import pendulum
import pytest

from conftest import make_task
from ganttline.service.deadline import (
    get_days_remaining,
    get_deadline_badge,
    is_overdue,
)

TODAY = pendulum.date(2024, 3, 10)


@pytest.mark.parametrize(
    ("end_date", "tier", "label"),
    [
        (pendulum.date(2024, 3, 8), "overdue", "overdue by 2 days"),
        (pendulum.date(2024, 3, 9), "overdue", "overdue by 1 day"),
        (pendulum.date(2024, 3, 10), "due_today", "due today"),
        (pendulum.date(2024, 3, 11), "urgent", "D-1"),
        (pendulum.date(2024, 3, 13), "urgent", "D-3"),
        (pendulum.date(2024, 3, 14), "warning", "D-4"),
        (pendulum.date(2024, 3, 17), "warning", "D-7"),
        (pendulum.date(2024, 3, 18), "normal", "D-8"),
    ],
)
def test_deadline_badge_tiers(end_date: pendulum.Date, tier: str, label: str) -> None:
    task = make_task(start_date=pendulum.date(2024, 3, 1), end_date=end_date)

    badge = get_deadline_badge(task, TODAY)

    assert badge is not None
    assert badge["tier"] == tier
    assert badge["label"] == label
    assert badge["days_remaining"] == get_days_remaining(task, TODAY)


def test_completed_task_has_no_badge_even_when_late() -> None:
    task = make_task(
        end_date=pendulum.date(2024, 3, 1), status="completed", progress=100
    )

    assert get_deadline_badge(task, TODAY) is None
    assert not is_overdue(task, TODAY)


def test_overdue_only_after_end_date() -> None:
    due_today = make_task(start_date=TODAY, end_date=TODAY)
    late = make_task(end_date=pendulum.date(2024, 3, 9))

    assert not is_overdue(due_today, TODAY)
    assert is_overdue(late, TODAY)


def test_days_remaining_crosses_month_boundary() -> None:
    task = make_task(end_date=pendulum.date(2024, 4, 2))

    assert get_days_remaining(task, TODAY) == 23
