# SPDX-License-Identifier: MIT

from typing import Optional

import typer

from ganttline.model.category import CATEGORIES
from ganttline.model.status import STATUSES

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_progress(progress: Optional[int]) -> Optional[int]:
    if progress is None:
        return None
    if not (0 <= progress <= 100):
        raise typer.BadParameter("Progress must be between 0 and 100 (inclusive)")
    return progress


def validate_category(category: Optional[str]) -> Optional[str]:
    if category is None:
        return None
    if category not in CATEGORIES:
        raise typer.BadParameter(f"Category must be one of: {', '.join(CATEGORIES)}")
    return category


def validate_status(status: Optional[str]) -> Optional[str]:
    if status is None:
        return None
    if status not in STATUSES:
        raise typer.BadParameter(f"Status must be one of: {', '.join(STATUSES)}")
    return status


def validate_log_level(log_level: Optional[str]) -> Optional[str]:
    if log_level is None:
        return None
    if log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(f"Log level must be one of: {', '.join(LOG_LEVELS)}")
    return log_level.upper()
