# SPDX-License-Identifier: MIT


class GanttlineError(Exception):
    """Base class for errors raised by ganttline."""


class TaskValidationError(GanttlineError, ValueError):
    """Raised when a task is rejected before it reaches the collection."""

    def __init__(self, problems: list[str]) -> None:
        super().__init__("; ".join(problems))
        self.problems = problems


class StoreError(GanttlineError):
    """Raised by a task store when it cannot read or write a task."""


class EmptyTimelineError(GanttlineError, ValueError):
    """Raised when a timeline grid is requested for zero tasks."""
