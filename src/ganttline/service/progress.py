# SPDX-License-Identifier: MIT

from ganttline.model.status import StatusType


def infer_status_from_progress(progress: int, current_status: StatusType) -> StatusType:
    """
    Status implied by moving the progress slider.

    100 completes the task and any partial progress marks it in progress.
    Zero progress keeps whatever status the task already had.
    """
    if progress == 100:
        return "completed"
    if progress > 0:
        return "in-progress"
    return current_status
