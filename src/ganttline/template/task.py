# SPDX-License-Identifier: MIT

from ganttline.model.task import Task
from ganttline.time import today_local


def get_task_template() -> Task:
    today = today_local()
    return {
        "id": None,
        "name": "",
        "category": "development",
        "start_date": today,
        "end_date": today,
        "progress": 0,
        "responsible": [],
        "status": "not-started",
        "dependencies": [],
        "description": None,
        "is_milestone": False,
    }
