# SPDX-License-Identifier: MIT

import logging

import pendulum
import pytest

from conftest import RecordingStore, make_task
from ganttline.errors import TaskValidationError
from ganttline.repository.task import TaskRepository


def test_snapshot_is_none_until_loaded(repository: TaskRepository) -> None:
    assert repository.is_loading
    assert repository.snapshot() is None

    repository.load()

    assert not repository.is_loading
    assert repository.snapshot() == []


def test_load_reads_store_in_start_order() -> None:
    store = RecordingStore(
        [
            make_task(id="late", start_date=pendulum.date(2024, 2, 1),
                      end_date=pendulum.date(2024, 2, 3)),
            make_task(id="early", start_date=pendulum.date(2024, 1, 1),
                      end_date=pendulum.date(2024, 1, 3)),
        ]
    )
    repository = TaskRepository(store)

    assert [task["id"] for task in repository.get_all_tasks()] == ["early", "late"]


def test_failed_load_leaves_empty_loaded_collection(
    store: RecordingStore, repository: TaskRepository, caplog: pytest.LogCaptureFixture
) -> None:
    store.fail_load = True

    with caplog.at_level(logging.ERROR, logger="ganttline"):
        repository.load()

    assert not repository.is_loading
    assert repository.snapshot() == []
    assert "could not load tasks" in caplog.text


def test_add_assigns_id_and_records_insert(repository: TaskRepository) -> None:
    task_id = repository.add_task(make_task())

    assert repository.get_task(task_id)["name"] == "Write API"
    assert repository.pending_commands == [
        {"kind": "insert", "task_id": task_id, "task": repository.get_task(task_id)}
    ]


def test_add_does_not_keep_callers_record(repository: TaskRepository) -> None:
    task = make_task()
    task_id = repository.add_task(task)

    task["responsible"].append("lee")

    assert task["id"] is None
    assert repository.get_task(task_id)["responsible"] == ["kim"]


def test_add_rejects_missing_responsible_without_side_effects(
    repository: TaskRepository,
) -> None:
    with pytest.raises(TaskValidationError) as error:
        repository.add_task(make_task(responsible=[]))

    assert error.value.problems == ["at least one responsible team member is required"]
    assert repository.get_all_tasks() == []
    assert repository.pending_commands == []


def test_add_reports_every_problem(repository: TaskRepository) -> None:
    with pytest.raises(TaskValidationError) as error:
        repository.add_task(
            make_task(
                name=" ",
                start_date=pendulum.date(2024, 2, 1),
                end_date=pendulum.date(2024, 1, 1),
                progress=101,
            )
        )

    assert error.value.problems == [
        "name is required",
        "start_date must not be after end_date",
        "progress must be between 0 and 100 (inclusive)",
    ]


def test_add_checks_team_roster(repository: TaskRepository) -> None:
    with pytest.raises(TaskValidationError) as error:
        repository.add_task(make_task(responsible=["kim", "max"]), ["kim", "lee"])

    assert error.value.problems == ["not on the team roster: max"]

    task_id = repository.add_task(make_task(responsible=["lee"]), ["kim", "lee"])
    assert repository.get_task(task_id)["responsible"] == ["lee"]


def test_add_accepts_only_required_fields(repository: TaskRepository) -> None:
    task_id = repository.add_task(
        {  # type: ignore[typeddict-item]
            "name": "Write API",
            "category": "development",
            "start_date": pendulum.date(2024, 1, 15),
            "end_date": pendulum.date(2024, 1, 20),
            "progress": 0,
            "responsible": ["kim"],
            "status": "not-started",
        }
    )

    task = repository.get_task(task_id)
    assert task["dependencies"] == []
    assert task["description"] is None
    assert task["is_milestone"] is False
    assert repository.pending_commands[0]["task"] == task


@pytest.mark.parametrize("responsible", [[""], ["  "], ["kim", " "]])
def test_add_rejects_blank_responsible(
    repository: TaskRepository, responsible: list[str]
) -> None:
    with pytest.raises(TaskValidationError) as error:
        repository.add_task(make_task(responsible=responsible))

    assert error.value.problems == ["responsible team members must not be blank"]
    assert repository.get_all_tasks() == []
    assert repository.pending_commands == []


@pytest.mark.parametrize(
    ("changes", "problem"),
    [
        ({"dependencies": None}, "dependencies must be a list of task ids"),
        ({"dependencies": [1]}, "dependencies must be a list of task ids"),
        ({"description": 5}, "description must be text"),
        ({"is_milestone": "yes"}, "is_milestone must be true or false"),
        ({"responsible": "kim"}, "responsible must be a list of names"),
    ],
)
def test_update_rejects_wrong_field_types(
    repository: TaskRepository, changes: dict, problem: str
) -> None:
    task_id = repository.add_task(make_task())
    before = repository.get_task(task_id)

    with pytest.raises(TaskValidationError) as error:
        repository.update_task(task_id, changes)

    assert error.value.problems == [problem]
    assert repository.get_task(task_id) == before
    assert len(repository.pending_commands) == 1


def test_add_normalizes_lists(repository: TaskRepository) -> None:
    task_id = repository.add_task(
        make_task(responsible=["kim", "kim", "lee"], description="  ")
    )

    task = repository.get_task(task_id)
    assert task["responsible"] == ["kim", "lee"]
    assert task["description"] is None


def test_update_merges_fields(repository: TaskRepository) -> None:
    task_id = repository.add_task(make_task())

    assert repository.update_task(task_id, {"name": "Write REST API", "progress": 20})

    task = repository.get_task(task_id)
    assert task["name"] == "Write REST API"
    assert task["progress"] == 20
    assert task["status"] == "not-started"
    assert [command["kind"] for command in repository.pending_commands] == [
        "insert",
        "update",
    ]


def test_update_of_missing_task_changes_nothing(repository: TaskRepository) -> None:
    repository.add_task(make_task())
    before = repository.get_all_tasks()

    assert not repository.update_task("missing", {"name": "x"})

    assert repository.get_all_tasks() == before
    assert len(repository.pending_commands) == 1


def test_update_rejects_invalid_result(repository: TaskRepository) -> None:
    task_id = repository.add_task(make_task())

    with pytest.raises(TaskValidationError):
        repository.update_task(task_id, {"end_date": pendulum.date(2024, 1, 1)})
    with pytest.raises(TaskValidationError):
        repository.update_task(task_id, {"owner": "kim"})

    assert repository.get_task(task_id)["end_date"] == pendulum.date(2024, 1, 20)
    assert len(repository.pending_commands) == 1


def test_update_drops_self_dependency(repository: TaskRepository) -> None:
    first_id = repository.add_task(make_task(name="Design"))
    second_id = repository.add_task(make_task(name="Build"))

    repository.update_task(second_id, {"dependencies": [first_id, second_id, first_id]})

    assert repository.get_task(second_id)["dependencies"] == [first_id]


@pytest.mark.parametrize(
    ("progress", "start_status", "expected_status"),
    [
        (100, "not-started", "completed"),
        (50, "not-started", "in-progress"),
        (50, "delayed", "in-progress"),
        (0, "delayed", "delayed"),
        (0, "in-progress", "in-progress"),
        (50, "completed", "in-progress"),
        (100, "delayed", "completed"),
    ],
)
def test_progress_slider_derives_status(
    repository: TaskRepository, progress: int, start_status: str, expected_status: str
) -> None:
    task_id = repository.add_task(make_task(status=start_status))

    assert repository.update_progress(task_id, progress)

    task = repository.get_task(task_id)
    assert task["progress"] == progress
    assert task["status"] == expected_status


def test_direct_status_change_keeps_progress(repository: TaskRepository) -> None:
    task_id = repository.add_task(make_task(progress=40, status="in-progress"))

    repository.update_task(task_id, {"status": "completed"})

    task = repository.get_task(task_id)
    assert task["status"] == "completed"
    assert task["progress"] == 40


def test_progress_of_missing_task(repository: TaskRepository) -> None:
    assert not repository.update_progress("missing", 100)
    assert repository.pending_commands == []


def test_delete(repository: TaskRepository) -> None:
    keep_id = repository.add_task(make_task(name="Keep"))
    drop_id = repository.add_task(make_task(name="Drop"))

    assert repository.delete_task(drop_id)
    assert not repository.delete_task(drop_id)

    assert [task["id"] for task in repository.get_all_tasks()] == [keep_id]
    assert repository.pending_commands[-1] == {
        "kind": "delete",
        "task_id": drop_id,
        "task": None,
    }


def test_flush_replays_commands_in_order(
    store: RecordingStore, repository: TaskRepository
) -> None:
    task_id = repository.add_task(make_task())
    repository.update_progress(task_id, 100)
    other_id = repository.add_task(make_task(name="Other"))
    repository.delete_task(other_id)

    assert repository.flush()

    assert store.calls == [
        ("insert", task_id),
        ("update", task_id),
        ("insert", other_id),
        ("delete", other_id),
    ]
    assert store.tasks[task_id]["status"] == "completed"
    assert other_id not in store.tasks
    assert not repository.is_dirty
    assert not repository.flush()


def test_failed_flush_is_logged_and_not_rolled_back(
    store: RecordingStore, repository: TaskRepository, caplog: pytest.LogCaptureFixture
) -> None:
    task_id = repository.add_task(make_task())
    store.fail_writes = True

    with caplog.at_level(logging.WARNING, logger="ganttline"):
        repository.flush()

    assert repository.get_task(task_id)["name"] == "Write API"
    assert store.tasks == {}
    assert "could not persist insert" in caplog.text


def test_getters_return_copies(repository: TaskRepository) -> None:
    task_id = repository.add_task(make_task())

    repository.get_task(task_id)["name"] = "changed"
    repository.get_all_tasks()[0]["responsible"].clear()

    task = repository.get_task(task_id)
    assert task["name"] == "Write API"
    assert task["responsible"] == ["kim"]
