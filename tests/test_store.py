# SPDX-License-Identifier: MIT

from pathlib import Path

import pendulum
import pytest

from conftest import make_task
from ganttline.errors import StoreError
from ganttline.repository.store import YamlTaskStore
from ganttline.repository.task import TaskRepository


def test_missing_directory_loads_nothing(tmp_path: Path) -> None:
    assert YamlTaskStore(tmp_path / "tasks").load_all() == []


def test_written_tasks_load_back(tmp_path: Path) -> None:
    store = YamlTaskStore(tmp_path / "tasks")
    task = make_task(
        id="a1",
        name="Café launch",
        dependencies=["b2"],
        description="first draft",
        is_milestone=True,
    )

    store.insert(task)

    assert (tmp_path / "tasks" / "a1.yaml").is_file()
    assert store.load_all() == [task]


def test_tasks_load_sorted_by_start(tmp_path: Path) -> None:
    store = YamlTaskStore(tmp_path)
    store.insert(
        make_task(id="b", start_date=pendulum.date(2024, 3, 1),
                  end_date=pendulum.date(2024, 3, 2))
    )
    store.insert(
        make_task(id="c", start_date=pendulum.date(2024, 1, 1),
                  end_date=pendulum.date(2024, 1, 2))
    )
    store.insert(
        make_task(id="a", start_date=pendulum.date(2024, 3, 1),
                  end_date=pendulum.date(2024, 3, 5))
    )

    assert [task["id"] for task in store.load_all()] == ["c", "a", "b"]


def test_update_and_delete(tmp_path: Path) -> None:
    store = YamlTaskStore(tmp_path)
    task = make_task(id="a")
    store.insert(task)

    task["progress"] = 60
    store.update(task)
    assert store.load_all()[0]["progress"] == 60

    store.delete("a")
    store.delete("a")
    assert store.load_all() == []


def test_hand_edited_file_with_plain_dates(tmp_path: Path) -> None:
    (tmp_path / "x.yaml").write_text(
        "id: x\n"
        "name: Contract review\n"
        "category: legal\n"
        "start_date: 2024-05-01\n"
        "end_date: 2024-05-03\n"
        "progress: 0\n"
        "responsible: [lee]\n"
        "status: not-started\n"
    )
    (tmp_path / ".gitkeep").touch()

    [task] = YamlTaskStore(tmp_path).load_all()

    assert task["start_date"] == pendulum.date(2024, 5, 1)
    assert task["dependencies"] == []
    assert task["description"] is None
    assert task["is_milestone"] is False


def test_broken_file_raises_store_error(tmp_path: Path) -> None:
    (tmp_path / "bad.yaml").write_text("name: [unclosed\n")

    with pytest.raises(StoreError):
        YamlTaskStore(tmp_path).load_all()


def test_repository_round_trip_through_yaml(tmp_path: Path) -> None:
    repository = TaskRepository(YamlTaskStore(tmp_path))
    task_id = repository.add_task(make_task())
    repository.update_progress(task_id, 100)
    repository.flush()

    reloaded = TaskRepository(YamlTaskStore(tmp_path))

    assert reloaded.get_all_tasks() == repository.get_all_tasks()
    assert reloaded.get_task(task_id)["status"] == "completed"
