# SPDX-License-Identifier: MIT

from conftest import make_task
from ganttline.service.grouping import (
    filter_tasks_by_category,
    group_tasks_by_category,
    resolve_dependency_names,
)


def test_groups_keep_first_seen_category_order() -> None:
    tasks = [
        make_task(id="a", name="Launch post", category="marketing"),
        make_task(id="b", name="Write API", category="development"),
        make_task(id="c", name="Press kit", category="marketing"),
        make_task(id="d", name="Contract", category="legal"),
    ]

    grouped = group_tasks_by_category(tasks)

    assert list(grouped) == ["marketing", "development", "legal"]
    assert [task["id"] for task in grouped["marketing"]] == ["a", "c"]
    assert [task["id"] for task in grouped["development"]] == ["b"]


def test_grouping_nothing_gives_empty_mapping() -> None:
    assert group_tasks_by_category([]) == {}


def test_filter_by_category() -> None:
    tasks = [
        make_task(id="a", category="marketing"),
        make_task(id="b", category="development"),
    ]

    assert [task["id"] for task in filter_tasks_by_category(tasks, "development")] == ["b"]
    assert filter_tasks_by_category(tasks, "operation") == []
    assert filter_tasks_by_category(tasks, None) == tasks


def test_dependency_names_skip_deleted_tasks() -> None:
    design = make_task(id="a", name="Design")
    build = make_task(id="b", name="Build", dependencies=["a", "gone"])

    assert resolve_dependency_names(build, [design, build]) == ["Design"]


def test_groups_hold_every_task_exactly_once() -> None:
    tasks = [
        make_task(id=str(index), category=category)
        for index, category in enumerate(
            ["legal", "development", "legal", "operation", "marketing", "development"]
        )
    ]

    grouped = group_tasks_by_category(tasks)

    grouped_ids = [task["id"] for group in grouped.values() for task in group]
    assert sorted(grouped_ids) == sorted(task["id"] for task in tasks)
    assert len(grouped_ids) == len(set(grouped_ids))
    for category, group in grouped.items():
        assert all(task["category"] == category for task in group)
