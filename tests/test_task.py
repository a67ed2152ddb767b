# tests/test_task.py

from __future__ import annotations

import pytest

from todolist import Task, TaskCategory


def test_constructor_stores_fields() -> None:
    task = Task(1, TaskCategory.WORK, "Finish report")

    assert task.id == 1
    assert task.category is TaskCategory.WORK
    assert task.description == "Finish report"


def test_category_defaults_to_uncategorized() -> None:
    assert Task(3).category is TaskCategory.UNCATEGORIZED
    assert Task(4, None, "x").category is TaskCategory.UNCATEGORIZED


def test_id_is_read_only() -> None:
    task = Task(1, TaskCategory.WORK, "Finish report")
    with pytest.raises(AttributeError):
        task.id = 2  # type: ignore[misc]


def test_setters_update_category_and_description() -> None:
    task = Task(1, TaskCategory.WORK, "Finish report")
    task.category = TaskCategory.PERSONAL
    task.description = "Go to gym"

    assert task.category is TaskCategory.PERSONAL
    assert task.description == "Go to gym"


def test_to_csv() -> None:
    assert Task(1, TaskCategory.ERRAND, "Buy milk").to_csv() == "1,ERRAND,Buy milk"


def test_to_csv_folds_line_breaks() -> None:
    task = Task(7, TaskCategory.OTHER, "first line\nsecond line")
    assert task.to_csv() == "7,OTHER,first line second line"


def test_from_csv() -> None:
    task = Task.from_csv("5,HEALTH,Go jogging\n")

    assert task.id == 5
    assert task.category is TaskCategory.HEALTH
    assert task.description == "Go jogging"


def test_from_csv_keeps_commas_in_description() -> None:
    task = Task.from_csv("1,OTHER,Buy milk, eggs, and bread")
    assert task.description == "Buy milk, eggs, and bread"


def test_from_csv_allows_empty_description() -> None:
    task = Task.from_csv("2,WORK,")
    assert task.description == ""


@pytest.mark.parametrize(
    "line",
    [
        "invalid,input",
        "abc,WORK,Something",
        "1,NOT_A_CATEGORY,Something",
    ],
)
def test_from_csv_rejects_malformed_lines(line: str) -> None:
    with pytest.raises(ValueError):
        Task.from_csv(line)


def test_category_parse() -> None:
    assert TaskCategory.parse(" school ") is TaskCategory.SCHOOL
    assert TaskCategory.parse(TaskCategory.WORK) is TaskCategory.WORK
    assert TaskCategory.parse("") is TaskCategory.UNCATEGORIZED
    assert TaskCategory.parse(None) is TaskCategory.UNCATEGORIZED
    with pytest.raises(ValueError):
        TaskCategory.parse("holiday")


def test_equality_compares_all_fields() -> None:
    assert Task(1, TaskCategory.WORK, "a") == Task(1, TaskCategory.WORK, "a")
    assert Task(1, TaskCategory.WORK, "a") != Task(1, TaskCategory.WORK, "b")
    assert Task(1, TaskCategory.WORK, "a") != Task(2, TaskCategory.WORK, "a")
