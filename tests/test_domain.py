from __future__ import annotations

from datetime import date

from taskdesk.domain.entities import Task, format_due_date, parse_due_date
from taskdesk.domain.enums import (
    DEFAULT_TEXT_COLOR,
    Priority,
    UNRECOGNIZED_PRIORITY_RANK,
    priority_color,
    priority_rank,
)


def test_tasks_compare_by_all_fields() -> None:
    task = Task("Write report", "2024-05-01", Priority.HIGH)

    assert task == Task("Write report", "2024-05-01", Priority.HIGH)
    assert task != Task("Write report!", "2024-05-01", Priority.HIGH)
    assert task != Task("Write report", "2024-05-02", Priority.HIGH)
    assert task != Task("Write report", "2024-05-01", Priority.MEDIUM)
    assert len({task, Task("Write report", "2024-05-01", Priority.HIGH)}) == 1


def test_priority_matches_plain_strings() -> None:
    assert Task("a", "2024-01-01", Priority.LOW) == Task("a", "2024-01-01", "Low")
    assert Priority("Medium") is Priority.MEDIUM


def test_parse_due_date() -> None:
    assert parse_due_date("2024-04-20") == date(2024, 4, 20)
    assert parse_due_date("20/04/2024") is None
    assert parse_due_date("2024-02-30") is None
    assert parse_due_date("2024-5-1") == date(2024, 5, 1)
    assert parse_due_date("") is None
    assert Task("a", "garbage", Priority.LOW).parsed_due_date() is None
    assert format_due_date(date(2024, 4, 5)) == "2024-04-05"


def test_priority_lookup_tables() -> None:
    assert priority_rank(Priority.HIGH) < priority_rank(Priority.MEDIUM) < priority_rank(Priority.LOW)
    assert priority_rank("Urgent") == UNRECOGNIZED_PRIORITY_RANK
    assert priority_color(Priority.HIGH) == "#FF0000"
    assert priority_color("Medium") == "#FF8C00"
    assert priority_color(Priority.LOW) == "#008000"
    assert priority_color("Urgent") == DEFAULT_TEXT_COLOR
    assert Priority.choices() == [Priority.LOW, Priority.MEDIUM, Priority.HIGH]
