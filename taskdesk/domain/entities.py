from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from .enums import Priority

DATE_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True)
class Task:
    title: str
    due_date: str
    priority: Priority

    def parsed_due_date(self) -> Optional[date]:
        return parse_due_date(self.due_date)


def parse_due_date(value: str | None) -> Optional[date]:
    if not value:
        return None
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        return None


def format_due_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)
