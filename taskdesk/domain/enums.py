from __future__ import annotations

from enum import StrEnum


class Priority(StrEnum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @classmethod
    def choices(cls) -> list[Priority]:
        return [cls.LOW, cls.MEDIUM, cls.HIGH]


class StoreResult(StrEnum):
    ADDED = "added"
    UPDATED = "updated"
    DUPLICATE = "duplicate"
    UNCHANGED = "unchanged"


PRIORITY_RANK = {
    Priority.HIGH: 1,
    Priority.MEDIUM: 2,
    Priority.LOW: 3,
}

UNRECOGNIZED_PRIORITY_RANK = 4

PRIORITY_COLORS = {
    Priority.HIGH: "#FF0000",
    Priority.MEDIUM: "#FF8C00",
    Priority.LOW: "#008000",
}

DEFAULT_TEXT_COLOR = "#000000"


def priority_rank(priority: str) -> int:
    return PRIORITY_RANK.get(priority, UNRECOGNIZED_PRIORITY_RANK)


def priority_color(priority: str) -> str:
    return PRIORITY_COLORS.get(priority, DEFAULT_TEXT_COLOR)
