from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from datetime import datetime, time

from taskdesk.domain.entities import Task
from taskdesk.domain.enums import StoreResult, priority_rank

logger = logging.getLogger(__name__)


class TaskStore:
    """Ordered in-memory collection of tasks.

    Duplicates are rejected by ``add`` and ``update`` with a ``StoreResult``
    instead of an exception; the caller decides how to report them.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = []
        for task in tasks or ():
            if task not in self._tasks:
                self._tasks.append(task)
        self.sort_by_due_date()

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def __contains__(self, task: object) -> bool:
        return task in self._tasks

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def get(self, index: int) -> Task:
        return self._tasks[index]

    def contains(self, task: Task) -> bool:
        return task in self._tasks

    def is_duplicate(self, task: Task, ignore_index: int | None = None) -> bool:
        return any(
            existing == task
            for index, existing in enumerate(self._tasks)
            if index != ignore_index
        )

    def add(self, task: Task) -> StoreResult:
        if self.contains(task):
            logger.info("Rejected duplicate task %r", task.title)
            return StoreResult.DUPLICATE
        self._tasks.append(task)
        self.sort_by_due_date()
        logger.debug("Added task %r due %s", task.title, task.due_date)
        return StoreResult.ADDED

    def update(self, index: int, task: Task) -> StoreResult:
        current = self._tasks[index]
        if task == current:
            logger.info("Task %r not changed", task.title)
            return StoreResult.UNCHANGED
        if self.is_duplicate(task, ignore_index=index):
            logger.info("Rejected update of %r: duplicate of %r", current.title, task.title)
            return StoreResult.DUPLICATE
        self._tasks[index] = task
        logger.debug("Updated task at %d: %r -> %r", index, current.title, task.title)
        return StoreResult.UPDATED

    def remove(self, index: int) -> Task:
        task = self._tasks.pop(index)
        logger.debug("Removed task %r", task.title)
        return task

    def sort_by_due_date(self) -> None:
        now = datetime.now()

        def _key(task: Task) -> datetime:
            parsed = task.parsed_due_date()
            if parsed is None:
                logger.debug("Unparseable due date %r, sorting %r as now", task.due_date, task.title)
                return now
            return datetime.combine(parsed, time.min)

        self._tasks.sort(key=_key)

    def sort_by_priority(self) -> None:
        self._tasks.sort(key=lambda task: priority_rank(task.priority))
