from __future__ import annotations

from collections.abc import Iterable

from PySide6.QtCore import Qt
from PySide6.QtGui import QBrush, QColor
from PySide6.QtWidgets import (
    QAbstractItemView,
    QHeaderView,
    QStyle,
    QTableWidget,
    QTableWidgetItem,
)

from taskdesk.domain.entities import Task
from taskdesk.domain.enums import DEFAULT_TEXT_COLOR, priority_color

COLUMN_HEADERS = ["Title", "Due Date", "Priority", ""]
TITLE_COLUMN = 0
DUE_DATE_COLUMN = 1
PRIORITY_COLUMN = 2
DELETE_COLUMN = 3

ROW_HEIGHT = 25
DELETE_COLUMN_WIDTH = 40


class TaskTable(QTableWidget):
    """Read-only table of tasks with a trailing delete column."""

    def __init__(self, parent=None):
        super().__init__(0, len(COLUMN_HEADERS), parent)
        self.setObjectName("TaskTable")
        self.setHorizontalHeaderLabels(COLUMN_HEADERS)
        self.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.setSelectionMode(QAbstractItemView.SingleSelection)
        self.verticalHeader().setVisible(False)
        self.verticalHeader().setDefaultSectionSize(ROW_HEIGHT)

        header = self.horizontalHeader()
        header.setDefaultAlignment(Qt.AlignCenter)
        header.setSectionResizeMode(TITLE_COLUMN, QHeaderView.Stretch)
        header.setSectionResizeMode(DUE_DATE_COLUMN, QHeaderView.Stretch)
        header.setSectionResizeMode(PRIORITY_COLUMN, QHeaderView.Stretch)
        header.setSectionResizeMode(DELETE_COLUMN, QHeaderView.Fixed)
        self.setColumnWidth(DELETE_COLUMN, DELETE_COLUMN_WIDTH)

        self._delete_icon = self.style().standardIcon(QStyle.SP_TrashIcon)

    def set_tasks(self, tasks: Iterable[Task]) -> None:
        self.clearContents()
        rows = list(tasks)
        self.setRowCount(len(rows))
        for row, task in enumerate(rows):
            self.setItem(row, TITLE_COLUMN, self._text_item(task.title))
            self.setItem(row, DUE_DATE_COLUMN, self._text_item(task.due_date))
            self.setItem(
                row,
                PRIORITY_COLUMN,
                self._text_item(str(task.priority), priority_color(task.priority)),
            )
            delete_item = QTableWidgetItem(self._delete_icon, "")
            delete_item.setToolTip("Delete task")
            delete_item.setTextAlignment(Qt.AlignCenter)
            self.setItem(row, DELETE_COLUMN, delete_item)

    @staticmethod
    def _text_item(text: str, color: str = DEFAULT_TEXT_COLOR) -> QTableWidgetItem:
        item = QTableWidgetItem(text)
        item.setTextAlignment(Qt.AlignCenter)
        item.setForeground(QBrush(QColor(color)))
        return item
