from __future__ import annotations

from PySide6.QtCore import QDate
from PySide6.QtWidgets import (
    QComboBox,
    QDateEdit,
    QDialog,
    QDialogButtonBox,
    QLabel,
    QLineEdit,
    QVBoxLayout,
)

from taskdesk.domain.entities import Task, format_due_date
from taskdesk.domain.enums import Priority

DATE_DISPLAY_FORMAT = "yyyy-MM-dd"


class TaskDialog(QDialog):
    """Modal form used for both adding and updating a task."""

    def __init__(self, task: Task | None = None, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Add Task" if task is None else "Update Task")
        self.setObjectName("TaskDialog")
        self.setMinimumWidth(280)

        self.title_input = QLineEdit(task.title if task else "")
        self.title_input.setPlaceholderText("Task title")

        self.due_input = QDateEdit()
        self.due_input.setCalendarPopup(True)
        self.due_input.setDisplayFormat(DATE_DISPLAY_FORMAT)
        self.due_input.setDate(QDate.currentDate())
        due_date = task.parsed_due_date() if task else None
        if due_date:
            self.due_input.setDate(QDate(due_date.year, due_date.month, due_date.day))

        self.priority_combo = QComboBox()
        for priority in Priority.choices():
            self.priority_combo.addItem(priority.value, priority.value)
        if task is not None:
            priority_index = self.priority_combo.findData(str(task.priority))
            if priority_index >= 0:
                self.priority_combo.setCurrentIndex(priority_index)

        buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)

        layout = QVBoxLayout(self)
        layout.addWidget(QLabel("Title:"))
        layout.addWidget(self.title_input)
        layout.addWidget(QLabel("Due Date:"))
        layout.addWidget(self.due_input)
        layout.addWidget(QLabel("Priority:"))
        layout.addWidget(self.priority_combo)
        layout.addWidget(buttons)

    def task(self) -> Task:
        return Task(
            title=self.title_input.text().strip(),
            due_date=format_due_date(self.due_input.date().toPython()),
            priority=Priority(self.priority_combo.currentData()),
        )

    @classmethod
    def ask(cls, parent=None, task: Task | None = None) -> Task | None:
        dialog = cls(task, parent)
        if dialog.exec() != QDialog.Accepted:
            return None
        return dialog.task()
