from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMenuBar,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from taskdesk.config import Settings
from taskdesk.domain.enums import StoreResult
from taskdesk.services.task_store import TaskStore

from .dialogs import TaskDialog
from .widgets import DELETE_COLUMN, TaskTable

SORT_MENU_TITLE = "✨ Sort ✨"


class MainWindow(QWidget):
    def __init__(self, store: TaskStore, settings: Settings, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Task Manager")
        self.resize(settings.window_width, settings.window_height)

        self.store = store

        layout = QVBoxLayout(self)
        layout.setMenuBar(self._build_menu_bar())

        info = QLabel("Click task to alter task details.")
        info.setAlignment(Qt.AlignCenter)
        info_font = QFont(info.font())
        info_font.setItalic(True)
        info.setFont(info_font)

        self.table = TaskTable()
        self.table.cellClicked.connect(self.on_cell_clicked)

        add_button = QPushButton("+ Add Task")
        add_button.setToolTip("Add Task")
        add_button.clicked.connect(self.add_task)

        bottom = QHBoxLayout()
        bottom.addStretch()
        bottom.addWidget(add_button)
        bottom.addStretch()

        layout.addWidget(info)
        layout.addWidget(self.table, 1)
        layout.addLayout(bottom)

        self.store.sort_by_due_date()
        self.refresh_tasks()

    def _build_menu_bar(self) -> QMenuBar:
        menu_bar = QMenuBar(self)
        sort_menu = menu_bar.addMenu(SORT_MENU_TITLE)
        sort_menu.addAction("By Due Date", self.sort_by_due_date)
        sort_menu.addAction("By Priority", self.sort_by_priority)
        return menu_bar

    def center_on_screen(self) -> None:
        screen = self.screen()
        if screen is None:
            return
        frame = self.frameGeometry()
        frame.moveCenter(screen.availableGeometry().center())
        self.move(frame.topLeft())

    def refresh_tasks(self) -> None:
        self.table.set_tasks(self.store)

    def on_cell_clicked(self, row: int, column: int) -> None:
        if row < 0 or row >= len(self.store):
            return
        if column == DELETE_COLUMN:
            self.delete_task(row)
        else:
            self.edit_task(row)

    def add_task(self) -> None:
        task = TaskDialog.ask(self)
        if task is None:
            return
        if self.store.add(task) == StoreResult.DUPLICATE:
            QMessageBox.information(self, "Task Manager", "Duplicate task. Cannot add.")
            return
        self.refresh_tasks()

    def edit_task(self, row: int) -> None:
        updated = TaskDialog.ask(self, self.store.get(row))
        if updated is None:
            return
        result = self.store.update(row, updated)
        if result == StoreResult.UNCHANGED:
            QMessageBox.information(self, "Task Manager", "Task details not changed.")
        elif result == StoreResult.DUPLICATE:
            QMessageBox.information(self, "Task Manager", "Duplicate task. Update aborted.")
        else:
            self.refresh_tasks()

    def delete_task(self, row: int) -> None:
        confirm = QMessageBox.question(
            self,
            "Confirm",
            "Delete this task?",
            QMessageBox.Yes | QMessageBox.No,
        )
        if confirm != QMessageBox.Yes:
            return
        self.store.remove(row)
        self.refresh_tasks()

    def sort_by_due_date(self) -> None:
        self.store.sort_by_due_date()
        self.refresh_tasks()

    def sort_by_priority(self) -> None:
        self.store.sort_by_priority()
        self.refresh_tasks()
