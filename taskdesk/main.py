from __future__ import annotations

import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication, QMessageBox, QStyleFactory

from taskdesk.config import PROJECT_ROOT, load_settings
from taskdesk.infra.logging import setup_logging
from taskdesk.services.task_store import TaskStore
from taskdesk.ui.main_window import MainWindow

logger = logging.getLogger(__name__)


def _find_qss_path() -> Path | None:
    candidates = [
        Path(__file__).resolve().parent / "ui" / "styles.qss",
        PROJECT_ROOT / "taskdesk" / "ui" / "styles.qss",
    ]

    if getattr(sys, "frozen", False):
        meipass = getattr(sys, "_MEIPASS", None)
        if meipass:
            candidates.append(Path(meipass) / "taskdesk" / "ui" / "styles.qss")

    for path in candidates:
        if path.exists():
            return path
    return None


def load_styles(app: QApplication) -> None:
    qss_path = _find_qss_path()
    if not qss_path:
        return
    app.setStyleSheet(qss_path.read_text(encoding="utf-8"))


def main() -> None:
    try:
        settings = load_settings()
    except ValueError as exc:
        logging.basicConfig()
        logger.error("Invalid configuration: %s", exc)
        app = QApplication(sys.argv)
        QMessageBox.critical(None, "Configuration error", str(exc))
        return

    setup_logging(settings)

    app = QApplication(sys.argv)
    app.setStyle(QStyleFactory.create("Fusion"))
    load_styles(app)

    window = MainWindow(TaskStore(), settings)
    window.show()
    window.center_on_screen()
    logger.info("Task Manager started")
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
