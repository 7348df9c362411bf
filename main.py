import logging
import sys

from PySide6.QtCore import Slot, Qt
from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication, QHBoxLayout, QListWidget, QMainWindow, QStackedWidget, QWidget

from services.settings import load_settings
from views.gauge_page import GaugePage


class MainWindow(QMainWindow):
    """Side menu of control pages; the first page is shown on start."""

    # (Menu title, View Class)
    PAGES = [
        ("Gauge", GaugePage),
    ]

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Cross Controls")
        self.setGeometry(100, 100, 900, 640)

        self.menu = QListWidget()
        self.menu.setObjectName("Menu")
        self.menu.setFixedWidth(180)

        self.stacked_widget = QStackedWidget()
        for title, view_class in self.PAGES:
            self.menu.addItem(title)
            self.stacked_widget.addWidget(view_class())

        central = QWidget()
        layout = QHBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        layout.addWidget(self.menu)
        layout.addWidget(self.stacked_widget, 1)
        self.setCentralWidget(central)

        self.menu.currentRowChanged.connect(self.switch_page)
        self.menu.setCurrentRow(0)

    @Slot(int)
    def switch_page(self, idx: int):
        if idx < 0:
            return
        current = self.stacked_widget.currentWidget()
        on_leave = getattr(current, "on_leave", None)
        if on_leave is not None and self.stacked_widget.currentIndex() != idx:
            on_leave()

        self.stacked_widget.setCurrentIndex(idx)

        on_enter = getattr(self.stacked_widget.currentWidget(), "on_enter", None)
        if on_enter is not None:
            try:
                on_enter()
            except Exception:
                logging.exception(f"Entering page {self.PAGES[idx][0]!r} failed")


def setup_app_style() -> QPalette:
    QApplication.setStyle("Fusion")
    palette = QPalette()
    palette.setColor(QPalette.ColorRole.Window, QColor(38, 44, 58))
    palette.setColor(QPalette.ColorRole.WindowText, Qt.GlobalColor.white)
    palette.setColor(QPalette.ColorRole.Base, QColor(30, 34, 45))
    palette.setColor(QPalette.ColorRole.Text, Qt.GlobalColor.white)
    palette.setColor(QPalette.ColorRole.Button, QColor(48, 56, 72))
    palette.setColor(QPalette.ColorRole.ButtonText, Qt.GlobalColor.white)
    palette.setColor(QPalette.ColorRole.Highlight, QColor(42, 130, 218))
    palette.setColor(QPalette.ColorRole.HighlightedText, Qt.GlobalColor.white)
    return palette


if __name__ == "__main__":
    settings = load_settings()
    logging.basicConfig(level=settings.effective_log_level, format="%(asctime)s - %(levelname)s - %(message)s")

    app = QApplication(sys.argv)
    app.setPalette(setup_app_style())

    window = MainWindow()
    window.show()

    sys.exit(app.exec())
