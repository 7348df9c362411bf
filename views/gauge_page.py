# views/gauge_page.py
from __future__ import annotations

import logging

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import (
    QFileDialog, QHBoxLayout, QLabel, QPushButton, QSlider, QVBoxLayout, QWidget
)

from components.gauge_widget import GaugeWidget
from services.settings import GaugeSettings, load_settings
from services.snapshot import SnapshotWorker

SLIDER_STEPS = 1000


class GaugePage(QWidget):
    """
    Sample page: the gauge, a percentage readout and a slider.
    Slider and gauge stay in sync both ways.
    """

    def __init__(self, settings: GaugeSettings | None = None, parent: QWidget | None = None):
        super().__init__(parent)
        self.setObjectName("GaugePage")
        self._syncing = False

        self.gauge = GaugeWidget()
        (settings or load_settings()).apply(self.gauge.control)

        self.readout = QLabel()
        self.readout.setObjectName("GaugeReadout")
        self.readout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.slider = QSlider(Qt.Orientation.Horizontal)
        self.slider.setRange(0, SLIDER_STEPS)

        self.export_button = QPushButton("Export PNG")

        bottom = QHBoxLayout()
        bottom.addWidget(self.slider, 1)
        bottom.addWidget(self.export_button, 0)

        root = QVBoxLayout(self)
        root.setContentsMargins(16, 16, 16, 16)
        root.addWidget(self.gauge, 1)
        root.addWidget(self.readout)
        root.addLayout(bottom)

        self.gauge.progressChanged.connect(self._on_gauge_progress)
        self.slider.valueChanged.connect(self._on_slider)
        self.export_button.clicked.connect(self._export)

        self._on_gauge_progress(self.gauge.progress())

    def on_enter(self):
        self.gauge.update()

    @Slot(float)
    def _on_gauge_progress(self, progress: float):
        self.readout.setText(f"{progress * 100:.0f}%")
        self._syncing = True
        try:
            self.slider.setValue(round(progress * SLIDER_STEPS))
        finally:
            self._syncing = False

    @Slot(int)
    def _on_slider(self, value: int):
        if self._syncing:
            return
        self.gauge.set_progress(value / SLIDER_STEPS)

    def export_png(self, path: str) -> None:
        worker = SnapshotWorker(self.gauge.control, max(1, self.gauge.width()), max(1, self.gauge.height()))
        worker.finished.connect(lambda data: self._write(path, data))
        worker.error.connect(lambda msg: logging.error(msg))
        worker.run()

    def _write(self, path: str, data: bytes):
        try:
            with open(path, "wb") as f:
                f.write(data)
        except OSError as e:
            logging.error(f"Gauge export to {path} failed: {e}")
            return
        logging.info(f"Gauge exported to {path}")

    @Slot()
    def _export(self):
        path, _ = QFileDialog.getSaveFileName(self, "Export gauge", "gauge.png", "PNG images (*.png)")
        if path:
            self.export_png(path)
