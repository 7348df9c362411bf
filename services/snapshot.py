# services/snapshot.py
from __future__ import annotations

import logging
import sys

from PySide6.QtCore import QObject, Signal, Slot

from components.gauge_control import GaugeControl
from components.pil_backend import PillowBackend
from components.scaling import CanvasInfo


def render_png(control: GaugeControl, width: int, height: int, scale: float = 1.0) -> bytes:
    """
    Paints the control onto a width x height (device independent) canvas
    at the given pixel scale and returns PNG bytes.
    """
    canvas = CanvasInfo.from_size(width, height, scale)
    backend = PillowBackend(int(canvas.physical_width), int(canvas.physical_height))
    if control.paint(canvas, backend) is None:
        logging.warning(f"Gauge snapshot {width}x{height} is empty.")
    return backend.to_png()


class SnapshotWorker(QObject):
    finished = Signal(bytes)
    error = Signal(str)

    def __init__(self, control: GaugeControl, width: int = 300, height: int = 300, scale: float = 1.0):
        super().__init__()
        self.control = control
        self.width = width
        self.height = height
        self.scale = scale

    @Slot()
    def run(self):
        try:
            self.finished.emit(render_png(self.control, self.width, self.height, self.scale))
        except Exception as e:
            self.error.emit(f"Gauge snapshot failed: {e}")


def main(argv=None):
    from services.settings import load_settings

    args = list(sys.argv[1:] if argv is None else argv)
    out_path = args[0] if args else "gauge.png"

    settings = load_settings()
    logging.basicConfig(level=settings.effective_log_level, format="%(asctime)s - %(levelname)s - %(message)s")

    control = GaugeControl()
    settings.apply(control)
    if len(args) > 1:
        try:
            control.progress = float(args[1])
        except ValueError as e:
            logging.error(f"Invalid progress {args[1]!r}: {e}")
            raise SystemExit(2)

    with open(out_path, "wb") as f:
        f.write(render_png(control, 300, 300))
    logging.info(f"Gauge snapshot written to {out_path} (progress {control.progress:.2f})")


if __name__ == "__main__":
    main()
