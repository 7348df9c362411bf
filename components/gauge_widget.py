# components/gauge_widget.py
from __future__ import annotations

from PySide6.QtCore import QEvent, QPointF, QRectF, Qt, Signal
from PySide6.QtGui import QPainter
from PySide6.QtWidgets import QSizePolicy, QWidget

from components.gauge_control import GaugeControl, PointerEvent
from components.qt_backend import QPainterBackend
from components.scaling import CanvasInfo


class GaugeWidget(QWidget):
    """
    Arc gauge with a draggable handle.

    Thin Qt host around GaugeControl:
    - mouse / touch input becomes PointerEvents in device pixels
    - paintEvent runs the control's paint pass through a QPainterBackend
    - progressChanged mirrors the control's progress_changed
    """

    progressChanged = Signal(float)

    def __init__(self, progress: float = 0.0, parent: QWidget | None = None):
        super().__init__(parent)
        self.setMinimumSize(120, 120)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setAttribute(Qt.WidgetAttribute.WA_AcceptTouchEvents, True)

        self.control = GaugeControl(invalidate=self.update, parent=self)
        self.control.progress_changed.connect(self.progressChanged)
        self.control.progress = progress

    def sizeHint(self):
        return self.minimumSize() * 2

    # ---------------- Configuration ----------------

    def progress(self) -> float:
        return self.control.progress

    def set_progress(self, progress: float):
        self.control.progress = progress

    def set_padding(self, padding):
        self.control.padding = padding

    def set_gauge_stroke_width(self, width: float):
        self.control.gauge_stroke_width = width

    def set_handle_diameter(self, diameter: float):
        self.control.handle_diameter = diameter

    def set_foreground_colors(self, colors):
        self.control.foreground_colors = colors

    def set_background_colors(self, colors):
        self.control.background_colors = colors

    def set_handle_color(self, color):
        self.control.handle_color = color

    # ---------------- Input ----------------

    def _to_canvas(self, pos) -> QPointF:
        dpr = float(self.devicePixelRatioF())
        return QPointF(pos.x() * dpr, pos.y() * dpr)

    def mousePressEvent(self, e):
        if e.button() == Qt.MouseButton.LeftButton:
            self.control.on_pointer_event(PointerEvent(True, self._to_canvas(e.position())))
        e.accept()

    def mouseMoveEvent(self, e):
        if e.buttons() & Qt.MouseButton.LeftButton:
            self.control.on_pointer_event(PointerEvent(True, self._to_canvas(e.position())))
        e.accept()

    def mouseReleaseEvent(self, e):
        if e.button() == Qt.MouseButton.LeftButton:
            self.control.on_pointer_event(PointerEvent(False, self._to_canvas(e.position())))
        e.accept()

    def leaveEvent(self, e):
        if self.control.contact_point is not None:
            self.control.on_pointer_event(PointerEvent(False, QPointF()))
        super().leaveEvent(e)

    def event(self, e):
        if e.type() in (QEvent.Type.TouchBegin, QEvent.Type.TouchUpdate, QEvent.Type.TouchEnd, QEvent.Type.TouchCancel):
            points = e.points()
            in_contact = e.type() in (QEvent.Type.TouchBegin, QEvent.Type.TouchUpdate) and bool(points)
            location = self._to_canvas(points[0].position()) if points else QPointF()
            self.control.on_pointer_event(PointerEvent(in_contact, location))
            e.accept()
            return True
        return super().event(e)

    # ---------------- Paint ----------------

    def paintEvent(self, event):
        canvas = CanvasInfo.from_widget(self)

        painter = QPainter(self)
        # The control works in device pixels.
        dpr = float(self.devicePixelRatioF())
        painter.scale(1.0 / dpr, 1.0 / dpr)

        backend = QPainterBackend(
            painter,
            QRectF(0, 0, canvas.physical_width, canvas.physical_height),
            clear_color=self.palette().color(self.backgroundRole()),
        )
        self.control.paint(canvas, backend)
        painter.end()
