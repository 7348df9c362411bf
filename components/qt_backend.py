# components/qt_backend.py
from __future__ import annotations

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QConicalGradient, QPainter, QPainterPath, QPen

from components.paint import CAP_ROUND, PaintBackend, SolidPaint, SweepGradientPaint

# One stop per degree is enough to hide the sampling of the sweep gradient.
_GRADIENT_STOPS = 360

_CAPS = {
    CAP_ROUND: Qt.PenCapStyle.RoundCap,
    "butt": Qt.PenCapStyle.FlatCap,
    "square": Qt.PenCapStyle.SquareCap,
}


def conical_gradient(paint: SweepGradientPaint) -> QConicalGradient:
    """
    QConicalGradient runs counter-clockwise on screen, canvas angles run clockwise,
    so the stop at position t shows the canvas angle -360 * t.
    """
    grad = QConicalGradient(paint.center, 0)
    for i in range(_GRADIENT_STOPS + 1):
        t = i / _GRADIENT_STOPS
        grad.setColorAt(t, paint.color_at(-360.0 * t))
    return grad


def brush_for(paint) -> QBrush:
    if isinstance(paint, SweepGradientPaint):
        return QBrush(conical_gradient(paint))
    return QBrush(paint.color)


class QPainterBackend(PaintBackend):
    """
    Draws gauge commands with an active QPainter.

    Qt measures arc angles counter-clockwise, so canvas angles are negated.
    """

    def __init__(self, painter: QPainter, rect: QRectF, clear_color: QColor | None = None):
        self.painter = painter
        self.rect = QRectF(rect)
        self.clear_color = QColor(Qt.GlobalColor.transparent) if clear_color is None else QColor(clear_color)
        self.painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)

    def clear(self) -> None:
        self.painter.save()
        self.painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Source)
        self.painter.fillRect(self.rect, self.clear_color)
        self.painter.restore()

    def stroke_arc(self, bounds, start_angle, sweep_angle, stroke_width, cap, paint) -> None:
        path = QPainterPath()
        path.arcMoveTo(bounds, -start_angle)
        path.arcTo(bounds, -start_angle, -sweep_angle)

        pen = QPen(brush_for(paint), stroke_width, Qt.PenStyle.SolidLine, _CAPS.get(cap, Qt.PenCapStyle.RoundCap))
        self.painter.save()
        self.painter.setPen(pen)
        self.painter.setBrush(Qt.BrushStyle.NoBrush)
        self.painter.drawPath(path)
        self.painter.restore()

    def fill_circle(self, center: QPointF, radius: float, paint: SolidPaint) -> None:
        self.painter.save()
        if paint.overwrite:
            self.painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Source)
        self.painter.setPen(Qt.PenStyle.NoPen)
        self.painter.setBrush(QBrush(paint.color))
        self.painter.drawEllipse(center, radius, radius)
        self.painter.restore()
