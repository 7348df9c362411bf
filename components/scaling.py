# components/scaling.py
from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtCore import QMarginsF
from PySide6.QtWidgets import QWidget

from components.errors import ZeroExtentError


@dataclass(frozen=True)
class CanvasInfo:
    """
    Size of a drawing surface.

    logical_* is the device independent size reported by the UI toolkit,
    physical_* the size of the pixel buffer that is actually painted.
    """
    logical_width: float
    logical_height: float
    physical_width: float
    physical_height: float

    @classmethod
    def from_size(cls, width: float, height: float, scale: float = 1.0) -> "CanvasInfo":
        return cls(width, height, width * scale, height * scale)

    @classmethod
    def from_widget(cls, widget: QWidget) -> "CanvasInfo":
        dpr = float(widget.devicePixelRatioF())
        return cls.from_size(widget.width(), widget.height(), dpr)

    @property
    def scale(self) -> float:
        if self.logical_width <= 0:
            raise ZeroExtentError(f"logical width is {self.logical_width}")
        return self.physical_width / self.logical_width

    @property
    def is_empty(self) -> bool:
        return (
            self.logical_width <= 0
            or self.logical_height <= 0
            or self.physical_width <= 0
            or self.physical_height <= 0
        )


def to_pixel_size(canvas: CanvasInfo, independent_size: float) -> float:
    """
    Converts a device independent size to the equivalent in device pixels.
    Raises ZeroExtentError if the canvas has no logical width.
    """
    return independent_size * canvas.scale


def to_pixel_padding(canvas: CanvasInfo, padding: QMarginsF) -> QMarginsF:
    """Scales all four sides of a device independent padding."""
    return QMarginsF(
        to_pixel_size(canvas, padding.left()),
        to_pixel_size(canvas, padding.top()),
        to_pixel_size(canvas, padding.right()),
        to_pixel_size(canvas, padding.bottom()),
    )
