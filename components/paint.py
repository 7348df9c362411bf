# components/paint.py
"""
Backend independent paint model.

A paint pass of the gauge produces a short list of commands (clear, stroke an arc,
fill a circle). Each command carries a resolved paint: either a solid color or a
sweep gradient. Backends turn the commands into pixels; RecordingBackend just keeps them.

Angles are canvas angles: degrees, 0 at the positive x-axis, clockwise positive
(y grows downward).
"""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from PySide6.QtCore import QPointF, QRectF
from PySide6.QtGui import QColor, QTransform

from components.utils import lerp_color

TILE_REPEAT = "repeat"
TILE_MIRROR = "mirror"
TILE_CLAMP = "clamp"

CAP_ROUND = "round"


@dataclass(frozen=True)
class SolidPaint:
    color: QColor
    # Replace the pixels beneath instead of blending with them.
    overwrite: bool = False


@dataclass(frozen=True)
class SweepGradientPaint:
    colors: Tuple[QColor, ...]
    center: QPointF
    start_angle: float = 0.0
    end_angle: float = 360.0
    rotation: float = 0.0
    tile_mode: str = TILE_REPEAT

    def matrix(self) -> QTransform:
        """Local matrix of the gradient: a rotation about its center."""
        t = QTransform()
        t.translate(self.center.x(), self.center.y())
        t.rotate(self.rotation)
        t.translate(-self.center.x(), -self.center.y())
        return t

    def color_at(self, angle: float) -> QColor:
        """Color seen at a canvas angle (degrees, clockwise) around the center."""
        if not self.colors:
            return QColor(0, 0, 0, 0)
        if len(self.colors) == 1:
            return QColor(self.colors[0])

        span = self.end_angle - self.start_angle
        if span == 0:
            return QColor(self.colors[0])

        local = (angle - self.rotation) % 360.0
        t = (local - self.start_angle) / span

        if self.tile_mode == TILE_REPEAT:
            t = t - math.floor(t)
        elif self.tile_mode == TILE_MIRROR:
            t = abs(t) % 2.0
            if t > 1.0:
                t = 2.0 - t
        else:
            t = max(0.0, min(1.0, t))

        segments = len(self.colors) - 1
        pos = t * segments
        idx = min(int(pos), segments - 1)
        return lerp_color(self.colors[idx], self.colors[idx + 1], pos - idx)


Paint = Union[SolidPaint, SweepGradientPaint]


def resolve_paint(colors, center: QPointF, start_angle: float, end_angle: float,
                  rotation: float = 0.0) -> Optional[Paint]:
    """
    No colors -> None (nothing is drawn), one color -> solid,
    more -> repeating sweep gradient.
    """
    colors = list(colors or [])
    if not colors:
        return None
    if len(colors) == 1:
        return SolidPaint(QColor(colors[0]))
    return SweepGradientPaint(
        colors=tuple(QColor(c) for c in colors),
        center=QPointF(center),
        start_angle=start_angle,
        end_angle=end_angle,
        rotation=rotation,
        tile_mode=TILE_REPEAT,
    )


# ---------------- Commands ----------------

@dataclass(frozen=True)
class ClearCommand:
    pass


@dataclass(frozen=True)
class ArcCommand:
    bounds: QRectF
    start_angle: float
    sweep_angle: float
    stroke_width: float
    cap: str
    paint: Paint


@dataclass(frozen=True)
class CircleCommand:
    center: QPointF
    radius: float
    paint: SolidPaint


PaintCommand = Union[ClearCommand, ArcCommand, CircleCommand]


# ---------------- Backends ----------------

class PaintBackend(ABC):
    """What the gauge needs from a drawing surface."""

    @abstractmethod
    def clear(self) -> None:
        ...

    @abstractmethod
    def stroke_arc(self, bounds: QRectF, start_angle: float, sweep_angle: float,
                   stroke_width: float, cap: str, paint: Paint) -> None:
        ...

    @abstractmethod
    def fill_circle(self, center: QPointF, radius: float, paint: SolidPaint) -> None:
        ...


class RecordingBackend(PaintBackend):
    """Keeps the commands instead of drawing them."""

    def __init__(self):
        self.commands: List[PaintCommand] = []

    def clear(self) -> None:
        self.commands.append(ClearCommand())

    def stroke_arc(self, bounds, start_angle, sweep_angle, stroke_width, cap, paint) -> None:
        self.commands.append(ArcCommand(QRectF(bounds), start_angle, sweep_angle, stroke_width, cap, paint))

    def fill_circle(self, center, radius, paint) -> None:
        self.commands.append(CircleCommand(QPointF(center), radius, paint))

    @property
    def arcs(self) -> List[ArcCommand]:
        return [c for c in self.commands if isinstance(c, ArcCommand)]

    @property
    def circles(self) -> List[CircleCommand]:
        return [c for c in self.commands if isinstance(c, CircleCommand)]

    def reset(self) -> None:
        self.commands.clear()


# ---------------- Render frame ----------------

@dataclass
class RenderFrame:
    """Geometry computed by one paint pass. Not kept between passes."""
    bounds: QRectF
    center: QPointF
    radius: int
    stroke_width: float
    start_angle: float
    max_angle: float
    sweep_angle: float
    foreground: Optional[Paint] = None
    background: Optional[Paint] = None
    handle: Optional[SolidPaint] = None
    handle_position: Optional[QPointF] = None
    handle_radius: float = 0.0
