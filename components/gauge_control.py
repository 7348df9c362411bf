# components/gauge_control.py
"""
Gauge control: configuration, pointer tracking and the paint pass.

The control is toolkit-agnostic apart from Qt value types and signals. A host
(GaugeWidget, or a test) feeds it pointer events and canvas sizes, hands it a
PaintBackend on every redraw and listens to `progress_changed`.

Layout of the arc (canvas angles, clockwise positive):

    gap            100°   centered at the bottom of the circle
    start offset   220°   the arc starts at -220° (= 140°, lower left)
    max angle      260°   full sweep, ending at 40° (lower right)
"""
from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass
from typing import Callable, List, Optional

from PySide6.QtCore import QMarginsF, QObject, QPointF, QRectF, Qt, Signal
from PySide6.QtGui import QColor

from components import vector_math
from components.errors import ConfigurationError, ZeroExtentError
from components.paint import (
    CAP_ROUND,
    PaintBackend,
    RenderFrame,
    SolidPaint,
    resolve_paint,
)
from components.scaling import CanvasInfo, to_pixel_padding, to_pixel_size
from components.utils import to_qcolor

GAP_DEGREES = 100
START_OFFSET_DEGREES = 270 - GAP_DEGREES // 2
MAX_ANGLE = 360 - GAP_DEGREES

# Tuned against the layout above; keep them in sync with it.
POINTER_ALIGNMENT_DEGREES = 140
JUMP_THRESHOLD_DEGREES = 50

MIN_VISIBLE_SWEEP = 1.0
STUB_SWEEP = 0.1

# Foreground gradient starts slightly before the arc so the round cap is covered.
FOREGROUND_GRADIENT_ROTATION = 360 - START_OFFSET_DEGREES - 15
FOREGROUND_GRADIENT_END = MAX_ANGLE + 30
BACKGROUND_GRADIENT_START = 90
BACKGROUND_GRADIENT_END = 180

DEFAULT_STROKE_WIDTH = 20.0
DEFAULT_HANDLE_DIAMETER = 18.0

_FLOAT_TOLERANCE = 1e-9


class GaugeState(enum.Enum):
    IDLE = "idle"
    TRACKING = "tracking"


@dataclass
class PointerEvent:
    in_contact: bool
    location: QPointF
    handled: bool = False


def _sides(m: QMarginsF):
    return m.left(), m.top(), m.right(), m.bottom()


def _same_color(a: Optional[QColor], b: Optional[QColor]) -> bool:
    if a is None or b is None:
        return a is b
    return a == b


def progress_to_angle(progress: float) -> float:
    return MAX_ANGLE * progress


def angle_to_progress(angle: float) -> float:
    return 0.0 if angle == 0 else angle / MAX_ANGLE


def visible_sweep(progress: float) -> float:
    """Sweep to draw for a progress; tiny values still render a stub."""
    sweep = progress_to_angle(progress)
    return STUB_SWEEP if sweep < MIN_VISIBLE_SWEEP else sweep


def pointer_angle(center: QPointF, radius: float, contact: QPointF) -> float:
    """
    Gauge angle (0 at the arc start) under a pointer, before jump rejection and clamping.
    """
    on_circle = vector_math.closest_point_on_circle(center, radius, contact)
    angle = vector_math.angle_of(center, on_circle)
    if angle < 90:
        angle += 360
    return angle - POINTER_ALIGNMENT_DEGREES


def constrain_angle(candidate: float, last_angle: float) -> float:
    """Reject jumps larger than the threshold, then clamp to the arc."""
    if abs(candidate - last_angle) > JUMP_THRESHOLD_DEGREES:
        logging.debug(f"Pointer jump rejected: {candidate:.1f} (last {last_angle:.1f})")
        candidate = last_angle
    return max(0.0, min(float(MAX_ANGLE), candidate))


def vertical_fraction() -> float:
    """
    Share of the bounding circle's diameter the arc covers vertically.
    The arc reaches the top of the circle and ends above the bottom.
    """
    end = vector_math.point_on_circle_at_angle(
        QPointF(1.0, 1.0), 1, vector_math.degrees_to_radians(-START_OFFSET_DEGREES)
    )
    return end.y() / 2


class GaugeControl(QObject):
    """
    Arc gauge with a draggable handle.

    Every setter validates and raises ConfigurationError on bad input,
    leaving the old value in place. A changed value requests a redraw;
    a changed progress also emits `progress_changed` before the setter returns.
    """

    progress_changed = Signal(float)

    FIELDS = (
        "progress",
        "padding",
        "gauge_stroke_width",
        "handle_diameter",
        "foreground_colors",
        "background_colors",
        "handle_color",
    )

    def __init__(self, invalidate: Optional[Callable[[], None]] = None, parent: QObject | None = None):
        super().__init__(parent)
        self._invalidate = invalidate

        self._progress = 0.0
        self._padding = QMarginsF(0, 0, 0, 0)
        self._gauge_stroke_width = DEFAULT_STROKE_WIDTH
        self._handle_diameter = DEFAULT_HANDLE_DIAMETER
        self._foreground_colors: List[QColor] = [QColor(Qt.GlobalColor.blue)]
        self._background_colors: List[QColor] = [QColor(Qt.GlobalColor.white)]
        self._handle_color: Optional[QColor] = QColor(Qt.GlobalColor.white)

        self._contact_point: Optional[QPointF] = None

    # ---------------- Redraw ----------------

    def set_invalidate(self, invalidate: Optional[Callable[[], None]]) -> None:
        self._invalidate = invalidate

    def invalidate(self) -> None:
        if self._invalidate is not None:
            self._invalidate()

    # ---------------- Configuration ----------------

    def set_configuration(self, field: str, value) -> None:
        if field not in self.FIELDS:
            raise ConfigurationError(field, value, "unknown field")
        setattr(self, field, value)

    def _reject(self, field: str, value, reason: str):
        logging.warning(f"Rejected gauge configuration {field}={value!r}: {reason}")
        raise ConfigurationError(field, value, reason)

    def _number(self, field: str, value, minimum: float, inclusive: bool = True) -> float:
        try:
            number = float(value)
        except (TypeError, ValueError):
            self._reject(field, value, "not a number")
        if not math.isfinite(number):
            self._reject(field, value, "not finite")
        if number < minimum or (not inclusive and number == minimum):
            bound = ">=" if inclusive else ">"
            self._reject(field, value, f"must be {bound} {minimum}")
        return number

    @property
    def progress(self) -> float:
        return self._progress

    @progress.setter
    def progress(self, value: float) -> None:
        progress = self._number("progress", value, 0.0)
        if progress > 1.0:
            self._reject("progress", value, "must be <= 1")

        if math.isclose(progress, self._progress, rel_tol=0.0, abs_tol=_FLOAT_TOLERANCE):
            return

        self._progress = progress
        self.progress_changed.emit(progress)
        self.invalidate()

    @property
    def padding(self) -> QMarginsF:
        return QMarginsF(self._padding)

    @padding.setter
    def padding(self, value) -> None:
        if isinstance(value, QMarginsF):
            sides = list(_sides(value))
        elif isinstance(value, (int, float)):
            sides = [value] * 4
        else:
            try:
                sides = list(value)
            except TypeError:
                self._reject("padding", value, "expected margins, a number or 4 numbers")
            if len(sides) != 4:
                self._reject("padding", value, "expected 4 sides (left, top, right, bottom)")

        left, top, right, bottom = (self._number("padding", s, 0.0) for s in sides)
        if (left, top, right, bottom) != _sides(self._padding):
            self._padding = QMarginsF(left, top, right, bottom)
            self.invalidate()

    @property
    def gauge_stroke_width(self) -> float:
        return self._gauge_stroke_width

    @gauge_stroke_width.setter
    def gauge_stroke_width(self, value: float) -> None:
        width = self._number("gauge_stroke_width", value, 0.0, inclusive=False)
        if width != self._gauge_stroke_width:
            self._gauge_stroke_width = width
            self.invalidate()

    @property
    def handle_diameter(self) -> float:
        return self._handle_diameter

    @handle_diameter.setter
    def handle_diameter(self, value: float) -> None:
        diameter = self._number("handle_diameter", value, 0.0)
        if diameter != self._handle_diameter:
            self._handle_diameter = diameter
            self.invalidate()

    def _colors(self, field: str, value) -> List[QColor]:
        if value is None:
            return []
        if isinstance(value, (str, QColor, Qt.GlobalColor)):
            value = [value]
        try:
            return [to_qcolor(c) for c in value]
        except (TypeError, ValueError) as e:
            self._reject(field, value, str(e))

    @property
    def foreground_colors(self) -> List[QColor]:
        return [QColor(c) for c in self._foreground_colors]

    @foreground_colors.setter
    def foreground_colors(self, value) -> None:
        colors = self._colors("foreground_colors", value)
        if colors != self._foreground_colors:
            self._foreground_colors = colors
            self.invalidate()

    @property
    def background_colors(self) -> List[QColor]:
        return [QColor(c) for c in self._background_colors]

    @background_colors.setter
    def background_colors(self, value) -> None:
        colors = self._colors("background_colors", value)
        if colors != self._background_colors:
            self._background_colors = colors
            self.invalidate()

    @property
    def handle_color(self) -> Optional[QColor]:
        return None if self._handle_color is None else QColor(self._handle_color)

    @handle_color.setter
    def handle_color(self, value) -> None:
        if value is None:
            color = None
        else:
            try:
                color = to_qcolor(value)
            except ValueError as e:
                self._reject("handle_color", value, str(e))
        if not _same_color(color, self._handle_color):
            self._handle_color = color
            self.invalidate()

    # ---------------- Pointer ----------------

    @property
    def contact_point(self) -> Optional[QPointF]:
        return None if self._contact_point is None else QPointF(self._contact_point)

    @property
    def state(self) -> GaugeState:
        return GaugeState.IDLE if self._contact_point is None else GaugeState.TRACKING

    def on_pointer_event(self, event: PointerEvent) -> bool:
        if event.in_contact:
            self._contact_point = QPointF(event.location)
        else:
            self._contact_point = None

        self.invalidate()
        event.handled = True
        return True

    # ---------------- Paint ----------------

    def _layout(self, canvas: CanvasInfo, stroke_width: int):
        """Largest square box the arc fits in, centered in the padded canvas."""
        padding = to_pixel_padding(canvas, self._padding)
        fraction = vertical_fraction()

        available_w = canvas.physical_width - padding.left() - padding.right() - stroke_width
        available_h = canvas.physical_height - padding.top() - padding.bottom() - stroke_width
        size = min(available_w, available_h / fraction)
        if size <= 0:
            raise ZeroExtentError(f"no room for the gauge ({available_w:.1f} x {available_h:.1f})")

        left = padding.left() + stroke_width / 2 + (available_w - size) / 2
        top = padding.top() + stroke_width / 2 + (available_h - size * fraction) / 2
        return QRectF(left, top, size, size)

    def paint(self, canvas: CanvasInfo, backend: PaintBackend) -> Optional[RenderFrame]:
        """
        Runs one paint pass. Returns the computed frame, or None when the canvas
        has no usable extent (nothing is drawn in that case).
        """
        if canvas.is_empty:
            logging.debug(f"Skipping gauge paint on empty canvas {canvas}")
            return None

        try:
            stroke_width = int(to_pixel_size(canvas, self._gauge_stroke_width * 2))
            bounds = self._layout(canvas, stroke_width)
            handle_radius = int(to_pixel_size(canvas, self._handle_diameter))
        except ZeroExtentError as e:
            logging.debug(f"Skipping gauge paint: {e}")
            return None

        backend.clear()

        last_angle = progress_to_angle(self._progress)
        center = bounds.center()
        radius = int(bounds.width()) // 2

        foreground = resolve_paint(
            self._foreground_colors, center,
            0, FOREGROUND_GRADIENT_END, FOREGROUND_GRADIENT_ROTATION,
        )
        background = resolve_paint(
            self._background_colors, center,
            BACKGROUND_GRADIENT_START, BACKGROUND_GRADIENT_END,
        )

        if background is not None:
            backend.stroke_arc(bounds, -START_OFFSET_DEGREES, MAX_ANGLE, stroke_width, CAP_ROUND, background)

        if self._contact_point is not None:
            candidate = pointer_angle(center, radius, self._contact_point)
            logging.debug(f"Pointer angle: {candidate:.2f}")
            angle = constrain_angle(candidate, last_angle)
            self.progress = angle_to_progress(angle)

        sweep = visible_sweep(self._progress)

        if foreground is not None:
            backend.stroke_arc(bounds, -START_OFFSET_DEGREES, sweep, stroke_width, CAP_ROUND, foreground)

        frame = RenderFrame(
            bounds=bounds,
            center=center,
            radius=radius,
            stroke_width=stroke_width,
            start_angle=-START_OFFSET_DEGREES,
            max_angle=MAX_ANGLE,
            sweep_angle=sweep,
            foreground=foreground,
            background=background,
        )

        if self._handle_color is not None:
            fill = QColor(self._handle_color)
            # A transparent handle should cut down to the background arc, not to nothing.
            if fill.alpha() == 0 and self._background_colors:
                fill = QColor(self._background_colors[0])

            position = vector_math.point_on_circle_at_angle(
                center, radius, vector_math.degrees_to_radians(sweep - START_OFFSET_DEGREES)
            )
            handle = SolidPaint(fill, overwrite=True)
            backend.fill_circle(position, handle_radius, handle)

            frame.handle = handle
            frame.handle_position = position
            frame.handle_radius = handle_radius

        return frame
