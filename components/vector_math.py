# components/vector_math.py
from __future__ import annotations

import logging
import math

from PySide6.QtCore import QPointF

from components.errors import DegenerateGeometryError


def distance(p1: QPointF, p2: QPointF) -> float:
    """Distance between two points."""
    return math.hypot(p1.x() - p2.x(), p1.y() - p2.y())


def unit_vector(origin: QPointF, point: QPointF) -> QPointF:
    """
    Direction from origin to point, normalized.
    Raises DegenerateGeometryError when both points coincide.
    """
    length = distance(origin, point)
    if length == 0.0:
        raise DegenerateGeometryError(f"zero-length vector at ({origin.x()}, {origin.y()})")
    return QPointF((point.x() - origin.x()) / length, (point.y() - origin.y()) / length)


def closest_point_on_circle(center: QPointF, radius: float, point: QPointF) -> QPointF:
    """
    Closest point of the circle to a point out- or inside the circle.

    The point is projected along the ray center -> point. When the point sits
    exactly on the center there is no ray; the point at angle 0 (center + (radius, 0))
    is returned instead.
    """
    try:
        direction = unit_vector(center, point)
    except DegenerateGeometryError:
        logging.debug("Closest point requested at circle center, using angle 0.")
        return QPointF(center.x() + radius, center.y())

    return QPointF(center.x() + radius * direction.x(), center.y() + radius * direction.y())


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def radians_to_degrees(radians: float) -> float:
    return radians * 180.0 / math.pi


def point_on_circle_at_angle(center: QPointF, radius: float, angle_radians: float) -> QPointF:
    """
    Point on the circle at the given angle.
    0 is the positive x-axis; y grows downward like canvas coordinates.
    """
    return QPointF(
        center.x() + radius * math.cos(angle_radians),
        center.y() + radius * math.sin(angle_radians),
    )


def angle_of(center: QPointF, point: QPointF) -> float:
    """Angle in degrees (-180..180] of the vector center -> point, canvas coordinates."""
    return radians_to_degrees(math.atan2(point.y() - center.y(), point.x() - center.x()))
