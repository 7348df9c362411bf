# components/utils.py
from __future__ import annotations

from typing import Iterable, List, Tuple

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor


def to_qcolor(value) -> QColor:
    """
    Accepts a QColor, a Qt.GlobalColor or anything QColor can parse
    ("#ff0000", "#80ff0000", "red", ...). Raises ValueError if invalid.
    """
    if isinstance(value, QColor):
        color = QColor(value)
    elif isinstance(value, (str, Qt.GlobalColor)):
        color = QColor(value.strip() if isinstance(value, str) else value)
    else:
        raise ValueError(f"not a color: {value!r}")

    if not color.isValid():
        raise ValueError(f"not a color: {value!r}")
    return color


def parse_color_list(text: str | None) -> List[QColor]:
    """
    "red, #00ff00" -> [QColor, QColor]
    An empty or blank string means "no colors".
    """
    if not text or not text.strip():
        return []
    return [to_qcolor(part) for part in text.split(",") if part.strip()]


def to_rgba(color: QColor) -> Tuple[int, int, int, int]:
    """QColor -> (r, g, b, a) for Pillow."""
    return color.red(), color.green(), color.blue(), color.alpha()


def lerp_color(c1: QColor, c2: QColor, t: float) -> QColor:
    t = max(0.0, min(1.0, t))
    return QColor.fromRgbF(
        c1.redF() + (c2.redF() - c1.redF()) * t,
        c1.greenF() + (c2.greenF() - c1.greenF()) * t,
        c1.blueF() + (c2.blueF() - c1.blueF()) * t,
        c1.alphaF() + (c2.alphaF() - c1.alphaF()) * t,
    )


def color_names(colors: Iterable[QColor]) -> List[str]:
    return [c.name(QColor.NameFormat.HexArgb) for c in colors]
