# services/settings.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from dotenv import load_dotenv
from PySide6.QtCore import QMarginsF, Qt
from PySide6.QtGui import QColor

from components.gauge_control import DEFAULT_HANDLE_DIAMETER, DEFAULT_STROKE_WIDTH, GaugeControl
from components.errors import ConfigurationError
from components.utils import parse_color_list, to_qcolor

load_dotenv()


@dataclass
class GaugeSettings:
    """Startup configuration of the sample gauge, read from the environment / .env."""
    progress: float = 0.0
    padding: QMarginsF = field(default_factory=lambda: QMarginsF(0, 0, 0, 0))
    stroke_width: float = DEFAULT_STROKE_WIDTH
    handle_diameter: float = DEFAULT_HANDLE_DIAMETER
    foreground_colors: List[QColor] = field(default_factory=lambda: [QColor(Qt.GlobalColor.blue)])
    background_colors: List[QColor] = field(default_factory=lambda: [QColor(Qt.GlobalColor.white)])
    handle_color: Optional[QColor] = field(default_factory=lambda: QColor(Qt.GlobalColor.white))
    log_level: str = "INFO"
    app_mode: str = "production"

    @property
    def effective_log_level(self) -> str:
        """Development mode always logs at DEBUG."""
        return "DEBUG" if self.app_mode == "development" else self.log_level

    def apply(self, control: GaugeControl) -> None:
        """Pushes the values through the control's setters; rejected ones are logged and skipped."""
        values = [
            ("padding", self.padding),
            ("gauge_stroke_width", self.stroke_width),
            ("handle_diameter", self.handle_diameter),
            ("foreground_colors", self.foreground_colors),
            ("background_colors", self.background_colors),
            ("handle_color", self.handle_color),
            ("progress", self.progress),
        ]
        for name, value in values:
            try:
                control.set_configuration(name, value)
            except ConfigurationError as e:
                logging.warning(f"Gauge setting skipped: {e}")


def _parse_padding(text: str) -> QMarginsF:
    parts = [float(p) for p in text.split(",") if p.strip()]
    if len(parts) == 1:
        parts = parts * 4
    if len(parts) != 4:
        raise ValueError("expected 1 or 4 numbers")
    return QMarginsF(*parts)


def _parse_handle_color(text: str) -> Optional[QColor]:
    if text.strip().lower() in ("", "none"):
        return None
    return to_qcolor(text)


def load_settings(environ: Mapping[str, str] | None = None) -> GaugeSettings:
    """
    Builds GaugeSettings from environment variables.
    A malformed value is logged and its default kept, so startup never fails here.
    """
    env = os.environ if environ is None else environ
    settings = GaugeSettings()

    parsers = {
        "GAUGE_PROGRESS": ("progress", float),
        "GAUGE_PADDING": ("padding", _parse_padding),
        "GAUGE_STROKE_WIDTH": ("stroke_width", float),
        "GAUGE_HANDLE_DIAMETER": ("handle_diameter", float),
        "GAUGE_FOREGROUND_COLORS": ("foreground_colors", parse_color_list),
        "GAUGE_BACKGROUND_COLORS": ("background_colors", parse_color_list),
        "GAUGE_HANDLE_COLOR": ("handle_color", _parse_handle_color),
        "LOG_LEVEL": ("log_level", lambda v: v.strip().upper()),
        "APP_MODE": ("app_mode", lambda v: v.strip().lower()),
    }

    for key, (attr, parse) in parsers.items():
        raw = env.get(key)
        if raw is None:
            continue
        try:
            setattr(settings, attr, parse(raw))
        except (TypeError, ValueError) as e:
            logging.warning(f"Ignoring {key}={raw!r}: {e}")

    if not isinstance(logging.getLevelName(settings.log_level), int):
        logging.warning(f"Unknown LOG_LEVEL {settings.log_level!r}, using INFO.")
        settings.log_level = "INFO"

    return settings
