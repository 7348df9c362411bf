import logging

import pytest
from PySide6.QtGui import QColor

from components.gauge_control import GaugeControl
from services.settings import GaugeSettings, load_settings


def sides(m):
    return m.left(), m.top(), m.right(), m.bottom()


def test_defaults_without_environment():
    settings = load_settings({})

    assert settings.progress == 0.0
    assert settings.stroke_width == 20.0
    assert settings.handle_diameter == 18.0
    assert settings.log_level == "INFO"
    assert settings.app_mode == "production"


def test_reads_gauge_variables():
    settings = load_settings({
        "GAUGE_PROGRESS": "0.4",
        "GAUGE_PADDING": "1, 2, 3, 4",
        "GAUGE_STROKE_WIDTH": "12.5",
        "GAUGE_HANDLE_DIAMETER": "9",
        "GAUGE_FOREGROUND_COLORS": "red, #00ff00",
        "GAUGE_BACKGROUND_COLORS": "",
        "GAUGE_HANDLE_COLOR": "none",
        "LOG_LEVEL": "debug",
        "APP_MODE": "Development",
    })

    assert settings.progress == 0.4
    assert sides(settings.padding) == (1, 2, 3, 4)
    assert settings.stroke_width == 12.5
    assert settings.handle_diameter == 9
    assert settings.foreground_colors == [QColor("red"), QColor("#00ff00")]
    assert settings.background_colors == []
    assert settings.handle_color is None
    assert settings.log_level == "DEBUG"
    assert settings.app_mode == "development"


def test_single_padding_value():
    assert sides(load_settings({"GAUGE_PADDING": "6"}).padding) == (6, 6, 6, 6)


@pytest.mark.parametrize("key, raw, attr", [
    ("GAUGE_STROKE_WIDTH", "thick", "stroke_width"),
    ("GAUGE_FOREGROUND_COLORS", "red, nope", "foreground_colors"),
    ("GAUGE_HANDLE_COLOR", "#zz", "handle_color"),
])
def test_malformed_value_keeps_default(caplog, key, raw, attr):
    with caplog.at_level(logging.WARNING):
        settings = load_settings({key: raw})

    assert getattr(settings, attr) == getattr(GaugeSettings(), attr)
    assert key in caplog.text


def test_malformed_padding_keeps_default(caplog):
    with caplog.at_level(logging.WARNING):
        settings = load_settings({"GAUGE_PADDING": "1,2"})

    assert sides(settings.padding) == (0, 0, 0, 0)
    assert "GAUGE_PADDING" in caplog.text


def test_unknown_log_level(caplog):
    with caplog.at_level(logging.WARNING):
        settings = load_settings({"LOG_LEVEL": "loud"})

    assert settings.log_level == "INFO"
    assert "LOUD" in caplog.text


def test_apply_skips_rejected_values(caplog):
    control = GaugeControl()
    settings = GaugeSettings(progress=3.0, stroke_width=8.0, foreground_colors=[QColor("red")])

    with caplog.at_level(logging.WARNING):
        settings.apply(control)

    assert control.progress == 0.0
    assert control.gauge_stroke_width == 8.0
    assert control.foreground_colors == [QColor("red")]
    assert "progress" in caplog.text


def test_development_mode_logs_at_debug():
    settings = load_settings({"APP_MODE": "development", "LOG_LEVEL": "WARNING"})

    assert settings.log_level == "WARNING"
    assert settings.effective_log_level == "DEBUG"


def test_production_mode_keeps_log_level():
    settings = load_settings({"APP_MODE": "production", "LOG_LEVEL": "WARNING"})
    assert settings.effective_log_level == "WARNING"
