import pytest
from PySide6.QtCore import QPointF
from PySide6.QtGui import QColor

from components.paint import (
    TILE_CLAMP,
    TILE_MIRROR,
    SolidPaint,
    SweepGradientPaint,
    resolve_paint,
)

RED = QColor(255, 0, 0)
BLUE = QColor(0, 0, 255)


def rgb(c: QColor):
    return c.red(), c.green(), c.blue()


def gradient(**kw):
    kw.setdefault("colors", (RED, BLUE))
    kw.setdefault("center", QPointF(0, 0))
    return SweepGradientPaint(**kw)


def test_repeat_gradient_runs_around():
    g = gradient()
    assert rgb(g.color_at(0)) == (255, 0, 0)
    mid = g.color_at(180)
    assert mid.red() == pytest.approx(127.5, abs=1)
    assert mid.blue() == pytest.approx(127.5, abs=1)
    # one full turn later the gradient repeats
    assert rgb(g.color_at(360)) == (255, 0, 0)


def test_rotation_shifts_the_start():
    g = gradient(rotation=90)
    assert rgb(g.color_at(90)) == (255, 0, 0)
    assert g.color_at(270).blue() == pytest.approx(127.5, abs=1)


def test_clamp_gradient():
    g = gradient(start_angle=90, end_angle=180, tile_mode=TILE_CLAMP)
    assert rgb(g.color_at(45)) == (255, 0, 0)
    assert rgb(g.color_at(270)) == (0, 0, 255)


def test_mirror_gradient():
    g = gradient(start_angle=0, end_angle=90, tile_mode=TILE_MIRROR)
    assert g.color_at(135).red() == pytest.approx(127.5, abs=1)
    assert rgb(g.color_at(180)) == (255, 0, 0)


def test_three_colors():
    g = gradient(colors=(RED, QColor(0, 255, 0), BLUE), end_angle=200)
    assert rgb(g.color_at(100)) == (0, 255, 0)


def test_matrix_rotates_about_center():
    g = gradient(center=QPointF(10, 10), rotation=90)
    p = g.matrix().map(QPointF(20, 10))
    assert p.x() == pytest.approx(10.0)
    assert p.y() == pytest.approx(20.0)


def test_resolve_paint():
    center = QPointF(5, 5)
    assert resolve_paint([], center, 0, 360) is None
    assert resolve_paint(None, center, 0, 360) is None
    assert resolve_paint([RED], center, 0, 360) == SolidPaint(RED)

    sweep = resolve_paint([RED, BLUE], center, 0, 290, 125)
    assert isinstance(sweep, SweepGradientPaint)
    assert sweep.colors == (RED, BLUE)
    assert (sweep.end_angle, sweep.rotation) == (290, 125)
