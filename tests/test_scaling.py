import pytest
from PySide6.QtCore import QMarginsF
from PySide6.QtWidgets import QWidget

from components.errors import ZeroExtentError
from components.scaling import CanvasInfo, to_pixel_padding, to_pixel_size


def test_scale_from_sizes():
    canvas = CanvasInfo(200, 100, 500, 250)
    assert canvas.scale == pytest.approx(2.5)
    assert to_pixel_size(canvas, 20) == pytest.approx(50.0)


@pytest.mark.parametrize("scale", [1.0, 2.75])
def test_scaling_is_undone_by_dividing_by_scale(scale):
    canvas = CanvasInfo.from_size(320, 480, scale)
    x = 12.5
    assert to_pixel_size(canvas, x) / canvas.scale == pytest.approx(x)


def test_unit_scale_keeps_sizes():
    canvas = CanvasInfo.from_size(320, 480)
    x = 12.5
    assert to_pixel_size(canvas, to_pixel_size(canvas, x) / canvas.scale) == pytest.approx(x)


def test_padding_scales_each_side():
    canvas = CanvasInfo.from_size(100, 100, 2.0)
    scaled = to_pixel_padding(canvas, QMarginsF(1, 2, 3, 4))

    assert (scaled.left(), scaled.top(), scaled.right(), scaled.bottom()) == (2, 4, 6, 8)


def test_zero_logical_width_fails_explicitly():
    canvas = CanvasInfo(0, 100, 0, 100)
    assert canvas.is_empty
    with pytest.raises(ZeroExtentError):
        to_pixel_size(canvas, 10)


def test_from_widget():
    w = QWidget()
    w.resize(120, 80)
    canvas = CanvasInfo.from_widget(w)
    dpr = w.devicePixelRatioF()

    assert canvas.logical_width == 120
    assert canvas.physical_height == pytest.approx(80 * dpr)
