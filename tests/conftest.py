import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from components.gauge_control import GaugeControl
from components.paint import RecordingBackend
from components.scaling import CanvasInfo


@pytest.fixture(scope="session", autouse=True)
def app():
    return QApplication.instance() or QApplication([])


class Redraws:
    def __init__(self):
        self.count = 0

    def __call__(self):
        self.count += 1


@pytest.fixture
def redraws():
    return Redraws()


@pytest.fixture
def control(redraws):
    return GaugeControl(invalidate=redraws)


@pytest.fixture
def backend():
    return RecordingBackend()


@pytest.fixture
def canvas():
    return CanvasInfo.from_size(300, 300)


@pytest.fixture
def emitted(control):
    values = []
    control.progress_changed.connect(lambda v: values.append(v))
    return values
