import io
import logging

import pytest
from PIL import Image

from components.gauge_control import GaugeControl
from services import snapshot
from services.snapshot import SnapshotWorker, render_png


class BrokenControl:
    def paint(self, canvas, backend):
        raise RuntimeError("boom")


def test_worker_emits_png():
    results = []
    worker = SnapshotWorker(GaugeControl(), 120, 80)
    worker.finished.connect(lambda data: results.append(data))
    worker.run()

    assert len(results) == 1
    assert Image.open(io.BytesIO(results[0])).size == (120, 80)


def test_worker_reports_errors():
    errors = []
    worker = SnapshotWorker(BrokenControl())
    worker.error.connect(lambda msg: errors.append(msg))
    worker.run()

    assert errors == ["Gauge snapshot failed: boom"]


def test_empty_snapshot_is_logged(caplog):
    control = GaugeControl()
    control.padding = 100

    with caplog.at_level(logging.WARNING):
        data = render_png(control, 50, 50)

    assert data[:4] == b"\x89PNG"
    assert "empty" in caplog.text


def test_main_writes_file(tmp_path, monkeypatch):
    monkeypatch.delenv("GAUGE_PROGRESS", raising=False)
    out = tmp_path / "snap.png"

    snapshot.main([str(out), "0.75"])

    image = Image.open(out)
    assert image.size == (300, 300)


def test_main_rejects_bad_progress(tmp_path, caplog):
    out = tmp_path / "snap.png"

    with caplog.at_level(logging.ERROR):
        with pytest.raises(SystemExit) as info:
            snapshot.main([str(out), "1.5"])

    assert info.value.code == 2
    assert not out.exists()
    assert "1.5" in caplog.text


def test_main_rejects_non_numeric_progress(tmp_path):
    with pytest.raises(SystemExit):
        snapshot.main([str(tmp_path / "snap.png"), "half"])
