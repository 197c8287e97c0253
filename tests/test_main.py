"""
Tests for the command line entry point and shared utilities
"""
import logging

import numpy as np
import pytest

from handswipe import main as main_module
from handswipe.capture.frame_source import FrameSource, FrameSourceClosed
from handswipe.core.logging_setup import PACKAGE_LOGGER, setup_logging
from handswipe.core.utils import PerformanceTimer, ensure_bgr


@pytest.fixture(autouse=True)
def restore_package_logger():
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    level = package_logger.level
    yield
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(level)


class FiniteFrameSource(FrameSource):

    def __init__(self, frames):
        self.frames = list(frames)
        self.closed = False

    def read(self):
        if not self.frames:
            raise FrameSourceClosed("End of clip")
        return self.frames.pop(0)

    def close(self):
        self.closed = True


def test_parse_args_defaults():
    args = main_module.parse_args([])
    assert args.camera is None
    assert args.config is None
    assert not args.vertical
    assert args.log_level == "INFO"


def test_parse_args_options():
    args = main_module.parse_args(["--camera", "2", "--vertical", "--log-level", "DEBUG"])
    assert args.camera == "2"
    assert args.vertical
    assert args.log_level == "DEBUG"


def test_main_without_camera(monkeypatch, tmp_path):
    def no_camera(camera):
        raise FrameSourceClosed("no camera")

    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(main_module, "open_source", no_camera)
    assert main_module.main([]) == 1


def test_main_runs_until_the_clip_ends(monkeypatch, tmp_path, caplog, hand_frame):
    source = FiniteFrameSource([hand_frame, hand_frame])
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(main_module, "open_source", lambda camera: source)

    assert main_module.main(["--poll-interval", "0.001"]) == 0
    assert source.closed
    assert any("Processed 2 frames" in r.getMessage() for r in caplog.records)


def test_log_file_records_debug_below_console_level(tmp_path):
    log_file = tmp_path / "logs" / "handswipe.log"
    package_logger = setup_logging("WARNING", log_file)

    logging.getLogger("handswipe.detectors.cv.cv_detector").debug("rejected frame")
    for handler in package_logger.handlers:
        handler.flush()

    console, file_handler = package_logger.handlers
    assert console.level == logging.WARNING
    assert file_handler.level == logging.DEBUG
    assert "rejected frame" in log_file.read_text()


def test_setup_logging_replaces_its_handlers():
    setup_logging("INFO")
    package_logger = setup_logging("DEBUG")
    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.DEBUG


def test_ensure_bgr():
    assert ensure_bgr(np.zeros((5, 6), dtype=np.uint8)).shape == (5, 6, 3)
    assert ensure_bgr(np.zeros((5, 6, 4), dtype=np.uint8)).shape == (5, 6, 3)
    frame = np.zeros((5, 6, 3), dtype=np.uint8)
    assert ensure_bgr(frame) is frame


def test_performance_timer():
    timer = PerformanceTimer()
    timer.start("stage")
    timer.stop("stage")
    timer.stop("never_started")
    timings = timer.get_all()
    assert list(timings) == ["stage"]
    assert timings["stage"] >= 0
