"""
Camera processing thread separated from the presentation loop
"""
import logging
import threading
import time
from dataclasses import dataclass
from typing import Any

from ..core.config import WORKER_IDLE_DELAY, WORKER_JOIN_TIMEOUT
from ..core.utils import FPSCounter
from .frame_source import CaptureError, FrameSourceClosed

logger = logging.getLogger(__name__)


@dataclass
class PublishedResult:
    """Latest processed frame as seen by the consumer."""
    frame: Any
    result: Any
    frame_index: int
    fps: float


class CameraThread:
    """Runs the hand tracking pipeline on every captured frame in its own thread

    The worker is the only caller of detector.process_frame, so it owns the
    session history. Each cycle replaces the single published result,
    unread results are simply overwritten.
    """

    def __init__(self, detector, frame_source, idle_delay=WORKER_IDLE_DELAY):
        self.detector = detector
        self.frame_source = frame_source
        self.idle_delay = idle_delay

        self.running = False
        self.thread = None

        self.current_result = None
        self.frame_lock = threading.Lock()
        self.frame_index = 0
        self.fps_counter = FPSCounter()

    def start(self):
        """Start camera thread"""
        if self.running:
            return False

        self.running = True
        self.thread = threading.Thread(target=self._camera_loop, name="hand-tracking", daemon=True)
        self.thread.start()
        return True

    def stop(self):
        """Stop camera thread at the next iteration boundary

        A started worker releases the frame source itself when its loop
        exits, so a read still in progress is never cut short by close().
        """
        self.running = False
        if self.thread is None:
            self.frame_source.close()
            return
        if self.thread is not threading.current_thread():
            self.thread.join(timeout=WORKER_JOIN_TIMEOUT)
            if self.thread.is_alive():
                logger.warning("Hand tracking thread did not stop within %.1fs, "
                               "frame source is released when it exits", WORKER_JOIN_TIMEOUT)

    def get_latest_result(self):
        """Get latest processing result (thread-safe)"""
        with self.frame_lock:
            return self.current_result

    def run_cycle(self):
        """
        Capture, process and publish one frame

        Raises:
            CaptureError: if the frame source cannot deliver a frame
        """
        frame = self.frame_source.read()
        result = self.detector.process_frame(frame)

        self.frame_index += 1
        published = PublishedResult(frame, result, self.frame_index, self.fps_counter.update())

        with self.frame_lock:
            self.current_result = published
        return published

    def _camera_loop(self):
        """Main camera processing loop"""
        try:
            while self.running:
                try:
                    self.run_cycle()
                except FrameSourceClosed as e:
                    logger.warning("Frame source closed, stopping hand tracking: %s", e)
                    self.running = False
                    break
                except CaptureError as e:
                    logger.warning("Capture failed, skipping cycle: %s", e)
                    time.sleep(self.idle_delay)
                    continue
                except Exception:
                    logger.exception("Error in camera loop")
                    time.sleep(0.1)
                    continue

                # Small delay to prevent CPU overuse
                time.sleep(self.idle_delay)
        finally:
            self.frame_source.close()

    def is_running(self):
        """Check if the worker is alive"""
        return self.running and self.thread is not None and self.thread.is_alive()
