"""
Frame sources feeding the hand tracking worker
"""
import logging
from abc import ABC, abstractmethod

import cv2

from ..core.config import CAMERA_WIDTH, CAMERA_HEIGHT, CAMERA_FPS
from ..core.utils import find_camera, setup_camera

logger = logging.getLogger(__name__)


class CaptureError(RuntimeError):
    """The frame source could not deliver a frame this time."""


class FrameSourceClosed(CaptureError):
    """The frame source is gone for good (device unplugged, end of file, closed)."""


class FrameSource(ABC):
    """Pull-based source of fixed-size BGR frames"""

    @abstractmethod
    def read(self):
        """
        Returns:
            BGR frame

        Raises:
            CaptureError: no frame available right now
            FrameSourceClosed: the source will never deliver again
        """

    def close(self):
        pass


class VideoCaptureSource(FrameSource):
    """FrameSource backed by cv2.VideoCapture (webcam index or video file)"""

    def __init__(self, cap, width=CAMERA_WIDTH, height=CAMERA_HEIGHT, fps=CAMERA_FPS, configure=True, from_file=False):
        self.cap = cap
        self.from_file = from_file
        if configure and cap is not None and cap.isOpened():
            setup_camera(cap, width, height, fps)

    @classmethod
    def open(cls, device, **kwargs):
        """Open a camera index or a video file path"""
        cap = cv2.VideoCapture(device)
        if not cap.isOpened():
            cap.release()
            raise FrameSourceClosed(f"Could not open video source {device!r}")
        from_file = not isinstance(device, int)
        return cls(cap, configure=not from_file, from_file=from_file, **kwargs)

    def read(self):
        if self.cap is None or not self.cap.isOpened():
            raise FrameSourceClosed("Video source is not open")

        ret, frame = self.cap.read()
        if not ret or frame is None:
            if self.from_file:
                raise FrameSourceClosed("End of video file")
            raise CaptureError("Cannot read a frame from video source")
        return frame

    def close(self):
        if self.cap is not None:
            self.cap.release()
            self.cap = None


def open_default_camera(max_attempts=5):
    """
    Open the first working camera

    Raises:
        FrameSourceClosed: if no camera could be opened
    """
    cap, index = find_camera(max_attempts)
    if cap is None:
        raise FrameSourceClosed(f"No camera found in the first {max_attempts} indices")

    logger.info("Using camera %d", index)
    return VideoCaptureSource(cap)
