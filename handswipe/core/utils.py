"""
Utility functions for the hand tracking system
"""
import cv2
import time
import platform


def find_camera(max_attempts=5):
    """
    Find and open an available camera with OS-specific backends

    Args:
        max_attempts: Maximum number of camera indices to try

    Returns:
        (cv2.VideoCapture, index) tuple or (None, -1) if no camera found
    """
    os_name = platform.system()

    if os_name == 'Darwin':
        backends = [cv2.CAP_AVFOUNDATION]
    elif os_name == 'Windows':
        backends = [cv2.CAP_DSHOW, cv2.CAP_ANY]
    else:
        backends = [cv2.CAP_V4L2, cv2.CAP_ANY]

    for camera_index in range(max_attempts):
        for backend in backends:
            test_cap = cv2.VideoCapture(camera_index, backend)
            if not test_cap.isOpened():
                test_cap.release()
                continue

            ret, _ = test_cap.read()
            if ret:
                return test_cap, camera_index
            test_cap.release()

    return None, -1


def setup_camera(cap, width=640, height=480, fps=30):
    """
    Configure camera with specified settings

    Args:
        cap: cv2.VideoCapture object
        width: Desired frame width
        height: Desired frame height
        fps: Desired frames per second
    """
    cap.set(cv2.CAP_PROP_FRAME_WIDTH, width)
    cap.set(cv2.CAP_PROP_FRAME_HEIGHT, height)
    cap.set(cv2.CAP_PROP_FPS, fps)


class FPSCounter:
    """Calculate and smooth FPS over time"""

    def __init__(self, smoothing=0.9):
        self.fps = 0
        self.prev_time = time.time()
        self.smoothing = smoothing

    def update(self):
        """Update FPS calculation"""
        curr_time = time.time()
        if curr_time - self.prev_time > 0:
            instant_fps = 1 / (curr_time - self.prev_time)
            self.fps = self.fps * self.smoothing + instant_fps * (1 - self.smoothing)
        self.prev_time = curr_time
        return self.fps


class PerformanceTimer:
    """Track performance timing for the pipeline stages"""

    def __init__(self):
        self.timings = {}
        self.start_times = {}

    def start(self, label):
        self.start_times[label] = time.perf_counter()

    def stop(self, label):
        """Stop timing for a label and store the duration in milliseconds"""
        if label in self.start_times:
            duration = (time.perf_counter() - self.start_times.pop(label)) * 1000
            self.timings[label] = duration

    def get_all(self):
        return self.timings.copy()


def ensure_bgr(frame):
    """
    Ensure frame is in 3-channel BGR format

    Args:
        frame: Grayscale, BGR or BGRA frame

    Returns:
        BGR frame
    """
    if frame.ndim == 2:
        return cv2.cvtColor(frame, cv2.COLOR_GRAY2BGR)
    elif frame.shape[2] == 4:
        return cv2.cvtColor(frame, cv2.COLOR_BGRA2BGR)
    return frame
