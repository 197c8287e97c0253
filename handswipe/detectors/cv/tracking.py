"""
Palm center motion history for gesture detection
"""
from collections import deque

from ...core.config import HISTORY_CAPACITY


class PalmCenterHistory:
    """Fixed-capacity FIFO of palm centers, oldest first.

    Owned by a single hand tracking session. The only mutation is append(),
    which drops the oldest point once capacity is exceeded.
    """

    def __init__(self, capacity=HISTORY_CAPACITY):
        if capacity < 1:
            raise ValueError(f"History capacity must be >= 1, got {capacity}")
        self._points = deque(maxlen=capacity)

    @property
    def capacity(self):
        return self._points.maxlen

    def append(self, point):
        self._points.append((int(point[0]), int(point[1])))

    def points(self):
        """Copy of the stored points in insertion order"""
        return list(self._points)

    @property
    def first(self):
        if not self._points:
            raise IndexError("Palm center history is empty")
        return self._points[0]

    @property
    def last(self):
        if not self._points:
            raise IndexError("Palm center history is empty")
        return self._points[-1]

    def __len__(self):
        return len(self._points)

    def __iter__(self):
        return iter(list(self._points))

    def __repr__(self):
        return f"PalmCenterHistory(capacity={self.capacity}, points={list(self._points)})"
