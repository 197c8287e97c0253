"""
Base class for hand detection methods
"""
from abc import ABC, abstractmethod


class HandDetectorBase(ABC):

    @abstractmethod
    def process_frame(self, frame):
        """
        Process a frame and detect the hand

        Args:
            frame: BGR image from camera

        Returns:
            HandDetectionResult with:
                - status: DetectionStatus, DETECTED or the reason no hand was found
                - snapshot: HandSnapshot (bounding shape, palm center, mean size, finger tips)
                - gestures: GestureFlags for the current history window
                - history: palm center history, oldest first
        """
        pass

    @abstractmethod
    def cleanup(self):
        pass
