"""
CV-based hand detection module
Split into one module per pipeline stage
"""
from .cv_detector import CVDetector
from .contour_extraction import DetectionStatus
from .detection_pipeline import HandDetectionResult, run_hand_pipeline
from .finger_detection import BoundingShape, HandSnapshot
from .gestures import GestureFlags, classify_gesture
from .tracking import PalmCenterHistory

__all__ = [
    'CVDetector', 'DetectionStatus', 'HandDetectionResult', 'run_hand_pipeline',
    'BoundingShape', 'HandSnapshot', 'GestureFlags', 'classify_gesture', 'PalmCenterHistory',
]
