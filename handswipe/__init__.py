"""Skin-color hand detection and swipe gesture tracking"""
from .detectors import HandDetectorBase, CVDetector
from .detectors.cv import (
    DetectionStatus, GestureFlags, HandDetectionResult, HandSnapshot, PalmCenterHistory,
)
from .core.config import HandTrackingConfig

__version__ = "1.0.0"
