"""
Main CV Detector - one hand tracking session
Skin mask, contour and defects, hand properties, palm center history, swipe gestures
"""
import dataclasses
import logging

from ..hand_detector_base import HandDetectorBase
from ...core.config import HandTrackingConfig
from ...core.utils import PerformanceTimer
from .detection_pipeline import run_hand_pipeline
from .detector_state import DetectorState
from .gestures import GestureFlags, describe_gestures

logger = logging.getLogger(__name__)


class CVDetector(HandDetectorBase):
    """Skin-color hand detector with swipe gesture classification

    Each instance is a tracking session that owns its palm center history.
    Only one thread may call process_frame; update_config may be called
    from anywhere and takes effect on the next frame.
    """

    def __init__(self, config=None):
        self._config = (config or HandTrackingConfig()).validate()
        self.state = DetectorState(self._config.history_capacity)

    @property
    def config(self):
        return self._config

    @property
    def history(self):
        return self.state.history

    @property
    def debug_metrics(self):
        return self.state.metrics_snapshot()

    def process_frame(self, frame):
        """Run the full pipeline on one frame"""
        config = self._config
        self.state.increment_frame()

        result = run_hand_pipeline(frame, config, self.state.history, PerformanceTimer())

        if not result.detected:
            self.state.update_rejection_metrics(result.status)
            logger.debug("Frame %d: no hand (%s)", self.state.frame_count, result.status.value)
            return result

        changed = self.state.update_detection_metrics(result.snapshot, result.gestures)
        if changed and result.gestures != GestureFlags.NONE:
            logger.info("Frame %d: gesture %s (fingers: %d)", self.state.frame_count,
                        describe_gestures(result.gestures), len(result.snapshot.finger_tips))

        return result

    def update_config(self, **changes):
        """
        Update tuning thresholds, used by live calibration

        History capacity changes apply to the next session.

        Raises:
            ValueError: if the resulting configuration is invalid
        """
        config = dataclasses.replace(self._config, **changes).validate()
        self._config = config
        logger.debug("Config updated: %s", changes)
        return config

    def reset_session(self):
        """Start a new tracking session with an empty history"""
        self.state = DetectorState(self._config.history_capacity)

    def cleanup(self):
        """Cleanup resources"""
        self.reset_session()
