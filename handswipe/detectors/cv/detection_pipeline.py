"""
Detection pipeline for the CV detector
Runs the per-frame stages in order, stopping at the first stage that finds no hand:
frame -> skin mask -> (contour, defects) -> HandSnapshot -> history -> gesture flags
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from .skin_detection import frame_to_skin_mask
from .contour_extraction import DetectionStatus, extract_contour_and_defects
from .finger_detection import HandSnapshot, identify_hand_properties
from .gestures import GestureFlags, classify_gesture

logger = logging.getLogger(__name__)


@dataclass
class HandDetectionResult:
    """Everything a consumer needs from one cycle."""
    status: DetectionStatus
    snapshot: Optional[HandSnapshot] = None
    gestures: GestureFlags = GestureFlags.NONE
    history: List[tuple] = field(default_factory=list)
    mask: Optional[np.ndarray] = None
    contour: Optional[np.ndarray] = None
    timings: dict = field(default_factory=dict)

    @property
    def detected(self):
        return self.status is DetectionStatus.DETECTED


def run_hand_pipeline(frame, config, history, timer=None):
    """
    Full hand detection pipeline for one frame

    Args:
        frame: BGR frame
        config: HandTrackingConfig
        history: PalmCenterHistory of the session, appended to on detection only
        timer: Optional PerformanceTimer collecting per-stage durations

    Returns:
        HandDetectionResult
    """
    def start(label):
        if timer is not None:
            timer.start(label)

    def stop(label):
        if timer is not None:
            timer.stop(label)

    def finish(result):
        if timer is not None:
            result.timings = timer.get_all()
        return result

    start('skin_mask')
    mask = frame_to_skin_mask(frame, config)
    stop('skin_mask')

    start('contour')
    extraction = extract_contour_and_defects(mask, config)
    stop('contour')

    if not extraction.accepted:
        return finish(HandDetectionResult(
            status=extraction.status,
            history=history.points(),
            mask=mask,
            contour=extraction.contour,
        ))

    start('hand_properties')
    snapshot = identify_hand_properties(extraction.contour, extraction.defects, config, history)
    stop('hand_properties')

    if snapshot is None:
        logger.debug("Accepted contour without defects, skipping cycle")
        return finish(HandDetectionResult(
            status=DetectionStatus.DEGENERATE_DEFECTS,
            history=history.points(),
            mask=mask,
            contour=extraction.contour,
        ))

    start('gestures')
    gestures = classify_gesture(history, snapshot.mean_size)
    stop('gestures')

    return finish(HandDetectionResult(
        status=DetectionStatus.DETECTED,
        snapshot=snapshot,
        gestures=gestures,
        history=history.points(),
        mask=mask,
        contour=extraction.contour,
    ))
