"""
Hand contour extraction: dominant skin region boundary and its convexity defects
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import cv2
import numpy as np

from ...core.config import MIN_CONVEXITY_DEFECTS

logger = logging.getLogger(__name__)


class DetectionStatus(Enum):
    """Outcome of one pipeline cycle. Anything but DETECTED means no hand."""
    DETECTED = "detected"
    NO_CONTOUR = "no_contour"
    TOO_FEW_POINTS = "too_few_points"
    TOO_FEW_DEFECTS = "too_few_defects"
    DEGENERATE_DEFECTS = "degenerate_defects"


@dataclass
class ContourExtraction:
    """Selected hand contour with its convexity defects."""
    status: DetectionStatus
    contour: Optional[np.ndarray] = None
    defects: Optional[np.ndarray] = None
    area: float = 0.0

    @property
    def accepted(self):
        return self.status is DetectionStatus.DETECTED


def _empty_defects():
    return np.empty((0, 4), dtype=np.int32)


def compute_convexity_defects(contour):
    """
    Convex hull and convexity defects of a contour

    Args:
        contour: OpenCV contour (n, 1, 2)

    Returns:
        (hull_indices, defects) where defects is an (m, 4) int array of
        (start_index, end_index, far_index, fixed_point_depth)
    """
    hull = cv2.convexHull(contour, clockwise=False, returnPoints=False)
    if hull is None or len(hull) <= 3:
        return hull, _empty_defects()

    try:
        defects = cv2.convexityDefects(contour, hull)
    except cv2.error as e:
        # Self-touching contours can produce a non-monotonic hull
        logger.debug("convexityDefects failed on contour of %d points: %s", len(contour), e)
        return hull, _empty_defects()

    if defects is None:
        return hull, _empty_defects()
    return hull, defects.reshape(-1, 4)


def find_biggest_contour(areas):
    """
    Index of the biggest area, first seen wins ties

    Args:
        areas: Enclosed area per contour, None for contours that are not candidates

    Returns:
        int: Index of the biggest candidate or -1 if there is none
    """
    biggest_id = -1
    biggest_area = None

    for i, area in enumerate(areas):
        if area is None:
            continue
        if biggest_area is None or area > biggest_area:
            biggest_area = area
            biggest_id = i

    return biggest_id


def extract_contour_and_defects(mask, config):
    """
    Find the dominant skin region and check that it looks like a hand

    Args:
        mask: Binary skin mask
        config: HandTrackingConfig (binary_cutoff, min_contour_area, min_contour_size)

    Returns:
        ContourExtraction, accepted only if the biggest region is large enough,
        has enough points and at least three convexity defects
    """
    _, thresholded = cv2.threshold(mask, config.binary_cutoff, 255, cv2.THRESH_BINARY)
    contours, _ = cv2.findContours(thresholded, cv2.RETR_LIST, cv2.CHAIN_APPROX_SIMPLE)

    areas = []
    defects = []
    for contour in contours:
        area = cv2.contourArea(contour)
        if area < config.min_contour_area:
            areas.append(None)
            defects.append(None)
            continue

        _, contour_defects = compute_convexity_defects(contour)
        areas.append(area)
        defects.append(contour_defects)

    biggest_id = find_biggest_contour(areas)
    if biggest_id == -1:
        return ContourExtraction(DetectionStatus.NO_CONTOUR)

    contour = contours[biggest_id]
    contour_defects = defects[biggest_id]
    area = areas[biggest_id]

    if len(contour) < config.min_contour_size:
        logger.debug("Rejected contour: %d points < %d", len(contour), config.min_contour_size)
        return ContourExtraction(DetectionStatus.TOO_FEW_POINTS, contour, contour_defects, area)

    if len(contour_defects) < MIN_CONVEXITY_DEFECTS:
        logger.debug("Rejected contour: %d defects < %d", len(contour_defects), MIN_CONVEXITY_DEFECTS)
        return ContourExtraction(DetectionStatus.TOO_FEW_DEFECTS, contour, contour_defects, area)

    return ContourExtraction(DetectionStatus.DETECTED, contour, contour_defects, area)
