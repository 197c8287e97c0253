"""
Hand properties from an accepted contour
Bounding shape, rough palm center, mean size and finger tips, using
traditional computer vision on the convexity defects:
- the defect triangle vertices average out near the palm
- a finger is a deep, narrow protrusion whose tip and valley sit at
  clearly different distances from the palm
"""
import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import cv2

from ...core.config import DEFECT_DEPTH_SCALE, FINGER_SIDE_RATIO_MIN, PALM_DISTANCE_RATIO_MAX

Point = Tuple[int, int]


@dataclass
class BoundingShape:
    """Minimum-area rotated rectangle around the hand contour."""
    center: Tuple[float, float]
    width: float
    height: float
    angle: float

    @classmethod
    def from_contour(cls, contour):
        (cx, cy), (w, h), angle = cv2.minAreaRect(contour)
        return cls((float(cx), float(cy)), float(w), float(h), float(angle))

    @property
    def mean_size(self):
        return (self.width + self.height) * 0.5

    def box_points(self):
        """Four corners of the rectangle, for drawing the outline."""
        rect = (self.center, (self.width, self.height), self.angle)
        return [tuple(p) for p in cv2.boxPoints(rect).tolist()]


@dataclass
class HandSnapshot:
    """Geometric description of the hand in one frame."""
    bounding_shape: BoundingShape
    rough_palm_center: Point
    mean_size: float
    finger_tips: List[Point] = field(default_factory=list)
    contour_area: float = 0.0
    defect_count: int = 0


def _point(contour, index):
    x, y = contour[index][0]
    return int(x), int(y)


def distance(p, q):
    return math.hypot(p[0] - q[0], p[1] - q[1])


def rough_palm_center(contour, defects):
    """
    Average of every defect triangle vertex (start, end and far points)

    Far points gather around the palm while start and end points sit near
    the finger bases, so this lands on the palm rather than on the centroid
    of the whole silhouette.

    Returns:
        (x, y) integer point, or None for an empty defect set
    """
    if len(defects) == 0:
        return None

    sum_x = sum_y = 0
    for s, e, f, _ in defects:
        for index in (s, e, f):
            x, y = _point(contour, index)
            sum_x += x
            sum_y += y

    count = 3 * len(defects)
    return sum_x // count, sum_y // count


def is_finger_tip(dist_a, dist_b, dist_c, dist_d, min_finger_depth):
    """
    Finger test on the distances of one defect triangle

    Args:
        dist_a: palm center to far point
        dist_b: palm center to start point
        dist_c: far point to start point
        dist_d: end point to far point
        min_finger_depth: minimum length of both finger sides

    Returns:
        bool: True when the start point is a finger tip
    """
    if dist_c < min_finger_depth or dist_d < min_finger_depth:
        return False

    shorter_side = min(dist_c, dist_d)
    if shorter_side == 0:
        return False
    if max(dist_c, dist_d) / shorter_side < FINGER_SIDE_RATIO_MIN:
        return False

    farther = max(dist_a, dist_b)
    if farther == 0:
        return False
    return min(dist_a, dist_b) / farther <= PALM_DISTANCE_RATIO_MAX


def detect_finger_tips(contour, defects, palm_center, min_finger_depth):
    """
    Collect the start point of every defect that passes the finger test

    Tips are neither deduplicated nor capped, an unusual silhouette may
    report more than five.
    """
    finger_tips = []

    for s, e, f, d in defects:
        depth = d / DEFECT_DEPTH_SCALE
        if depth < min_finger_depth:
            continue

        start = _point(contour, s)
        end = _point(contour, e)
        far = _point(contour, f)

        if is_finger_tip(distance(palm_center, far),
                         distance(palm_center, start),
                         distance(far, start),
                         distance(end, far),
                         min_finger_depth):
            finger_tips.append(start)

    return finger_tips


def identify_hand_properties(contour, defects, config, history=None) -> Optional[HandSnapshot]:
    """
    Identify hand: bounding rect, palm center, mean size and fingers

    Args:
        contour: Accepted hand contour
        defects: (n, 4) convexity defects of that contour
        config: HandTrackingConfig (min_finger_depth)
        history: Optional PalmCenterHistory, receives the palm center

    Returns:
        HandSnapshot, or None when there are no defects to locate the palm
        (history is left untouched in that case)
    """
    palm_center = rough_palm_center(contour, defects)
    if palm_center is None:
        return None

    bounding_shape = BoundingShape.from_contour(contour)
    finger_tips = detect_finger_tips(contour, defects, palm_center, config.min_finger_depth)

    if history is not None:
        history.append(palm_center)

    return HandSnapshot(
        bounding_shape=bounding_shape,
        rough_palm_center=palm_center,
        mean_size=bounding_shape.mean_size,
        finger_tips=finger_tips,
        contour_area=float(cv2.contourArea(contour)),
        defect_count=len(defects),
    )
