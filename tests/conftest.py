"""
Shared fixtures: synthetic skin-colored frames
"""
import cv2
import numpy as np
import pytest

from handswipe.core.config import HandTrackingConfig

# BGR color that lands at roughly Y=169, Cr=171, Cb=94 - inside the default ranges
SKIN_BGR = (110, 150, 230)
BACKGROUND_BGR = (0, 0, 0)

FINGER_WIDTH = 30
# Outer fingers shorter than the middle ones so every finger reaches the convex hull
FINGER_TOPS = (100, 60, 60, 100)
PALM_TOP = 200
PALM_BOTTOM = 349
PALM_WIDTH = 200


def draw_hand(frame, x_offset=100, color=SKIN_BGR):
    """
    Draw a flat four-finger hand silhouette

    The palm spans PALM_WIDTH pixels from x_offset, four fingers stand on top
    of it with the outer ones flush with the palm edges, leaving three
    valleys about 140 px deep.
    """
    palm_right = x_offset + PALM_WIDTH - 1
    cv2.rectangle(frame, (x_offset, PALM_TOP), (palm_right, PALM_BOTTOM), color, -1)

    finger_lefts = np.linspace(x_offset, palm_right - FINGER_WIDTH + 1, 4).astype(int)
    for left, top in zip(finger_lefts, FINGER_TOPS):
        cv2.rectangle(frame, (int(left), top), (int(left) + FINGER_WIDTH - 1, PALM_TOP), color, -1)
    return frame


def blank_frame(width=400, height=400):
    return np.full((height, width, 3), BACKGROUND_BGR, dtype=np.uint8)


@pytest.fixture
def hand_frame():
    return draw_hand(blank_frame())


@pytest.fixture
def synthetic_config():
    """Defaults, except synthetic polygons have far fewer points than a real hand contour"""
    return HandTrackingConfig(min_contour_size=10)
