"""
Swipe gesture classification from the palm center history
"""
from enum import IntFlag


class GestureFlags(IntFlag):
    NONE = 0x00
    SWIPE_RIGHT = 0x01
    SWIPE_LEFT = 0x02
    SWIPE_UP = 0x04
    SWIPE_DOWN = 0x08


SWIPE_FLAGS = (
    GestureFlags.SWIPE_RIGHT,
    GestureFlags.SWIPE_LEFT,
    GestureFlags.SWIPE_UP,
    GestureFlags.SWIPE_DOWN,
)


def classify_gesture(history, mean_size):
    """
    Classify the net palm displacement across the whole history window

    The result is not latched: a sustained displacement reports the same
    flags every call until the window span drops back under the threshold.
    Acting on rising edges only is up to the caller.

    Args:
        history: Non-empty PalmCenterHistory (or sequence of points), oldest first
        mean_size: Hand mean size, used as displacement threshold

    Returns:
        GestureFlags, possibly two combined for a diagonal swipe
    """
    points = list(history)
    if not points:
        raise ValueError("Cannot classify gestures on an empty history")

    delta_x = points[-1][0] - points[0][0]
    delta_y = points[-1][1] - points[0][1]

    gestures = GestureFlags.NONE

    if delta_x > mean_size:
        gestures |= GestureFlags.SWIPE_RIGHT
    elif delta_x < -mean_size:
        gestures |= GestureFlags.SWIPE_LEFT

    # Image y grows downwards
    if delta_y > mean_size:
        gestures |= GestureFlags.SWIPE_DOWN
    elif delta_y < -mean_size:
        gestures |= GestureFlags.SWIPE_UP

    return gestures


def describe_gestures(gestures):
    """Readable names of the set flags, 'NONE' when empty"""
    names = [flag.name for flag in SWIPE_FLAGS if gestures & flag]
    return "|".join(names) if names else "NONE"
