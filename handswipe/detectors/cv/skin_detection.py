"""
Skin detection in the YCrCb color space
"""
import cv2
import numpy as np

from ...core.utils import ensure_bgr


def classify_ycrcb(ycrcb, ycrcb_lower, ycrcb_upper):
    """
    Classify YCrCb pixels as skin by per-channel voting

    Every channel is tested independently against its inclusive range.
    A pixel is skin when at least two of the three channels pass, so noise
    in a single channel does not drop it from the mask.

    Args:
        ycrcb: (h, w, 3) uint8 image in Y, Cr, Cb order
        ycrcb_lower: Minimum (Y, Cr, Cb), inclusive
        ycrcb_upper: Maximum (Y, Cr, Cb), inclusive

    Returns:
        (h, w) uint8 mask, 255 for skin and 0 elsewhere
    """
    lower = np.asarray(ycrcb_lower, dtype=np.uint8)
    upper = np.asarray(ycrcb_upper, dtype=np.uint8)

    # 0/255 per channel summed > 255 means two channels or more passed
    passed = (ycrcb >= lower) & (ycrcb <= upper)
    votes = np.count_nonzero(passed, axis=2)

    return np.where(votes >= 2, 255, 0).astype(np.uint8)


def apply_morphological_open(mask, half_size=3):
    """
    Remove speckle noise and smooth the mask boundary

    Erosion followed by dilation with a square kernel of side 2 * half_size.

    Args:
        mask: Binary mask
        half_size: Kernel half-size, 0 leaves the mask untouched

    Returns:
        Cleaned mask
    """
    if half_size <= 0:
        return mask

    side = 2 * half_size
    kernel = cv2.getStructuringElement(cv2.MORPH_RECT, (side, side), (half_size, half_size))

    mask = cv2.erode(mask, kernel, anchor=(half_size, half_size))
    mask = cv2.dilate(mask, kernel, anchor=(half_size, half_size))

    return mask


def frame_to_skin_mask(frame, config, mask=None):
    """
    Convert a BGR frame into a binary skin mask

    Args:
        frame: Input BGR frame (grayscale and BGRA are converted)
        config: HandTrackingConfig with the YCrCb ranges and kernel half-size
        mask: Optional (h, w) uint8 output buffer, written in place

    Returns:
        The skin mask (the output buffer when one was given)
    """
    frame = ensure_bgr(frame)
    h, w = frame.shape[:2]

    if mask is not None and mask.shape != (h, w):
        raise ValueError(f"Mask shape {mask.shape} does not match frame size {(h, w)}")

    ycrcb = cv2.cvtColor(frame, cv2.COLOR_BGR2YCrCb)
    skin = classify_ycrcb(ycrcb, config.ycrcb_lower, config.ycrcb_upper)
    skin = apply_morphological_open(skin, config.morph_half_size)

    if mask is None:
        return skin

    np.copyto(mask, skin)
    return mask
