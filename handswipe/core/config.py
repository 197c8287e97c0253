"""
Configuration constants and the tunable configuration surface for hand tracking
"""
import numbers
from collections.abc import Mapping
from dataclasses import dataclass, asdict, fields

# Camera settings
CAMERA_WIDTH = 640
CAMERA_HEIGHT = 480
CAMERA_FPS = 30

# Skin classification ranges over YCrCb (inclusive, order Y, Cr, Cb)
# Light conditions change these a lot - recalibrate per setup
YCRCB_LOWER_DEFAULT = [100, 160, 70]
YCRCB_UPPER_DEFAULT = [255, 190, 100]

# Half-size of the square kernel used to open the skin mask
# Kernel side is 2 * MORPH_HALF_SIZE, 0 disables morphology
MORPH_HALF_SIZE = 3

# Contour extraction
BINARY_CUTOFF = 100
# MIN_CONTOUR_AREA: ignore all small insignificant areas (pixels)
MIN_CONTOUR_AREA = 5000
# MIN_CONTOUR_SIZE: minimum number of points on the chosen contour
MIN_CONTOUR_SIZE = 300
MIN_CONVEXITY_DEFECTS = 3

# Finger detection
# Defect depth and triangle sides below this (contour units) are not fingers
MIN_FINGER_DEPTH = 10.0
# convexityDefects reports depth as fixed point 8.8
DEFECT_DEPTH_SCALE = 256.0
FINGER_SIDE_RATIO_MIN = 0.8
PALM_DISTANCE_RATIO_MAX = 0.8

# Number of palm center positions kept for gesture detection
HISTORY_CAPACITY = 10

# Worker thread
WORKER_IDLE_DELAY = 0.01
WORKER_JOIN_TIMEOUT = 2.0

# File paths
CONFIG_FILE = "hand_tracking_config.json"

# Log file rotation for the command line application
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3

# Fields handed to OpenCV or deque as sizes and counts
INTEGER_FIELDS = ("morph_half_size", "binary_cutoff", "min_contour_size", "history_capacity")


@dataclass
class HandTrackingConfig:
    """Every runtime-adjustable threshold of the hand tracking pipeline."""
    ycrcb_lower: tuple = tuple(YCRCB_LOWER_DEFAULT)
    ycrcb_upper: tuple = tuple(YCRCB_UPPER_DEFAULT)
    morph_half_size: int = MORPH_HALF_SIZE
    binary_cutoff: int = BINARY_CUTOFF
    min_contour_area: float = MIN_CONTOUR_AREA
    min_contour_size: int = MIN_CONTOUR_SIZE
    min_finger_depth: float = MIN_FINGER_DEPTH
    history_capacity: int = HISTORY_CAPACITY

    def __post_init__(self):
        # JSON hands back lists
        self.ycrcb_lower = tuple(int(v) for v in self.ycrcb_lower)
        self.ycrcb_upper = tuple(int(v) for v in self.ycrcb_upper)

    def validate(self):
        """
        Check the configuration for values the pipeline cannot work with

        Raises:
            ValueError: describing the first offending field
        """
        for name in INTEGER_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        for name in ("min_contour_area", "min_finger_depth"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ValueError(f"{name} must be a number, got {value!r}")

        for name in ("ycrcb_lower", "ycrcb_upper"):
            values = getattr(self, name)
            if len(values) != 3:
                raise ValueError(f"{name} needs 3 values (Y, Cr, Cb), got {len(values)}")
            if any(v < 0 or v > 255 for v in values):
                raise ValueError(f"{name} values must be within 0..255, got {list(values)}")
        for channel, low, high in zip(("Y", "Cr", "Cb"), self.ycrcb_lower, self.ycrcb_upper):
            if low > high:
                raise ValueError(f"{channel} range is inverted: min {low} > max {high}")
        if self.morph_half_size < 0:
            raise ValueError(f"morph_half_size must be >= 0, got {self.morph_half_size}")
        if not 0 <= self.binary_cutoff <= 255:
            raise ValueError(f"binary_cutoff must be within 0..255, got {self.binary_cutoff}")
        if self.min_contour_area < 0 or self.min_contour_size < 0:
            raise ValueError("min_contour_area and min_contour_size must be >= 0")
        if self.min_finger_depth < 0:
            raise ValueError(f"min_finger_depth must be >= 0, got {self.min_finger_depth}")
        if self.history_capacity < 1:
            raise ValueError(f"history_capacity must be >= 1, got {self.history_capacity}")
        return self

    @classmethod
    def from_dict(cls, config):
        """Create config from dictionary, ignoring unknown keys."""
        if not isinstance(config, Mapping):
            raise TypeError(f"Config must be a mapping of field names, got {type(config).__name__}")
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config.items() if k in known})

    def to_dict(self):
        data = asdict(self)
        data["ycrcb_lower"] = list(self.ycrcb_lower)
        data["ycrcb_upper"] = list(self.ycrcb_upper)
        return data
