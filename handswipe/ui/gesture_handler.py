"""
Gesture handling logic separated from the detector
The detector reports swipe flags every frame for as long as the motion lasts,
here they are turned into one-shot actions.
"""
import logging
import time
from collections import deque

from ..detectors.cv.gestures import GestureFlags, SWIPE_FLAGS, describe_gestures

logger = logging.getLogger(__name__)


class GestureHandler:
    """Fires callbacks on the rising edge of each swipe flag"""

    def __init__(self):
        self.last_gestures = GestureFlags.NONE
        self.gesture_log = deque(maxlen=50)
        self.frame_count = 0
        self.callbacks = {}

    def register_callback(self, gesture, callback):
        """Register a callback for a single swipe flag"""
        self.callbacks.setdefault(GestureFlags(gesture), []).append(callback)

    def process_gestures(self, gestures):
        """
        Process the flags of one frame and execute callbacks

        Args:
            gestures: GestureFlags from the detector, NONE when no hand was found

        Returns:
            dict: Action information
        """
        self.frame_count += 1
        gestures = GestureFlags(gestures)

        started = GestureFlags(int(gestures) & ~int(self.last_gestures))
        action = {"gestures": gestures, "started": started, "results": []}

        for flag in SWIPE_FLAGS:
            if not started & flag:
                continue
            for callback in self.callbacks.get(flag, []):
                result = callback(flag)
                if result is not None:
                    action["results"].append(result)

        if started:
            timestamp = time.strftime("%H:%M:%S")
            log_entry = f"[{timestamp}] Frame {self.frame_count}: {describe_gestures(started)}"
            if action["results"]:
                log_entry += f" -> {', '.join(str(r) for r in action['results'])}"
            self.gesture_log.append(log_entry)
            logger.info(log_entry)

        self.last_gestures = gestures
        return action

    def get_recent_log(self, count=8):
        """Get recent gesture log entries"""
        return list(self.gesture_log)[-count:]


class LookThroughSwitch:
    """Switches between the virtual scene and the camera pass-through view

    With a vertically mounted camera the image is rotated, so a left swipe
    enters look-through and a right swipe leaves it. Otherwise a down swipe
    enters and an up swipe leaves. When both flags of a pair are set the
    entering one wins.
    """

    def __init__(self, vertical_orientation=False, look_through=False):
        self.vertical_orientation = vertical_orientation
        self.look_through = look_through

        if vertical_orientation:
            self.enter_flag, self.leave_flag = GestureFlags.SWIPE_LEFT, GestureFlags.SWIPE_RIGHT
        else:
            self.enter_flag, self.leave_flag = GestureFlags.SWIPE_DOWN, GestureFlags.SWIPE_UP

    def update(self, gestures):
        """
        Apply the flags of one frame

        Returns:
            bool: True when the mode changed
        """
        previous = self.look_through
        if gestures & self.enter_flag:
            self.look_through = True
        elif gestures & self.leave_flag:
            self.look_through = False

        if self.look_through != previous:
            logger.info("Look-through mode %s", "on" if self.look_through else "off")
            return True
        return False

    def attach(self, handler):
        """Drive the switch from a GestureHandler's rising edges"""
        handler.register_callback(self.enter_flag, self._on_swipe)
        handler.register_callback(self.leave_flag, self._on_swipe)

    def _on_swipe(self, flag):
        if self.update(flag):
            return "look-through on" if self.look_through else "look-through off"
        return None
