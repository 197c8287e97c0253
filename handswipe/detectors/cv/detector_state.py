"""
State management for CV detector
Holds the session's palm center history, frame counters and debug metrics
"""
from .tracking import PalmCenterHistory
from .contour_extraction import DetectionStatus
from .gestures import GestureFlags

RECENT_METRICS_SIZE = 30


class DetectorState:
    """Per-session state: one history and its metrics"""

    def __init__(self, history_capacity):
        self.history = PalmCenterHistory(history_capacity)
        self.frame_count = 0
        self.last_gestures = GestureFlags.NONE

        self.debug_metrics = {
            'total_frames': 0,
            'detected_frames': 0,
            'rejections': {status.value: 0 for status in DetectionStatus
                           if status is not DetectionStatus.DETECTED},
            'gesture_changes': 0,
            'contour_areas': [],
            'defect_counts': [],
            'finger_counts': [],
        }

    def increment_frame(self):
        self.frame_count += 1
        self.debug_metrics['total_frames'] += 1

    def update_detection_metrics(self, snapshot, gestures):
        """Update metrics after successful detection

        Returns:
            bool: True when the gesture flags differ from the previous detection
        """
        self.debug_metrics['detected_frames'] += 1

        self._push('contour_areas', snapshot.contour_area)
        self._push('defect_counts', snapshot.defect_count)
        self._push('finger_counts', len(snapshot.finger_tips))

        changed = gestures != self.last_gestures
        if changed:
            self.debug_metrics['gesture_changes'] += 1
        self.last_gestures = gestures
        return changed

    def update_rejection_metrics(self, status):
        self.debug_metrics['rejections'][status.value] += 1

    def _push(self, key, value):
        values = self.debug_metrics[key]
        values.append(value)
        if len(values) > RECENT_METRICS_SIZE:
            values.pop(0)

    def metrics_snapshot(self):
        """Copy of the debug metrics safe to hand to another thread"""
        metrics = dict(self.debug_metrics)
        metrics['rejections'] = dict(self.debug_metrics['rejections'])
        for key in ('contour_areas', 'defect_counts', 'finger_counts'):
            metrics[key] = list(self.debug_metrics[key])
        return metrics
