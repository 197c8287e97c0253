"""
Hand Swipe Tracking - Main Entry Point
Runs the hand tracking worker on a camera or video file and logs swipe
gestures and look-through mode changes until interrupted
"""
import argparse
import logging
import time

from .capture.camera_thread import CameraThread
from .capture.frame_source import FrameSourceClosed, VideoCaptureSource, open_default_camera
from .core.logging_setup import setup_logging
from .detectors import CVDetector
from .detectors.cv.config_loader import load_hand_tracking_config
from .ui.gesture_handler import GestureHandler, LookThroughSwitch

logger = logging.getLogger(__name__)

FPS_LOG_INTERVAL = 100


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Skin-color hand tracking with swipe gestures")
    parser.add_argument("--camera", default=None,
                        help="Camera index or video file (default: first working camera)")
    parser.add_argument("--config", default=None,
                        help="JSON file with tuning thresholds (default: ./hand_tracking_config.json)")
    parser.add_argument("--vertical", action="store_true",
                        help="Camera is mounted vertically (left/right swipes switch mode)")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--poll-interval", type=float, default=0.03,
                        help="Seconds between reads of the latest result")
    return parser.parse_args(argv)


def open_source(camera):
    if camera is None:
        return open_default_camera()
    device = int(camera) if camera.isdigit() else camera
    return VideoCaptureSource.open(device)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    config = load_hand_tracking_config(args.config)
    try:
        source = open_source(args.camera)
    except FrameSourceClosed as e:
        logger.error("%s", e)
        return 1

    detector = CVDetector(config)
    handler = GestureHandler()
    LookThroughSwitch(vertical_orientation=args.vertical).attach(handler)

    worker = CameraThread(detector, source)
    worker.start()
    logger.info("Hand tracking started - press Ctrl+C to quit")

    last_index = 0
    fps = 0.0
    try:
        while worker.is_running():
            published = worker.get_latest_result()
            if published is not None and published.frame_index != last_index:
                last_index = published.frame_index
                fps = published.fps
                handler.process_gestures(published.result.gestures)
                if last_index % FPS_LOG_INTERVAL == 0:
                    logger.debug("Frame %d at %.1f fps", last_index, fps)
            time.sleep(args.poll_interval)
    except KeyboardInterrupt:
        logger.info("Stopped by user")
    finally:
        worker.stop()
        metrics = detector.debug_metrics
        logger.info("Processed %d frames at %.1f fps, hand detected in %d",
                    metrics['total_frames'], fps, metrics['detected_frames'])

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
