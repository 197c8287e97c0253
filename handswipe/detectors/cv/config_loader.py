"""
Configuration loading and saving for the CV detector
"""
import json
import logging
from pathlib import Path

from ...core.config import CONFIG_FILE, HandTrackingConfig

logger = logging.getLogger(__name__)


def default_config_path():
    return Path.cwd() / CONFIG_FILE


def load_hand_tracking_config(path=None):
    """
    Load the tuning thresholds from JSON config or use defaults

    Missing keys keep their default value. A missing, unreadable or
    invalid file falls back to the defaults entirely.

    Args:
        path: JSON file, defaults to hand_tracking_config.json in the working directory

    Returns:
        HandTrackingConfig
    """
    config_path = Path(path) if path is not None else default_config_path()

    if config_path.exists():
        try:
            with open(config_path, 'r') as f:
                data = json.load(f)
            config = HandTrackingConfig.from_dict(data).validate()
            logger.info("Loaded hand tracking config from %s", config_path)
            return config
        except (OSError, ValueError, TypeError) as e:
            logger.warning("Failed to load hand tracking config %s: %s", config_path, e)
    elif path is not None:
        logger.warning("Config file %s not found, using defaults", config_path)

    return HandTrackingConfig()


def save_hand_tracking_config(config, path=None):
    """
    Save the tuning thresholds to JSON, e.g. after live calibration

    Returns:
        Path of the written file
    """
    config_path = Path(path) if path is not None else default_config_path()
    config.validate()

    with open(config_path, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)

    logger.info("Hand tracking config saved to %s", config_path)
    return config_path
