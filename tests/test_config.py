"""
Tests for the configuration surface and its JSON file
"""
import json

import pytest

from handswipe.core.config import HandTrackingConfig
from handswipe.detectors import CVDetector
from handswipe.detectors.cv.config_loader import load_hand_tracking_config, save_hand_tracking_config


def test_defaults():
    config = HandTrackingConfig()
    assert config.ycrcb_lower == (100, 160, 70)
    assert config.ycrcb_upper == (255, 190, 100)
    assert config.morph_half_size == 3
    assert config.binary_cutoff == 100
    assert config.min_contour_area == 5000
    assert config.min_contour_size == 300
    assert config.min_finger_depth == 10.0
    assert config.history_capacity == 10
    assert config.validate() is config


@pytest.mark.parametrize("changes", [
    {"ycrcb_lower": (100, 200, 70)},
    {"ycrcb_upper": (256, 190, 100)},
    {"ycrcb_lower": (100, 160)},
    {"morph_half_size": -1},
    {"binary_cutoff": 300},
    {"min_contour_area": -5},
    {"min_finger_depth": -1.0},
    {"history_capacity": 0},
    {"history_capacity": 2.5},
    {"morph_half_size": 2.5},
    {"binary_cutoff": "100"},
    {"min_contour_size": True},
    {"min_contour_area": "5000"},
    {"min_finger_depth": None},
])
def test_validate_rejects(changes):
    with pytest.raises(ValueError):
        HandTrackingConfig(**changes).validate()


def test_from_dict_ignores_unknown_keys():
    config = HandTrackingConfig.from_dict({"min_contour_area": 1200, "hsv_lower": [0, 0, 0]})
    assert config.min_contour_area == 1200
    assert config.min_contour_size == 300


def test_round_trip(tmp_path):
    path = tmp_path / "tuning.json"
    config = HandTrackingConfig(ycrcb_lower=(90, 150, 60), min_finger_depth=12.5, history_capacity=15)

    save_hand_tracking_config(config, path)

    assert json.loads(path.read_text())["ycrcb_lower"] == [90, 150, 60]
    assert load_hand_tracking_config(path) == config


def test_partial_file_keeps_defaults(tmp_path):
    path = tmp_path / "tuning.json"
    path.write_text(json.dumps({"binary_cutoff": 50}))

    config = load_hand_tracking_config(path)
    assert config.binary_cutoff == 50
    assert config.min_contour_area == 5000


def test_missing_file_falls_back_to_defaults(tmp_path):
    assert load_hand_tracking_config(tmp_path / "missing.json") == HandTrackingConfig()


@pytest.mark.parametrize("content", [
    "{not json",
    json.dumps({"history_capacity": 0}),
    json.dumps([1, 2, 3]),
    json.dumps("tuning"),
    json.dumps({"history_capacity": 2.5}),
    json.dumps({"morph_half_size": 2.5}),
    json.dumps({"ycrcb_lower": 5}),
])
def test_broken_file_falls_back_to_defaults(tmp_path, content):
    path = tmp_path / "tuning.json"
    path.write_text(content)
    config = load_hand_tracking_config(path)
    assert config == HandTrackingConfig()
    assert CVDetector(config).history.capacity == 10


def test_from_dict_requires_a_mapping():
    with pytest.raises(TypeError):
        HandTrackingConfig.from_dict([("binary_cutoff", 50)])


def test_default_path_is_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    saved = save_hand_tracking_config(HandTrackingConfig(binary_cutoff=42))
    assert saved.parent == tmp_path
    assert load_hand_tracking_config().binary_cutoff == 42
