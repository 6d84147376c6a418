import pytest

from conftest import make_pose, swing_stream
from tennisShotCoach.core.pose.features import extract_tennis_features
from tennisShotCoach.core.pose.handedness import detect_handedness
from tennisShotCoach.core.pose.normalize import hip_center_torso_scale
from tennisShotCoach.entity.config_entity import HandednessParams


def normalized(stream):
    return [hip_center_torso_scale(extract_tennis_features(o)) for o in stream]


def test_too_few_observations_gives_default():
    h = detect_handedness(normalized(swing_stream(n=2)))
    assert (h.racket_hand, h.confidence) == ("right", 0.5)


def test_right_hand_detected():
    h = detect_handedness(normalized(swing_stream(racket="right")))
    assert h.racket_hand == "right"
    assert h.confidence == pytest.approx(0.95)


def test_left_hand_detected():
    h = detect_handedness(normalized(swing_stream(racket="left")))
    assert h.racket_hand == "left"
    assert 0.5 < h.confidence <= 0.95


def test_balanced_wrists_fall_back_to_default():
    stream = []
    for i in range(10):
        d = 10.0 * i
        stream.append(make_pose(i * 0.1, right_wrist=(360.0 + d, 150.0), left_wrist=(240.0 - d, 150.0)))
    h = detect_handedness(normalized(stream))
    assert (h.racket_hand, h.confidence) == ("right", 0.5)


def test_invalid_frames_are_skipped():
    frames = normalized(swing_stream())
    frames = [None if i % 2 else f for i, f in enumerate(frames)]
    # no adjacent valid pair left
    h = detect_handedness(frames, HandednessParams(default_confidence=0.4))
    assert (h.racket_hand, h.confidence) == ("right", 0.4)


def test_deterministic():
    frames = normalized(swing_stream(racket="left"))
    assert detect_handedness(frames) == detect_handedness(frames)
