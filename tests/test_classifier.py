import pytest

from conftest import make_motion, make_segment
from tennisShotCoach.components.shot_classifier import ShotClassifier
from tennisShotCoach.entity.pose_entity import Handedness
from tennisShotCoach.entity.shot_entity import ShotType

RIGHT = Handedness("right", 0.95)


def forehand_motion(**kw):
    return make_motion(racket_wrist_velocity=2.0, is_horizontal=True, side_sign=1.0, **kw)


def test_forehand():
    seg = make_segment([forehand_motion() for _ in range(5)])
    event = ShotClassifier().classify(seg, RIGHT)
    assert event.type == ShotType.FOREHAND
    # 0.95 capped, full coverage, peak 2/3 of reference
    assert event.confidence == pytest.approx(0.95 * 2.0 / 3.0)
    assert event.start_time == pytest.approx(1.0)
    assert event.end_time == pytest.approx(1.4)
    assert event.reasoning[0] == "Racket hand: right (95% confidence)"
    assert "Swing on racket-hand side" in event.reasoning


def test_serve_with_fast_peak():
    motions = [make_motion(racket_wrist_velocity=6.0, is_upward=True, is_vertical=True,
                           racket_wrist_height=-0.5) for _ in range(4)]
    event = ShotClassifier().classify(make_segment(motions), RIGHT)
    assert event.type == ShotType.SERVE
    assert event.confidence == pytest.approx(0.95)
    assert "Upward motion detected" in event.reasoning


def test_upward_motion_below_shoulders_is_not_a_serve():
    motions = [make_motion(racket_wrist_velocity=2.0, is_upward=True, is_vertical=True,
                           racket_wrist_height=0.2) for _ in range(4)]
    assert ShotClassifier().classify(make_segment(motions), RIGHT).type == ShotType.UNKNOWN


def test_two_handed_backhand():
    motions = [make_motion(racket_wrist_velocity=2.0, is_horizontal=True, side_sign=-1.0,
                           hands_distance=0.3) for _ in range(5)]
    event = ShotClassifier().classify(make_segment(motions), RIGHT)
    assert event.type == ShotType.BACKHAND
    assert "Cross-body swing" in event.reasoning
    assert "Hands close together (two-handed)" in event.reasoning


def test_one_handed_backhand_has_no_two_handed_cue():
    motions = [make_motion(racket_wrist_velocity=2.0, is_horizontal=True, side_sign=-1.0)
               for _ in range(5)]
    event = ShotClassifier().classify(make_segment(motions), RIGHT)
    assert event.type == ShotType.BACKHAND
    assert "Hands close together (two-handed)" not in event.reasoning


def test_tie_prefers_serve_over_forehand():
    serve = [make_motion(is_upward=True, is_vertical=True, racket_wrist_height=-0.5,
                         keypoint_confidence=1.0) for _ in range(3)]
    forehand = [forehand_motion(keypoint_confidence=1.0) for _ in range(4)]
    classifier = ShotClassifier()
    seg = make_segment(serve + forehand)
    scores = classifier.score(seg)
    assert scores[ShotType.SERVE] == scores[ShotType.FOREHAND] == 6.0
    assert classifier.classify(seg, RIGHT).type == ShotType.SERVE


def test_tie_prefers_forehand_over_backhand():
    motions = [forehand_motion() for _ in range(2)] + [
        make_motion(racket_wrist_velocity=2.0, is_horizontal=True, side_sign=-1.0) for _ in range(2)
    ]
    assert ShotClassifier().classify(make_segment(motions), RIGHT).type == ShotType.FOREHAND


def test_no_pattern_is_unknown():
    event = ShotClassifier().classify(make_segment([make_motion() for _ in range(5)]), RIGHT)
    assert event.type == ShotType.UNKNOWN
    assert event.confidence == pytest.approx(0.1)
    assert "Insufficient movement patterns" in event.reasoning


def test_poor_keypoints_floor_confidence():
    seg = make_segment([forehand_motion(keypoint_confidence=0.4) for _ in range(5)])
    event = ShotClassifier().classify(seg, RIGHT)
    assert event.type == ShotType.FOREHAND
    assert event.confidence == pytest.approx(0.1)


@pytest.mark.parametrize("velocity,n", [(0.5, 3), (2.0, 20), (9.0, 5), (9.0, 25)])
def test_confidence_stays_in_bounds(velocity, n):
    seg = make_segment([make_motion(racket_wrist_velocity=velocity, is_horizontal=True, side_sign=1.0)
                        for _ in range(n)])
    event = ShotClassifier().classify(seg, RIGHT)
    assert 0.1 <= event.confidence <= 0.95


def test_long_swing_gets_duration_boost():
    seg = make_segment([forehand_motion() for _ in range(20)])
    event = ShotClassifier().classify(seg, RIGHT)
    assert event.duration == pytest.approx(1.9)
    assert event.confidence == pytest.approx(0.95 * 2.0 / 3.0 * 1.2)


def test_event_carries_segment_velocities():
    motions = [
        make_motion(racket_wrist_velocity=v, movement_intensity=m, is_horizontal=True, side_sign=1.0)
        for v, m in [(1.0, 0.6), (3.0, 1.4), (2.0, 1.8), (2.0, 1.0)]
    ]
    event = ShotClassifier().classify(make_segment(motions), RIGHT)
    assert event.peak_velocity == pytest.approx(3.0)
    assert event.peak_time == pytest.approx(1.1)
    assert event.max_velocity == pytest.approx(1.8)
    assert event.average_velocity == pytest.approx(2.0)
