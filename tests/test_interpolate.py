import numpy as np
import pytest

from conftest import make_pose
from tennisShotCoach.core.signals import PoseInterpolator, interpolate, quartic_ease_in_out
from tennisShotCoach.entity.config_entity import InterpolationParams
from tennisShotCoach.entity.pose_entity import InterpolatedPose, PoseObservation


def flat_pose(time, x, score):
    kpts = np.zeros((17, 3))
    kpts[:, 0] = x
    kpts[:, 1] = 2 * x
    kpts[:, 2] = score
    return PoseObservation.from_array(time, kpts)


@pytest.fixture
def pair():
    return [flat_pose(1.0, 0.0, 0.5), flat_pose(2.0, 100.0, 0.9)]


@pytest.mark.parametrize("x,expected", [(0.0, 0.0), (0.25, 0.03125), (0.5, 0.5), (0.75, 0.96875), (1.0, 1.0)])
def test_quartic_ease(x, expected):
    assert quartic_ease_in_out(x) == pytest.approx(expected)


def test_blend_between_observations(pair):
    pose = interpolate(pair, 1.25)
    assert isinstance(pose, InterpolatedPose)
    # 0.7 * 25 + 0.3 * (100 * 0.03125)
    assert pose.keypoints[0].x == pytest.approx(18.4375)
    assert pose.keypoints[0].y == pytest.approx(36.875)
    assert pose.keypoints[0].score == pytest.approx(0.5125)
    assert pose.confidence == pytest.approx(0.5125)
    assert pose.factor == pytest.approx(0.03125)
    assert (pose.before_time, pose.after_time) == (1.0, 2.0)
    assert pose.keypoints[0].name == "nose"


def test_midpoint_is_linear(pair):
    pose = interpolate(pair, 1.5)
    assert pose.keypoints[5].x == pytest.approx(50.0)


def test_pure_linear_when_blend_is_zero(pair):
    pose = interpolate(pair, 1.25, InterpolationParams(velocity_blend=0.0))
    assert pose.keypoints[0].x == pytest.approx(3.125)


def test_outside_the_stream_returns_nearest_endpoint(pair):
    assert interpolate(pair, 0.2) is pair[0]
    assert interpolate(pair, 7.0) is pair[1]


def test_exact_observation_time_returns_it(pair):
    assert interpolate(pair, 1.0) is pair[0]
    assert interpolate(pair, 2.0) is pair[1]


def test_empty_stream():
    assert interpolate([], 1.0) is None
    assert PoseInterpolator([]).closest(1.0) is None


def test_side_without_pose_falls_back():
    empty = PoseObservation(time=2.0, keypoints=())
    pose = make_pose(1.0)
    assert interpolate([pose, empty], 1.5) is pose
    assert interpolate([empty, make_pose(3.0)], 2.5).time == 3.0


def test_unsorted_stream_is_sorted(pair):
    assert interpolate(list(reversed(pair)), 1.25).keypoints[0].x == pytest.approx(18.4375)


def test_closest_ties_go_to_earlier(pair):
    interp = PoseInterpolator(pair)
    assert interp.closest(1.5) is pair[0]
    assert interp.closest(1.51) is pair[1]
    assert interp.bracket(1.2) == (pair[0], pair[1])
    assert len(interp) == 2


def test_bracket_selection_and_no_extrapolation():
    stream = [flat_pose(float(t), 10.0 * t, 0.9) for t in range(3)]
    pose = interpolate(stream, 1.5)
    assert (pose.before_time, pose.after_time) == (1.0, 2.0)
    assert interpolate(stream, 2.5) is stream[2]
