from __future__ import annotations
from bisect import bisect_right
from typing import Optional, Sequence, Tuple
import numpy as np

from tennisShotCoach.entity.config_entity import InterpolationParams
from tennisShotCoach.entity.pose_entity import InterpolatedPose, Keypoint, PoseObservation


def quartic_ease_in_out(x: float) -> float:
    return 8 * x ** 4 if x < 0.5 else 1 - ((-2 * x + 2) ** 4) / 2


def blend_poses(before: PoseObservation, after: PoseObservation, t: float,
                velocity_blend: float = 0.7) -> InterpolatedPose:
    """
    Pose at before.time <= t < after.time.
    x,y = velocity_blend * (momentum prediction from `before`)
        + (1 - velocity_blend) * (quartic-eased linear interpolation)
    score and confidence follow the eased factor only.
    """
    span = after.time - before.time
    raw = (t - before.time) / span
    eased = quartic_ease_in_out(raw)

    b, a = before.to_array(), after.to_array()
    velocity = (a[:, :2] - b[:, :2]) / span
    predicted = b[:, :2] + velocity * (t - before.time)
    eased_linear = b[:, :2] + (a[:, :2] - b[:, :2]) * eased
    xy = velocity_blend * predicted + (1.0 - velocity_blend) * eased_linear
    score = b[:, 2] + (a[:, 2] - b[:, 2]) * eased

    keypoints = tuple(
        Keypoint(x=float(xy[i, 0]), y=float(xy[i, 1]), score=float(score[i]), name=kp.name)
        for i, kp in enumerate(before.keypoints)
    )
    confidence = before.confidence + (after.confidence - before.confidence) * eased
    return InterpolatedPose(time=t, keypoints=keypoints, confidence=float(confidence),
                            before_time=before.time, after_time=after.time, factor=eased)


class PoseInterpolator:
    """
    Read-only view over one observation stream answering "pose at time t".
    Safe to query concurrently; nothing is mutated after construction.
    """

    def __init__(self, stream: Sequence[PoseObservation],
                 params: InterpolationParams = InterpolationParams()):
        self.stream: Tuple[PoseObservation, ...] = tuple(sorted(stream, key=lambda o: o.time))
        self.params = params
        self._times = [o.time for o in self.stream]

    def __len__(self) -> int:
        return len(self.stream)

    def bracket(self, t: float) -> Tuple[Optional[PoseObservation], Optional[PoseObservation]]:
        """(last observation with time <= t, first observation with time > t)"""
        i = bisect_right(self._times, t)
        before = self.stream[i - 1] if i > 0 else None
        after = self.stream[i] if i < len(self.stream) else None
        return before, after

    def interpolate(self, t: float) -> Optional[PoseObservation]:
        before, after = self.bracket(t)
        if before is None or after is None:
            return before or after
        if t == before.time:
            return before
        if not (before.has_pose and after.has_pose):
            return before if before.has_pose else after
        return blend_poses(before, after, t, self.params.velocity_blend)

    def closest(self, t: float) -> Optional[PoseObservation]:
        """Nearest observation in time; ties go to the earlier one."""
        before, after = self.bracket(t)
        if before is None or after is None:
            return before or after
        return before if (t - before.time) <= (after.time - t) else after


def interpolate(stream: Sequence[PoseObservation], t: float,
                params: InterpolationParams = InterpolationParams()) -> Optional[PoseObservation]:
    return PoseInterpolator(stream, params).interpolate(t)
