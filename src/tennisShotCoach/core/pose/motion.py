from __future__ import annotations
import math
from typing import Optional
import numpy as np

from tennisShotCoach.entity.pose_entity import Handedness, MotionDescriptor, NormalizedFeatures


def _dist(a, b) -> float:
    return float(np.hypot(a.x - b.x, a.y - b.y))


def _shoulder_angle(f: NormalizedFeatures) -> float:
    return math.atan2(f.right_shoulder.y - f.left_shoulder.y,
                      f.right_shoulder.x - f.left_shoulder.x)


def analyze_motion(curr: Optional[NormalizedFeatures],
                   prev: Optional[NormalizedFeatures],
                   handedness: Handedness,
                   min_dt: float = 1e-3) -> Optional[MotionDescriptor]:
    """
    Racket-hand aware motion between two consecutive normalized frames.
    Returns None when either frame failed normalization.
    """
    if curr is None or prev is None:
        return None
    dt = max(min_dt, curr.time - prev.time)

    if handedness.is_right:
        rw, rw0, re, re0, rs = curr.right_wrist, prev.right_wrist, curr.right_elbow, prev.right_elbow, curr.right_shoulder
        ow, ow0, os_ = curr.left_wrist, prev.left_wrist, curr.left_shoulder
    else:
        rw, rw0, re, re0, rs = curr.left_wrist, prev.left_wrist, curr.left_elbow, prev.left_elbow, curr.left_shoulder
        ow, ow0, os_ = curr.right_wrist, prev.right_wrist, curr.right_shoulder

    racket_v = _dist(rw, rw0) / dt
    off_v = _dist(ow, ow0) / dt
    elbow_v = _dist(re, re0) / dt

    # delta wrapped into (-pi, pi]
    d_angle = _shoulder_angle(curr) - _shoulder_angle(prev)
    d_angle = math.atan2(math.sin(d_angle), math.cos(d_angle))

    sh_x, sh_y = curr.mid_shoulder
    # +1 when the wrist is on the same side of the body as the racket shoulder
    facing = 1.0 if rs.x >= os_.x else -1.0
    side_sign = float(np.sign(rw.x - sh_x)) * facing

    dx, dy = rw.x - rw0.x, rw.y - rw0.y
    return MotionDescriptor(
        dt=dt,
        racket_wrist_velocity=racket_v,
        off_wrist_velocity=off_v,
        racket_elbow_velocity=elbow_v,
        shoulder_rotation_rate=d_angle / dt,
        hands_distance=_dist(rw, ow),
        racket_wrist_height=rw.y - sh_y,
        off_wrist_height=ow.y - sh_y,
        side_sign=side_sign,
        is_horizontal=abs(dx) > abs(dy),
        is_vertical=abs(dy) > abs(dx),
        is_upward=dy < 0,
        movement_intensity=(racket_v + off_v) / 2.0,
        keypoint_confidence=min(rw.score, re.score, curr.left_shoulder.score, curr.right_shoulder.score),
    )
