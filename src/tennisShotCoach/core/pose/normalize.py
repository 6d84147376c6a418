from __future__ import annotations
from dataclasses import replace
from typing import Optional
import numpy as np

from tennisShotCoach.entity.pose_entity import Keypoint, NormalizedFeatures, TennisFeatures


def torso_frame(features: TennisFeatures):
    """mid_hip (x,y), mid_shoulder (x,y), torso_length in raw coordinates"""
    mid_hip = np.array([(features.left_hip.x + features.right_hip.x) / 2.0,
                        (features.left_hip.y + features.right_hip.y) / 2.0])
    mid_shoulder = np.array([(features.left_shoulder.x + features.right_shoulder.x) / 2.0,
                             (features.left_shoulder.y + features.right_shoulder.y) / 2.0])
    torso_length = float(np.linalg.norm(mid_shoulder - mid_hip))
    return mid_hip, mid_shoulder, torso_length


def hip_center_torso_scale(features: Optional[TennisFeatures],
                           min_torso_length: float = 10.0) -> Optional[NormalizedFeatures]:
    """
    Move mid-hip to the origin and divide by torso length, so velocities are
    expressed in torso lengths instead of pixels (camera distance/zoom invariant).
    Returns None when hips/shoulders collapse (torso_length < min_torso_length).
    """
    if features is None:
        return None
    mid_hip, _, torso_length = torso_frame(features)
    if torso_length < min_torso_length:
        return None

    def scale(kp: Keypoint) -> Keypoint:
        return replace(kp, x=(kp.x - mid_hip[0]) / torso_length,
                       y=(kp.y - mid_hip[1]) / torso_length)

    points = {name: scale(kp) for name, kp in features.landmarks().items()}
    return NormalizedFeatures(
        **points,
        confidence=features.confidence,
        time=features.time,
        torso_length=torso_length,
        mid_hip=(float(mid_hip[0]), float(mid_hip[1])),
    )
