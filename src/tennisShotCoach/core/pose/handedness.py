from __future__ import annotations
from typing import Optional, Sequence
import numpy as np

from tennisShotCoach.entity.config_entity import HandednessParams
from tennisShotCoach.entity.pose_entity import Handedness, NormalizedFeatures


def _wrist_speed(prev, curr, dt: float) -> float:
    return float(np.hypot(curr.x - prev.x, curr.y - prev.y)) / dt


def detect_handedness(normalized: Sequence[Optional[NormalizedFeatures]],
                      params: HandednessParams = HandednessParams(),
                      min_dt: float = 1e-3) -> Handedness:
    """
    One pass over the whole stream: each wrist's speed is weighted by how far
    it sits from the body centre (|x| in torso units) and averaged over valid
    frame pairs. The racket hand must beat the other by dominance_ratio,
    otherwise the conservative default (right, default_confidence) is kept.
    normalized: per-observation features in time order, None for invalid frames.
    """
    default = Handedness("right", params.default_confidence)
    if len(normalized) < params.min_observations:
        return default

    left_total, right_total, n = 0.0, 0.0, 0
    for prev, curr in zip(normalized[:-1], normalized[1:]):
        if prev is None or curr is None:
            continue
        dt = max(min_dt, curr.time - prev.time)
        left_total += _wrist_speed(prev.left_wrist, curr.left_wrist, dt) * abs(curr.left_wrist.x)
        right_total += _wrist_speed(prev.right_wrist, curr.right_wrist, dt) * abs(curr.right_wrist.x)
        n += 1

    if n == 0:
        return default

    left_score, right_score = left_total / n, right_total / n
    if right_score > params.dominance_ratio * left_score:
        hand, winner = "right", right_score
    elif left_score > params.dominance_ratio * right_score:
        hand, winner = "left", left_score
    else:
        return default

    confidence = min(winner / (left_score + right_score), params.max_confidence)
    return Handedness(hand, float(confidence))
