from __future__ import annotations
from typing import Optional

from tennisShotCoach.constants import TENNIS_LANDMARKS
from tennisShotCoach.entity.pose_entity import PoseObservation, TennisFeatures


def extract_tennis_features(obs: Optional[PoseObservation]) -> Optional[TennisFeatures]:
    """
    Project one observation onto the swing landmarks (wrists, elbows,
    shoulders, hips, nose). Returns None when the frame carries no pose.
    """
    if obs is None or not obs.has_pose:
        return None
    kps = obs.keypoints
    points = {name: kps[idx] for name, idx in TENNIS_LANDMARKS.items()}
    return TennisFeatures(**points, confidence=obs.confidence, time=obs.time)
