"""
In-process batch API.

    classify_shots(stream) -> List[ShotEvent]
    interpolate(stream, t) -> pose at t (None for an empty stream)
"""
from __future__ import annotations
from typing import List, Optional, Sequence

from tennisShotCoach.components.shot_analysis import ShotAnalysis
from tennisShotCoach.core.signals.interpolate import PoseInterpolator
from tennisShotCoach.entity.config_entity import ShotDetectionParams
from tennisShotCoach.entity.pose_entity import PoseObservation
from tennisShotCoach.entity.shot_entity import ShotAnalysisResult, ShotEvent


def classify_shots(stream: Sequence[PoseObservation],
                   params: Optional[ShotDetectionParams] = None) -> List[ShotEvent]:
    return ShotAnalysis(params).classify_shots(stream)


def analyze(stream: Sequence[PoseObservation],
            params: Optional[ShotDetectionParams] = None) -> ShotAnalysisResult:
    """events plus aggregate statistics (frame counts, mean confidence, handedness)"""
    return ShotAnalysis(params).analyze(stream)


def interpolate(stream: Sequence[PoseObservation], t: float,
                params: Optional[ShotDetectionParams] = None) -> Optional[PoseObservation]:
    params = params or ShotDetectionParams()
    return PoseInterpolator(stream, params.interpolation).interpolate(t)
