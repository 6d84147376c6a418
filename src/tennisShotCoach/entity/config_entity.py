from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class HandednessParams:
    min_observations: int = 3
    dominance_ratio: float = 1.2
    default_confidence: float = 0.5
    max_confidence: float = 0.95


@dataclass(frozen=True)
class SegmenterParams:
    min_shot_duration: float = 0.8
    max_shot_duration: float = 3.0
    fixed_high_threshold: float = 1.0
    fixed_low_threshold: float = 0.3
    high_threshold_sigma: float = 1.5
    low_threshold_sigma: float = 0.3
    velocity_window: int = 10
    min_high_frames: int = 2
    min_keypoint_confidence: float = 0.2


@dataclass(frozen=True)
class ClassifierParams:
    serve_weight: float = 2.0
    serve_wrist_height: float = -0.1
    forehand_weight: float = 1.5
    backhand_weight: float = 1.5
    two_handed_bonus: float = 0.5
    two_handed_distance: float = 0.5
    serve_divisor: float = 1.5
    groundstroke_divisor: float = 1.2
    coverage_keypoint_confidence: float = 0.5
    reference_peak_velocity: float = 3.0
    high_peak_velocity: float = 5.0
    high_peak_boost: float = 1.5
    long_duration: float = 1.5
    long_duration_boost: float = 1.2
    min_confidence: float = 0.1
    max_confidence: float = 0.95


@dataclass(frozen=True)
class InterpolationParams:
    velocity_blend: float = 0.7


@dataclass(frozen=True)
class ShotDetectionParams:
    # min_dt floors frame deltas so duplicate timestamps never divide by zero
    min_dt: float = 1e-3
    min_torso_length: float = 10.0
    min_shot_confidence: float = 0.25
    min_time_between_shots: float = 1.0
    handedness: HandednessParams = field(default_factory=HandednessParams)
    segmenter: SegmenterParams = field(default_factory=SegmenterParams)
    classifier: ClassifierParams = field(default_factory=ClassifierParams)
    interpolation: InterpolationParams = field(default_factory=InterpolationParams)


@dataclass(frozen=True)
class ShotAnalysisConfig:
    root_dir: Path
    observations_path: Path
    report_path: Path
    params: ShotDetectionParams
