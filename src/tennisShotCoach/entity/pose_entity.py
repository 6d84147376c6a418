from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple
import numpy as np

from tennisShotCoach.constants import KEYPOINT_NAMES, NUM_KEYPOINTS, TENNIS_LANDMARKS


@dataclass(frozen=True)
class Keypoint:
    x: float
    y: float
    score: float
    name: str

    @classmethod
    def from_dict(cls, d: Dict[str, Any], index: int) -> "Keypoint":
        return cls(
            x=float(d["x"]),
            y=float(d["y"]),
            score=float(d.get("score", 0.0)),
            name=str(d["name"]) if "name" in d else KEYPOINT_NAMES[index],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y, "score": self.score, "name": self.name}


@dataclass(frozen=True)
class PoseObservation:
    """
    One pose sample of the subject at `time` seconds.
    keypoints: 17 COCO keypoints, or empty when the detector found nobody.
    confidence: mean keypoint score unless given explicitly.
    """
    time: float
    keypoints: Tuple[Keypoint, ...]
    confidence: Optional[float] = None

    def __post_init__(self):
        kps = tuple(self.keypoints)
        if kps and len(kps) != NUM_KEYPOINTS:
            raise ValueError(f"expected {NUM_KEYPOINTS} keypoints, got {len(kps)}")
        object.__setattr__(self, "keypoints", kps)
        if self.confidence is None:
            conf = float(np.mean([kp.score for kp in kps])) if kps else 0.0
            object.__setattr__(self, "confidence", conf)

    @property
    def has_pose(self) -> bool:
        return len(self.keypoints) == NUM_KEYPOINTS

    def to_array(self) -> np.ndarray:
        """(V,3) float array of [x, y, score]"""
        return np.array([[kp.x, kp.y, kp.score] for kp in self.keypoints], dtype=np.float64).reshape(-1, 3)

    @classmethod
    def from_array(cls, time: float, kpts_v3: np.ndarray, confidence: Optional[float] = None,
                   names: Optional[Tuple[str, ...]] = None) -> "PoseObservation":
        names = names or tuple(KEYPOINT_NAMES)
        kps = tuple(
            Keypoint(x=float(x), y=float(y), score=float(s), name=names[i])
            for i, (x, y, s) in enumerate(np.asarray(kpts_v3, dtype=np.float64))
        )
        return cls(time=float(time), keypoints=kps, confidence=confidence)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "PoseObservation":
        raw = d.get("keypoints") or []
        if len(raw) not in (0, NUM_KEYPOINTS):
            raise ValueError(f"expected {NUM_KEYPOINTS} keypoints, got {len(raw)}")
        kps = tuple(Keypoint.from_dict(kp, i) for i, kp in enumerate(raw))
        conf = d.get("confidence")
        return cls(time=float(d["time"]), keypoints=kps,
                   confidence=None if conf is None else float(conf))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "time": self.time,
            "keypoints": [kp.to_dict() for kp in self.keypoints],
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class InterpolatedPose(PoseObservation):
    """Pose synthesized between two observations; factor is the eased blend weight."""
    before_time: Optional[float] = None
    after_time: Optional[float] = None
    factor: float = 0.0


@dataclass(frozen=True)
class TennisFeatures:
    left_wrist: Keypoint
    right_wrist: Keypoint
    left_elbow: Keypoint
    right_elbow: Keypoint
    left_shoulder: Keypoint
    right_shoulder: Keypoint
    left_hip: Keypoint
    right_hip: Keypoint
    nose: Keypoint
    confidence: float
    time: float

    def landmarks(self) -> Dict[str, Keypoint]:
        return {name: getattr(self, name) for name in TENNIS_LANDMARKS}


@dataclass(frozen=True)
class NormalizedFeatures(TennisFeatures):
    """
    TennisFeatures in body space: mid-hip at the origin, torso length = 1.
    torso_length and mid_hip keep the raw (pixel) values used for the transform.
    """
    torso_length: float = 1.0
    mid_hip: Tuple[float, float] = (0.0, 0.0)

    @property
    def mid_shoulder(self) -> Tuple[float, float]:
        return ((self.left_shoulder.x + self.right_shoulder.x) / 2.0,
                (self.left_shoulder.y + self.right_shoulder.y) / 2.0)


@dataclass(frozen=True)
class Handedness:
    racket_hand: str = "right"
    confidence: float = 0.5

    @property
    def is_right(self) -> bool:
        return self.racket_hand == "right"

    def to_dict(self) -> Dict[str, Any]:
        return {"racket_hand": self.racket_hand, "confidence": self.confidence}


@dataclass(frozen=True)
class MotionDescriptor:
    """
    Motion between two consecutive frames, in torso lengths per second.
    Heights are relative to the shoulder line (negative = above shoulders).
    side_sign is +1 on the racket-hand side of the body, -1 across it.
    """
    dt: float
    racket_wrist_velocity: float
    off_wrist_velocity: float
    racket_elbow_velocity: float
    shoulder_rotation_rate: float
    hands_distance: float
    racket_wrist_height: float
    off_wrist_height: float
    side_sign: float
    is_horizontal: bool
    is_vertical: bool
    is_upward: bool
    movement_intensity: float
    keypoint_confidence: float
