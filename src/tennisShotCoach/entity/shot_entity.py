from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from tennisShotCoach.entity.pose_entity import Handedness, MotionDescriptor, NormalizedFeatures


class ShotType(str, Enum):
    """Shot archetype reported for a detected swing."""

    FOREHAND = "forehand"
    BACKHAND = "backhand"
    SERVE = "serve"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Display name, e.g. FOREHAND."""
        return self.value.upper()

    @classmethod
    def from_string(cls, s: str) -> "ShotType":
        s_lower = s.lower()
        for shot_type in cls:
            if shot_type.value == s_lower:
                return shot_type
        raise ValueError(f"Invalid shot type: {s}")


@dataclass(frozen=True)
class SegmentFrame:
    time: float
    motion: MotionDescriptor
    features: NormalizedFeatures


@dataclass
class ShotSegment:
    """
    Candidate swing being accumulated by the segmenter.
    max_velocity tracks movement intensity, peak_velocity the racket wrist.
    """
    start_time: float
    end_time: float
    frames: List[SegmentFrame] = field(default_factory=list)
    max_velocity: float = 0.0
    peak_velocity: float = 0.0
    peak_time: float = 0.0
    total_velocity: float = 0.0
    high_frames: int = 0

    @classmethod
    def start(cls, frame: SegmentFrame) -> "ShotSegment":
        seg = cls(start_time=frame.time, end_time=frame.time, peak_time=frame.time)
        seg.add(frame, high=True)
        return seg

    def add(self, frame: SegmentFrame, high: bool) -> None:
        velocity = frame.motion.racket_wrist_velocity
        self.frames.append(frame)
        self.end_time = frame.time
        self.max_velocity = max(self.max_velocity, frame.motion.movement_intensity)
        if velocity > self.peak_velocity:
            self.peak_velocity = velocity
            self.peak_time = frame.time
        self.total_velocity += velocity
        if high:
            self.high_frames += 1

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time

    @property
    def average_velocity(self) -> float:
        return self.total_velocity / len(self.frames) if self.frames else 0.0


@dataclass(frozen=True)
class ShotEvent:
    type: ShotType
    confidence: float
    reasoning: Tuple[str, ...]
    start_time: float
    end_time: float
    duration: float
    max_velocity: float
    peak_velocity: float
    peak_time: float
    average_velocity: float

    def contains(self, t: float) -> bool:
        return self.start_time <= t <= self.end_time

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": str(self.type),
            "label": self.type.label,
            "confidence": self.confidence,
            "reasoning": list(self.reasoning),
            "start_time": self.start_time,
            "end_time": self.end_time,
            "duration": self.duration,
            "max_velocity": self.max_velocity,
            "peak_velocity": self.peak_velocity,
            "peak_time": self.peak_time,
            "average_velocity": self.average_velocity,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ShotEvent":
        return cls(
            type=ShotType.from_string(d["type"]),
            confidence=float(d["confidence"]),
            reasoning=tuple(d.get("reasoning", ())),
            start_time=float(d["start_time"]),
            end_time=float(d["end_time"]),
            duration=float(d.get("duration", d["end_time"] - d["start_time"])),
            max_velocity=float(d.get("max_velocity", 0.0)),
            peak_velocity=float(d.get("peak_velocity", 0.0)),
            peak_time=float(d.get("peak_time", d["start_time"])),
            average_velocity=float(d.get("average_velocity", 0.0)),
        )


@dataclass(frozen=True)
class AnalysisSummary:
    total_frames: int
    processed_frames: int
    average_confidence: float
    handedness: Handedness
    shot_counts: Dict[str, int] = field(default_factory=dict)

    @property
    def num_shots(self) -> int:
        return sum(self.shot_counts.values())

    @property
    def confidence_label(self) -> str:
        if self.average_confidence > 0.7:
            return "High"
        if self.average_confidence > 0.4:
            return "Medium"
        return "Low"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_frames": self.total_frames,
            "processed_frames": self.processed_frames,
            "average_confidence": self.average_confidence,
            "confidence_label": self.confidence_label,
            "handedness": self.handedness.to_dict(),
            "num_shots": self.num_shots,
            "shot_counts": dict(self.shot_counts),
        }


@dataclass(frozen=True)
class ShotAnalysisResult:
    events: List[ShotEvent]
    summary: AnalysisSummary

    def shot_at(self, t: float) -> Optional[ShotEvent]:
        return shot_at(self.events, t)

    def to_dict(self) -> Dict[str, Any]:
        return {"summary": self.summary.to_dict(), "shots": [e.to_dict() for e in self.events]}


def shot_at(events: List[ShotEvent], t: float) -> Optional[ShotEvent]:
    """Event whose [start_time, end_time] contains t, for playback overlays."""
    for event in events:
        if event.contains(t):
            return event
    return None
