from __future__ import annotations
from typing import Dict, List

from tennisShotCoach.entity.config_entity import ClassifierParams
from tennisShotCoach.entity.pose_entity import Handedness
from tennisShotCoach.entity.shot_entity import ShotEvent, ShotSegment, ShotType


class ShotClassifier:
    """
    Hand-tuned scoring of a closed segment against serve / forehand / backhand.
    Every frame votes with weight = its keypoint confidence:
      serve    : upward wrist motion with the wrist above the shoulder line
      forehand : horizontal swing on the racket-hand side
      backhand : horizontal swing across the body (+ bonus if hands together)
    """

    # evaluation order doubles as the tie-break
    ORDER = (ShotType.SERVE, ShotType.FOREHAND, ShotType.BACKHAND)

    def __init__(self, params: ClassifierParams = ClassifierParams()):
        self.params = params

    def score(self, segment: ShotSegment) -> Dict[ShotType, float]:
        p = self.params
        scores = {t: 0.0 for t in self.ORDER}
        for frame in segment.frames:
            m = frame.motion
            w = m.keypoint_confidence
            if m.is_upward and m.racket_wrist_height < p.serve_wrist_height:
                scores[ShotType.SERVE] += p.serve_weight * w
            if m.is_horizontal and m.side_sign > 0:
                scores[ShotType.FOREHAND] += p.forehand_weight * w
            if m.is_horizontal and m.side_sign < 0:
                scores[ShotType.BACKHAND] += p.backhand_weight * w
                if m.hands_distance < p.two_handed_distance:
                    scores[ShotType.BACKHAND] += p.two_handed_bonus * w
        return scores

    def _confidence(self, shot_type: ShotType, best: float, segment: ShotSegment) -> float:
        p = self.params
        n = len(segment.frames)
        if shot_type == ShotType.UNKNOWN or n == 0:
            return p.min_confidence

        divisor = p.serve_divisor if shot_type == ShotType.SERVE else p.groundstroke_divisor
        confidence = min(best / (n * divisor), p.max_confidence)

        coverage = sum(1 for f in segment.frames
                       if f.motion.keypoint_confidence > p.coverage_keypoint_confidence) / n
        peak_factor = min(segment.peak_velocity / p.reference_peak_velocity, 1.0)
        confidence *= coverage * peak_factor

        if segment.peak_velocity > p.high_peak_velocity:
            confidence = min(confidence * p.high_peak_boost, p.max_confidence)
        if segment.duration > p.long_duration:
            confidence = min(confidence * p.long_duration_boost, p.max_confidence)
        return max(confidence, p.min_confidence)

    def _reasoning(self, shot_type: ShotType, segment: ShotSegment, handedness: Handedness) -> List[str]:
        reasoning = [
            f"Racket hand: {handedness.racket_hand} ({handedness.confidence:.0%} confidence)",
            f"Peak wrist velocity: {segment.peak_velocity:.2f} torso/s",
            f"Duration: {segment.duration:.2f}s",
        ]
        if shot_type == ShotType.SERVE:
            reasoning += ["Upward motion detected", "Wrist above shoulder level"]
        elif shot_type == ShotType.FOREHAND:
            reasoning += ["Horizontal swing pattern", "Swing on racket-hand side"]
        elif shot_type == ShotType.BACKHAND:
            reasoning += ["Horizontal swing pattern", "Cross-body swing"]
            if any(f.motion.hands_distance < self.params.two_handed_distance for f in segment.frames
                   if f.motion.is_horizontal and f.motion.side_sign < 0):
                reasoning.append("Hands close together (two-handed)")
        else:
            reasoning += ["Insufficient movement patterns", "Low confidence classification"]
        return reasoning

    def classify(self, segment: ShotSegment, handedness: Handedness) -> ShotEvent:
        scores = self.score(segment)
        best = max(scores.values())
        shot_type = ShotType.UNKNOWN
        if best > 0:
            shot_type = next(t for t in self.ORDER if scores[t] == best)

        return ShotEvent(
            type=shot_type,
            confidence=float(self._confidence(shot_type, best, segment)),
            reasoning=tuple(self._reasoning(shot_type, segment, handedness)),
            start_time=segment.start_time,
            end_time=segment.end_time,
            duration=segment.duration,
            max_velocity=segment.max_velocity,
            peak_velocity=segment.peak_velocity,
            peak_time=segment.peak_time,
            average_velocity=segment.average_velocity,
        )
