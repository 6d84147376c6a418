from __future__ import annotations
from collections import Counter
from typing import List, Optional, Sequence

from tennisShotCoach import logger
from tennisShotCoach.components.segment_filter import filter_shot_events
from tennisShotCoach.components.shot_classifier import ShotClassifier
from tennisShotCoach.components.shot_segmenter import ShotSegmenter
from tennisShotCoach.core.pose.features import extract_tennis_features
from tennisShotCoach.core.pose.handedness import detect_handedness
from tennisShotCoach.core.pose.motion import analyze_motion
from tennisShotCoach.core.pose.normalize import hip_center_torso_scale
from tennisShotCoach.entity.config_entity import ShotAnalysisConfig, ShotDetectionParams
from tennisShotCoach.entity.pose_entity import Handedness, NormalizedFeatures, PoseObservation
from tennisShotCoach.entity.shot_entity import (
    AnalysisSummary, SegmentFrame, ShotAnalysisResult, ShotEvent, ShotSegment,
)
from tennisShotCoach.utils.common import load_pose_observations, save_json


class ShotAnalysis:
    """
    - features -> torso normalization (per observation, independent)
    - handedness: one global decision for the whole stream
    - motion per adjacent pair -> hysteresis segmentation (sequential)
    - classify each closed segment, keep confidence >= min_shot_confidence
    - drop overlaps / enforce min gap between shots
    An empty event list means "no shots found", never a failure.
    """

    def __init__(self, params: Optional[ShotDetectionParams] = None,
                 config: Optional[ShotAnalysisConfig] = None):
        self.config = config
        if params is None:
            params = config.params if config is not None else ShotDetectionParams()
        self.params = params
        self.segmenter = ShotSegmenter(params.segmenter)
        self.classifier = ShotClassifier(params.classifier)

    # ---------- stages ----------
    def normalize_stream(self, stream: Sequence[PoseObservation]) -> List[Optional[NormalizedFeatures]]:
        return [hip_center_torso_scale(extract_tennis_features(obs), self.params.min_torso_length)
                for obs in stream]

    def motion_frames(self, normalized: Sequence[Optional[NormalizedFeatures]],
                      handedness: Handedness) -> List[SegmentFrame]:
        frames: List[SegmentFrame] = []
        for prev, curr in zip(normalized[:-1], normalized[1:]):
            motion = analyze_motion(curr, prev, handedness, self.params.min_dt)
            if motion is None:
                continue
            frames.append(SegmentFrame(time=curr.time, motion=motion, features=curr))
        return frames

    def classify_segments(self, segments: Sequence[ShotSegment], handedness: Handedness) -> List[ShotEvent]:
        accepted: List[ShotEvent] = []
        for seg in segments:
            event = self.classifier.classify(seg, handedness)
            if event.confidence >= self.params.min_shot_confidence:
                accepted.append(event)
            else:
                logger.debug(f"rejected {event.type} at {seg.start_time:.2f}s "
                             f"(confidence {event.confidence:.2f} < {self.params.min_shot_confidence})")
        return accepted

    def summarize(self, stream: Sequence[PoseObservation],
                  normalized: Sequence[Optional[NormalizedFeatures]],
                  handedness: Handedness,
                  events: Sequence[ShotEvent]) -> AnalysisSummary:
        total = len(stream)
        avg_conf = sum(o.confidence for o in stream) / total if total else 0.0
        return AnalysisSummary(
            total_frames=total,
            processed_frames=sum(1 for f in normalized if f is not None),
            average_confidence=float(avg_conf),
            handedness=handedness,
            shot_counts=dict(Counter(str(e.type) for e in events)),
        )

    # ---------- entry points ----------
    def analyze(self, stream: Sequence[PoseObservation]) -> ShotAnalysisResult:
        stream = sorted(stream, key=lambda o: o.time)
        normalized = self.normalize_stream(stream)
        handedness = detect_handedness(normalized, self.params.handedness, self.params.min_dt)
        frames = self.motion_frames(normalized, handedness)
        segments = self.segmenter.scan(frames)
        events = filter_shot_events(self.classify_segments(segments, handedness),
                                    self.params.min_time_between_shots)
        summary = self.summarize(stream, normalized, handedness, events)
        logger.info(f"analyzed {summary.total_frames} frames ({summary.processed_frames} usable) | "
                    f"racket hand={handedness.racket_hand} ({handedness.confidence:.2f}) | "
                    f"candidates={len(segments)} shots={len(events)}")
        return ShotAnalysisResult(events=events, summary=summary)

    def classify_shots(self, stream: Sequence[PoseObservation]) -> List[ShotEvent]:
        return self.analyze(stream).events

    def run(self) -> ShotAnalysisResult:
        """
        Stage entry: read the observation file from config, analyze, write the report.
        """
        if self.config is None:
            raise ValueError("ShotAnalysis.run() needs a ShotAnalysisConfig")
        stream = load_pose_observations(self.config.observations_path)
        result = self.analyze(stream)
        save_json(self.config.report_path, result.to_dict())
        return result
