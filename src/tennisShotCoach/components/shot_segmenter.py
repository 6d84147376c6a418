from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from tennisShotCoach import logger
from tennisShotCoach.core.signals import VelocityWindow
from tennisShotCoach.entity.config_entity import SegmenterParams
from tennisShotCoach.entity.shot_entity import SegmentFrame, ShotSegment


@dataclass
class SegmenterState:
    """Accumulator carried through the scan: open segment (None = idle) + velocity window."""
    window: VelocityWindow
    segment: Optional[ShotSegment] = None
    last_time: Optional[float] = None

    @property
    def accumulating(self) -> bool:
        return self.segment is not None


class ShotSegmenter:
    """
    Hysteresis scan over racket-wrist velocity.
      idle -> accumulating : velocity > high threshold
      accumulating         : velocity > high (high frame) or >= low (kept)
      accumulating -> idle : velocity < low after min_shot_duration with
                             >= min_high_frames high frames, or forced once
                             the segment runs past max_shot_duration
    Thresholds come from the window of previously accepted velocities.
    """

    def __init__(self, params: SegmenterParams = SegmenterParams()):
        self.params = params

    def initial_state(self) -> SegmenterState:
        return SegmenterState(window=VelocityWindow(self.params.velocity_window))

    def _emittable(self, segment: ShotSegment) -> bool:
        return segment.high_frames >= self.params.min_high_frames

    def step(self, state: SegmenterState, frame: SegmentFrame) -> Tuple[SegmenterState, Optional[ShotSegment]]:
        p = self.params
        if frame.motion.keypoint_confidence < p.min_keypoint_confidence:
            return state, None

        velocity = frame.motion.racket_wrist_velocity
        high, low = state.window.thresholds(p.fixed_high_threshold, p.fixed_low_threshold,
                                            p.high_threshold_sigma, p.low_threshold_sigma)
        state.window.push(velocity)
        state.last_time = frame.time

        closed = None
        segment = state.segment
        if segment is not None and frame.time - segment.start_time > p.max_shot_duration:
            logger.debug(f"forced close of segment at {segment.start_time:.2f}s (> {p.max_shot_duration}s)")
            closed = segment if self._emittable(segment) else None
            segment = None

        if segment is None:
            if velocity > high:
                segment = ShotSegment.start(frame)
        elif velocity > high:
            segment.add(frame, high=True)
        elif velocity >= low:
            segment.add(frame, high=False)
        elif frame.time - segment.start_time > p.min_shot_duration and self._emittable(segment):
            closed, segment = segment, None

        state.segment = segment
        return state, closed

    def finish(self, state: SegmenterState) -> Optional[ShotSegment]:
        """End of stream: flush a still-open segment that qualifies."""
        segment = state.segment
        state.segment = None
        if segment is None or state.last_time is None:
            return None
        if self._emittable(segment) and state.last_time - segment.start_time >= self.params.min_shot_duration:
            return segment
        return None

    def scan(self, frames: Iterable[SegmentFrame]) -> List[ShotSegment]:
        """Fold over time-ordered frames; returns closed candidate segments."""
        state = self.initial_state()
        segments: List[ShotSegment] = []
        for frame in frames:
            state, closed = self.step(state, frame)
            if closed is not None:
                segments.append(closed)
        tail = self.finish(state)
        if tail is not None:
            segments.append(tail)
        return segments
