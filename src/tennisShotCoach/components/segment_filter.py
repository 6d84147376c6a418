from __future__ import annotations
from typing import Iterable, List

from tennisShotCoach.entity.shot_entity import ShotEvent


def filter_shot_events(events: Iterable[ShotEvent], min_time_between_shots: float = 1.0) -> List[ShotEvent]:
    """
    Sort by start time and keep only events that start at least
    `min_time_between_shots` after the previously kept one ended. A clash
    keeps the more confident of the two (the earlier one on equal confidence).
    """
    kept: List[ShotEvent] = []
    for event in sorted(events, key=lambda e: e.start_time):
        if not kept or event.start_time - kept[-1].end_time >= min_time_between_shots:
            kept.append(event)
        elif event.confidence > kept[-1].confidence:
            kept[-1] = event
    return kept
