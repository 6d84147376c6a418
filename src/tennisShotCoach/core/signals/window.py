# src/tennisShotCoach/core/signals/window.py
from __future__ import annotations
from collections import deque
from typing import Iterable, Tuple
import numpy as np


class VelocityWindow:
    """
    Fixed-capacity queue of the most recent accepted velocities.
    Oldest values drop out once `capacity` is reached.
    """

    def __init__(self, capacity: int = 10, values: Iterable[float] = ()):
        assert capacity >= 1, "window capacity must be positive"
        self.capacity = capacity
        self._values = deque(values, maxlen=capacity)

    def __len__(self) -> int:
        return len(self._values)

    def push(self, v: float) -> None:
        self._values.append(float(v))

    def mean(self) -> float:
        return float(np.mean(self._values)) if self._values else 0.0

    def std(self) -> float:
        """population standard deviation (ddof=0)"""
        return float(np.std(self._values)) if self._values else 0.0

    def thresholds(self,
                   fixed_high: float,
                   fixed_low: float,
                   high_sigma: float = 1.5,
                   low_sigma: float = 0.3) -> Tuple[float, float]:
        """
        Adaptive hysteresis band: (high, low).
        high = max(mean + high_sigma*std, fixed_high)
        low  = max(mean + low_sigma*std,  fixed_low)
        """
        mu, sd = self.mean(), self.std()
        high = max(mu + high_sigma * sd, fixed_high)
        low = max(mu + low_sigma * sd, fixed_low)
        return high, low
