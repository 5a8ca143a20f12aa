"""
Simulated Progress Estimator
============================
Time-driven estimate for an opaque remote call.

Every tick adds a random increment. The estimate approaches the ceiling
but never reaches it, so the bar cannot look finished before the server
has answered, and it keeps moving because ticks are unconditional.
"""

import random
from typing import Optional

from videoconv.concurrency import PeriodicTask
from videoconv.progress.base import ProgressEstimator, ProgressCallback


class SimulatedProgressEstimator(ProgressEstimator):
    """
    Random-walk estimator bounded by a ceiling.

    Example:
        estimator = SimulatedProgressEstimator(interval=0.2, max_step=10.0)
        estimator.start(lambda pct: print(f"{pct:.0f}%"))
        ...
        estimator.stop()
    """

    def __init__(
        self,
        interval: float = 0.2,
        max_step: float = 10.0,
        ceiling: float = 90.0,
        rng: Optional[random.Random] = None
    ):
        super().__init__()
        self.interval = interval
        self.max_step = max_step
        self.ceiling = ceiling
        self._rng = rng or random.Random()
        self._ticker: Optional[PeriodicTask] = None

    @property
    def is_running(self) -> bool:
        return self._ticker is not None and self._ticker.is_running

    def next_value(self, current: float) -> float:
        """
        Compute the estimate following `current`.

        Past the ceiling the step is replaced by half of the remaining gap.
        The result is non-decreasing and strictly below the ceiling.
        """
        candidate = current + self._rng.uniform(0.0, self.max_step)
        if candidate >= self.ceiling:
            candidate = current + (self.ceiling - current) / 2
            if candidate >= self.ceiling:
                # float gap exhausted
                candidate = current
        return candidate

    def start(self, on_progress: ProgressCallback) -> None:
        if self.is_running:
            return
        self._on_progress = on_progress
        self._ticker = PeriodicTask(self.interval, self._tick, name="progress-estimator")
        self._ticker.start()

    def _tick(self) -> None:
        self._publish(self.next_value(self._value))

    def stop(self) -> None:
        if self._ticker is not None:
            self._ticker.stop()
            self._ticker = None
        self._on_progress = None
