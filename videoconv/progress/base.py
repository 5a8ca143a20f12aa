"""
Progress Estimator Base Interface
=================================
Abstract base class for progress sources used while a conversion is
outstanding. The remote service reports no progress, so the shipped
implementation simulates it; a real progress channel can replace it
without touching the controller.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional


ProgressCallback = Callable[[float], None]


class ProgressEstimator(ABC):
    """
    Abstract base class for progress estimators.

    Implementations:
        - SimulatedProgressEstimator: time-driven random increments
    """

    def __init__(self):
        self._value = 0.0
        self._on_progress: Optional[ProgressCallback] = None

    @property
    def value(self) -> float:
        """Latest estimate in [0, 100]."""
        return self._value

    @property
    @abstractmethod
    def is_running(self) -> bool:
        pass

    @abstractmethod
    def start(self, on_progress: ProgressCallback) -> None:
        """
        Begin estimating.

        Args:
            on_progress: Called with each new estimate on the event loop
        """
        pass

    @abstractmethod
    def stop(self) -> None:
        """Stop estimating. Must be idempotent; no callback fires afterwards."""
        pass

    def _publish(self, value: float) -> None:
        self._value = value
        if self._on_progress is not None:
            self._on_progress(value)
