"""
Progress Module
===============
Progress estimation while a remote conversion is outstanding.
"""

from .base import ProgressEstimator, ProgressCallback
from .simulated import SimulatedProgressEstimator

__all__ = [
    "ProgressEstimator",
    "ProgressCallback",
    "SimulatedProgressEstimator",
]
