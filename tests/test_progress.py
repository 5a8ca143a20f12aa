"""
Progress Estimator Tests
========================
The simulated estimate must keep moving yet stay below the ceiling.
"""

import asyncio
import random

import pytest
from hypothesis import given, settings, strategies as st

from videoconv.progress import ProgressEstimator, SimulatedProgressEstimator


class TestNextValue:

    def test_walk_stays_below_ceiling(self):
        estimator = SimulatedProgressEstimator(rng=random.Random(7))
        value = 0.0
        for _ in range(1000):
            following = estimator.next_value(value)
            assert value <= following < 90.0
            value = following
        assert value > 85.0

    def test_near_ceiling_halves_gap(self):
        class MaxRandom(random.Random):
            def uniform(self, a, b):
                return b

        estimator = SimulatedProgressEstimator(max_step=10.0, rng=MaxRandom())
        assert estimator.next_value(80.0) == 85.0
        assert estimator.next_value(50.0) == 60.0

    @pytest.mark.property
    @given(
        current=st.floats(min_value=0.0, max_value=89.999, allow_nan=False),
        seed=st.integers(min_value=0, max_value=2 ** 32 - 1),
        max_step=st.floats(min_value=0.1, max_value=50.0),
    )
    @settings(max_examples=200)
    def test_monotonic_and_bounded(self, current, seed, max_step):
        estimator = SimulatedProgressEstimator(max_step=max_step, rng=random.Random(seed))
        following = estimator.next_value(current)
        assert current <= following < 90.0


class TestEstimatorLifecycle:

    def test_is_progress_estimator(self):
        assert isinstance(SimulatedProgressEstimator(), ProgressEstimator)

    @pytest.mark.asyncio
    async def test_publishes_until_stopped(self):
        values = []
        estimator = SimulatedProgressEstimator(interval=0.01, rng=random.Random(1))
        estimator.start(values.append)
        assert estimator.is_running
        await asyncio.sleep(0.08)
        estimator.stop()

        count = len(values)
        assert count >= 2
        assert values == sorted(values)
        assert all(v < 90.0 for v in values)
        assert estimator.value == values[-1]

        await asyncio.sleep(0.05)
        assert len(values) == count
        assert not estimator.is_running

    def test_stop_before_start(self):
        SimulatedProgressEstimator().stop()
