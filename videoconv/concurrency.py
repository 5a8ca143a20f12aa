"""
Concurrency Module
===================
Event-loop primitives for the request controller.

Everything here runs on the asyncio loop that owns the controller:
timers and periodic ticks never spawn threads, and only run_blocking
moves work (blocking HTTP I/O) off the loop.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Optional, TypeVar


logger = logging.getLogger(__name__)

T = TypeVar('T')


class GenerationCounter:
    """
    Monotonic per-request token.

    Every new request (or reset) advances the counter. Asynchronous
    completions capture the value at start and compare it on arrival;
    a mismatch means the work belongs to a superseded request.
    """

    def __init__(self, start: int = 0):
        self._value = start

    @property
    def current(self) -> int:
        return self._value

    def advance(self) -> int:
        """Start a new generation and return its token."""
        self._value += 1
        return self._value

    def is_current(self, token: int) -> bool:
        """Check if a captured token still matches the live request."""
        return token == self._value


class DelayedCall:
    """
    One-shot cancellable timer on the running loop.

    Example:
        timer = DelayedCall(3.0, controller.reset)
        timer.start()
        ...
        timer.cancel()  # new intake arrived before the timer fired
    """

    def __init__(self, delay: float, callback: Callable[..., Any], *args: Any):
        self.delay = delay
        self._callback = callback
        self._args = args
        self._handle: Optional[asyncio.TimerHandle] = None
        self._fired = False

    def start(self) -> "DelayedCall":
        """
        Schedule the callback.

        Raises:
            RuntimeError: If called outside a running event loop
        """
        if self._handle is not None:
            return self
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire)
        return self

    def _fire(self) -> None:
        self._fired = True
        self._handle = None
        self._callback(*self._args)

    def cancel(self) -> bool:
        """
        Cancel the timer if it has not fired yet.

        Returns:
            True if a pending timer was cancelled
        """
        if self._handle is None:
            return False
        self._handle.cancel()
        self._handle = None
        return True

    @property
    def pending(self) -> bool:
        return self._handle is not None

    @property
    def fired(self) -> bool:
        return self._fired


class PeriodicTask:
    """
    Calls a function every `interval` seconds until stopped.

    The first call happens one interval after start(), never immediately.
    """

    def __init__(self, interval: float, callback: Callable[[], Any], name: Optional[str] = None):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.interval = interval
        self.name = name or "periodic-task"
        self._callback = callback
        self._task: Optional[asyncio.Task] = None
        self.ticks = 0

    def start(self) -> "PeriodicTask":
        if self.is_running:
            return self
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._run(), name=self.name)
        return self

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            self.ticks += 1
            self._callback()

    def stop(self) -> None:
        """Cancel the task. Safe to call more than once."""
        if self._task is not None:
            self._task.cancel()
            self._task = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()


async def run_blocking(func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Run blocking I/O in a worker thread without stalling the loop."""
    logger.debug("Offloading %s to worker thread", getattr(func, "__name__", func))
    return await asyncio.to_thread(func, *args, **kwargs)
