"""
Application Event Contracts
===========================
Typed events for progress/log/state updates emitted by the request
controller to presentation layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Union


class EventType(str, Enum):
    """High-level event categories."""

    PROGRESS = "progress"
    LOG = "log"
    STATE = "state"


class RequestStatus(str, Enum):
    """Conversion request lifecycle states."""

    IDLE = "idle"
    FILE_ACCEPTED = "file_accepted"
    CONVERTING = "converting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (RequestStatus.SUCCEEDED, RequestStatus.FAILED)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class ProgressEvent:
    """Progress estimate (0-100) for the request identified by generation."""

    event_type: EventType
    timestamp: str
    generation: int
    progress: float
    message: str


@dataclass(frozen=True)
class LogEvent:
    """Log message emitted from the controller."""

    event_type: EventType
    timestamp: str
    level: str
    message: str


@dataclass(frozen=True)
class StateEvent:
    """State transition event for a conversion request."""

    event_type: EventType
    timestamp: str
    state: RequestStatus
    generation: int
    message: str = ""


AppEvent = Union[ProgressEvent, LogEvent, StateEvent]


def make_progress_event(generation: int, progress: float, message: str = "") -> ProgressEvent:
    """Create a normalized progress event."""
    pct = max(0.0, min(100.0, progress))
    return ProgressEvent(
        event_type=EventType.PROGRESS,
        timestamp=_now_iso(),
        generation=generation,
        progress=pct,
        message=message,
    )


def make_log_event(message: str, level: str = "info") -> LogEvent:
    """Create a normalized log event."""
    return LogEvent(
        event_type=EventType.LOG,
        timestamp=_now_iso(),
        level=level.lower(),
        message=message,
    )


def make_state_event(state: RequestStatus, generation: int, message: str = "") -> StateEvent:
    """Create a normalized state event."""
    return StateEvent(
        event_type=EventType.STATE,
        timestamp=_now_iso(),
        state=state,
        generation=generation,
        message=message,
    )
