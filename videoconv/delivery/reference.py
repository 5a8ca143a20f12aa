"""
Payload References
==================
Ephemeral, revocable handles to an in-memory payload, the equivalent of
a browser object URL. A reference is created for one hand-off to a
delivery sink and released right after it.
"""

from __future__ import annotations

import io
import uuid
from typing import Optional


class PayloadReleasedError(RuntimeError):
    """Raised when a released reference is read."""


class PayloadReference:
    """
    Revocable view over converted bytes.

    Example:
        with PayloadReference(payload) as ref:
            sink.save(ref, "movie.mp4")
        assert ref.released
    """

    def __init__(self, content: bytes):
        self.url = f"payload:{uuid.uuid4()}"
        self._view: Optional[memoryview] = memoryview(content)
        self._size = len(content)

    @property
    def size(self) -> int:
        return self._size

    @property
    def released(self) -> bool:
        return self._view is None

    def open(self) -> io.BytesIO:
        """
        Readable stream over the payload.

        Raises:
            PayloadReleasedError: If the reference has been released
        """
        if self._view is None:
            raise PayloadReleasedError(f"{self.url} has been released")
        return io.BytesIO(self._view)

    def release(self) -> None:
        """Drop the view. Safe to call more than once."""
        if self._view is not None:
            self._view.release()
            self._view = None

    def __enter__(self) -> "PayloadReference":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __repr__(self) -> str:
        state = "released" if self.released else f"{self._size} bytes"
        return f"PayloadReference({self.url}, {state})"
