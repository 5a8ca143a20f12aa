"""
Request Models
==============
Data structures for the conversion request and the files flowing
through it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from videoconv.app.catalog import extension_of
from videoconv.app.events import RequestStatus


SIZE_UNITS = ["Bytes", "KB", "MB", "GB"]


def format_file_size(size_bytes: int) -> str:
    """
    Human-readable size, base 1024, at most two decimals.

    >>> format_file_size(1536)
    '1.5 KB'
    """
    if size_bytes <= 0:
        return "0 Bytes"
    exponent = 0
    value = float(size_bytes)
    while value >= 1024 and exponent < len(SIZE_UNITS) - 1:
        value /= 1024
        exponent += 1
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {SIZE_UNITS[exponent]}"


@dataclass(frozen=True)
class SourceFile:
    """
    Handle to the user's video file.

    Either backed by a filesystem path (bytes read lazily at upload time)
    or by in-memory content.
    """
    name: str
    size_bytes: int
    path: Optional[Path] = None
    content: Optional[bytes] = field(default=None, repr=False)

    @classmethod
    def from_path(cls, path: Path) -> "SourceFile":
        """
        Build a handle from a file on disk.

        Raises:
            FileNotFoundError: If the path does not exist
        """
        path = Path(path)
        return cls(name=path.name, size_bytes=path.stat().st_size, path=path)

    @classmethod
    def from_bytes(cls, name: str, content: bytes) -> "SourceFile":
        return cls(name=name, size_bytes=len(content), content=content)

    @property
    def extension(self) -> str:
        return extension_of(self.name)

    @property
    def display_size(self) -> str:
        return format_file_size(self.size_bytes)

    def read_bytes(self) -> bytes:
        if self.content is not None:
            return self.content
        if self.path is None:
            raise ValueError(f"Source file {self.name!r} has no content or path")
        return self.path.read_bytes()


@dataclass(frozen=True)
class ConversionPayload:
    """Raw body returned by the conversion service."""
    content: bytes = field(repr=False)
    media_type: Optional[str] = None

    @property
    def size_bytes(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class ConvertedFile:
    """Result of a delivered conversion."""
    name: str
    path: Path
    size_bytes: int
    media_type: Optional[str] = None


@dataclass
class ConversionRequest:
    """
    The unit of work owned by the controller.

    Attributes:
        generation: Token identifying this request; stale async work
            carries an older value
        source_file: Accepted input file
        source_format: Extension of source_file, fixed at intake
        target_format: Chosen output format, mutable until submission
        progress: Client-side estimate in [0, 100]
        status: Lifecycle state
        error_detail: Failure reason, only set when status is FAILED
        delivered_name: File name handed to the delivery sink
    """
    generation: int = 0
    source_file: Optional[SourceFile] = None
    source_format: str = ""
    target_format: str = ""
    progress: float = 0.0
    status: RequestStatus = RequestStatus.IDLE
    error_detail: Optional[str] = None
    delivered_name: Optional[str] = None

    @property
    def can_submit(self) -> bool:
        """True when a submit() from this state would reach the service."""
        return (
            self.source_file is not None
            and bool(self.target_format)
            and self.source_format != self.target_format
            and self.status != RequestStatus.CONVERTING
        )
