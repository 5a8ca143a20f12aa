"""
Error Handling Module
=====================
Custom exceptions for the Video Converter.
Provides consistent error codes and messages for every failure the
request controller can surface.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional


class ErrorCode(Enum):
    """Error codes for the video converter."""
    # Validation errors (E001-E099)
    E001 = "Unsupported file format"

    # Submission errors (E100-E199)
    E100 = "No file selected"
    E101 = "No output format selected"
    E102 = "Source and target formats are identical"
    E103 = "Conversion already in progress"

    # Service errors (E200-E299)
    E200 = "Conversion service failed"

    # Delivery errors (E300-E399)
    E300 = "Saving converted file failed"


@dataclass(eq=False)
class VideoConverterError(Exception):
    """Base exception for the Video Converter with error codes."""
    code: ErrorCode
    message: str
    details: Optional[str] = None
    file_name: Optional[str] = None

    def __str__(self) -> str:
        base = f"[{self.code.name}] {self.code.value}: {self.message}"
        if self.details:
            base += f" ({self.details})"
        if self.file_name:
            base += f" - File: {self.file_name}"
        return base

    @property
    def user_message(self) -> str:
        """Message suitable for a status banner."""
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


# ===========================================
# Validation
# ===========================================

class ValidationError(VideoConverterError):
    """Local input rejected before any request exists."""


class UnsupportedFormatError(ValidationError):
    """Extension is not in the format catalog."""
    def __init__(self, extension: str, file_name: str = None):
        self.extension = extension
        super().__init__(
            code=ErrorCode.E001,
            message=f"Unsupported file format: .{extension.upper()}",
            details="Please select a supported video file.",
            file_name=file_name
        )


# ===========================================
# Submission preconditions
# ===========================================

class SubmissionError(VideoConverterError):
    """Submission rejected locally; no network call was made."""


class MissingFileError(SubmissionError):
    def __init__(self):
        super().__init__(
            code=ErrorCode.E100,
            message="Please select a file and output format."
        )


class MissingTargetError(SubmissionError):
    def __init__(self, file_name: str = None):
        super().__init__(
            code=ErrorCode.E101,
            message="Please select a file and output format.",
            file_name=file_name
        )


class IdenticalFormatsError(SubmissionError):
    def __init__(self, extension: str, file_name: str = None):
        self.extension = extension
        super().__init__(
            code=ErrorCode.E102,
            message="Source and target formats cannot be the same.",
            details=extension.upper(),
            file_name=file_name
        )


class ConversionInProgressError(SubmissionError):
    """Raised for reentrant submits and target changes while converting."""
    def __init__(self, file_name: str = None):
        super().__init__(
            code=ErrorCode.E103,
            message="A conversion is already in progress",
            file_name=file_name
        )


# ===========================================
# Remote conversion and delivery
# ===========================================

class ConversionError(VideoConverterError):
    """Failure after the request reached the Converting state."""


class ServiceFailureError(ConversionError):
    """Remote service returned a non-success response or the transport failed."""
    def __init__(self, message: str, status_code: int = None, file_name: str = None):
        self.status_code = status_code
        super().__init__(
            code=ErrorCode.E200,
            message=message,
            details=f"HTTP {status_code}" if status_code is not None else None,
            file_name=file_name
        )


class DeliveryError(ConversionError):
    """Converted payload could not be handed to the delivery sink."""
    def __init__(self, message: str, details: str = None, file_name: str = None):
        super().__init__(
            code=ErrorCode.E300,
            message=message,
            details=details,
            file_name=file_name
        )
