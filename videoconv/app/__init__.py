"""
Application Module
==================
Request model, configuration and event contracts.

The controller and input adapters live in submodules:
    - videoconv.app.controller: ConversionController
    - videoconv.app.intake: DropZone
"""

from .catalog import DEFAULT_FORMATS, FormatCatalog, extension_of
from .config import AppConfig, DEFAULT_SERVICE_URL
from .events import (
    AppEvent,
    EventType,
    LogEvent,
    ProgressEvent,
    RequestStatus,
    StateEvent,
)
from .models import (
    ConversionPayload,
    ConversionRequest,
    ConvertedFile,
    SourceFile,
    format_file_size,
)

__all__ = [
    "DEFAULT_FORMATS",
    "FormatCatalog",
    "extension_of",
    "AppConfig",
    "DEFAULT_SERVICE_URL",
    "AppEvent",
    "EventType",
    "LogEvent",
    "ProgressEvent",
    "RequestStatus",
    "StateEvent",
    "ConversionPayload",
    "ConversionRequest",
    "ConvertedFile",
    "SourceFile",
    "format_file_size",
]
