"""
Delivery Module
===============
Hand-off of converted payloads to the user.
"""

from .reference import PayloadReference, PayloadReleasedError
from .sink import (
    DeliverySink,
    DirectorySink,
    build_download_name,
    sanitize_filename,
)

__all__ = [
    "PayloadReference",
    "PayloadReleasedError",
    "DeliverySink",
    "DirectorySink",
    "build_download_name",
    "sanitize_filename",
]
