"""
Service Module
==============
Clients for the remote conversion service.
"""

from .base import ConversionService
from .http_client import HttpConversionService

__all__ = ["ConversionService", "HttpConversionService"]
