"""
Conversion Service Interface
============================
Contract for the remote transcoding endpoint.
"""

from abc import ABC, abstractmethod

from videoconv.app.models import ConversionPayload, SourceFile


class ConversionService(ABC):
    """
    Abstract remote conversion service.

    Implementations:
        - HttpConversionService: multipart POST via requests
    """

    @abstractmethod
    async def convert(self, source: SourceFile, target_format: str) -> ConversionPayload:
        """
        Convert a file in one shot.

        Args:
            source: File to upload
            target_format: Catalog extension to convert into

        Returns:
            The converted payload

        Raises:
            ServiceFailureError: Non-success response or transport fault
        """
        pass

    def close(self) -> None:
        """Release transport resources."""
