"""
HTTP Conversion Service
=======================
Uploads the source file to the remote converter as a multipart form
(`file` + `to_format`) and returns the response body.
"""

import logging
from typing import Optional

import requests

from videoconv.app.config import DEFAULT_SERVICE_URL
from videoconv.app.models import ConversionPayload, SourceFile
from videoconv.concurrency import run_blocking
from videoconv.errors import ServiceFailureError
from videoconv.service.base import ConversionService


logger = logging.getLogger(__name__)


class HttpConversionService(ConversionService):
    """
    Remote converter reached over HTTP.

    The blocking request runs in a worker thread so the event loop keeps
    ticking progress while the upload and conversion are in flight.
    """

    def __init__(
        self,
        url: str = DEFAULT_SERVICE_URL,
        timeout: float = 300.0,
        session: Optional[requests.Session] = None
    ):
        self.url = url
        self.timeout = timeout
        self._session = session or requests.Session()

    async def convert(self, source: SourceFile, target_format: str) -> ConversionPayload:
        return await run_blocking(self._post, source, target_format)

    def _post(self, source: SourceFile, target_format: str) -> ConversionPayload:
        try:
            content = source.read_bytes()
        except (OSError, ValueError) as exc:
            raise ServiceFailureError(
                f"Could not read source file: {exc}", file_name=source.name
            ) from exc

        logger.info(
            "POST %s: %s (%d bytes) -> %s", self.url, source.name, len(content), target_format
        )
        try:
            response = self._session.post(
                self.url,
                files={"file": (source.name, content)},
                data={"to_format": target_format},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("Conversion request failed: %s", exc)
            raise ServiceFailureError(str(exc) or "Conversion request failed", file_name=source.name) from exc

        if not response.ok:
            logger.warning("Conversion service answered HTTP %d", response.status_code)
            raise ServiceFailureError(
                "Conversion failed", status_code=response.status_code, file_name=source.name
            )

        payload = ConversionPayload(
            content=response.content,
            media_type=response.headers.get("Content-Type"),
        )
        logger.info("Received %d bytes from conversion service", payload.size_bytes)
        return payload

    def close(self) -> None:
        self._session.close()
