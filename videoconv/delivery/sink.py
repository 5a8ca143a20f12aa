"""
Delivery Sinks
==============
Save converted payloads under a suggested file name.
"""

import logging
import os
import re
import shutil
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

from videoconv.delivery.reference import PayloadReference, PayloadReleasedError
from videoconv.errors import DeliveryError


logger = logging.getLogger(__name__)

# Characters not allowed in filenames on various OSes
INVALID_FILENAME_CHARS = r'[<>:"/\\|?*\x00-\x1f]'


def build_download_name(source_name: str, target_format: str) -> str:
    """
    Name for the converted file: source name up to its first dot, plus
    the target extension.

    >>> build_download_name("movie.final.mkv", "mp4")
    'movie.mp4'
    """
    return f"{source_name.split('.')[0]}.{target_format}"


def sanitize_filename(filename: str) -> str:
    """
    Sanitize a filename by removing/replacing invalid characters.

    The extension is kept apart so that a name like ".mp4" becomes
    "untitled.mp4" rather than losing its suffix.

    Args:
        filename: Original filename

    Returns:
        Sanitized filename safe for all operating systems
    """
    stem, dot, ext = filename.rpartition(".")
    if not dot:
        stem, ext = filename, ""

    # Replace invalid characters with underscores
    stem = re.sub(INVALID_FILENAME_CHARS, '_', stem)
    ext = re.sub(INVALID_FILENAME_CHARS, '', ext).strip(' .')

    # Remove leading/trailing spaces and dots
    stem = stem.strip(' .')

    # Collapse multiple underscores
    stem = re.sub(r'_+', '_', stem)

    if not stem:
        stem = "untitled"

    suffix = f".{ext}" if ext else ""

    # Limit length (255 bytes for most filesystems, keep some margin)
    max_stem_len = 200 - len(suffix.encode('utf-8'))
    if len(stem.encode('utf-8')) > max_stem_len:
        stem = stem.encode('utf-8')[:max_stem_len].decode('utf-8', errors='ignore')

    return stem + suffix


class DeliverySink(ABC):
    """
    Destination for converted files.

    Implementations:
        - DirectorySink: writes into a local directory
    """

    @abstractmethod
    def save(self, reference: PayloadReference, filename: str) -> Path:
        """
        Persist the referenced payload.

        Args:
            reference: Ephemeral payload handle, released by the caller
            filename: Suggested file name

        Returns:
            Where the file ended up

        Raises:
            DeliveryError: If the payload could not be saved
        """
        pass


class DirectorySink(DeliverySink):
    """
    Saves payloads into a directory, like a browser's download folder.

    Existing files are never overwritten: "movie.mp4" becomes
    "movie (1).mp4", "movie (2).mp4", and so on.
    """

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)

    def _unique_path(self, filename: str) -> Path:
        candidate = self.output_dir / filename
        counter = 1
        while candidate.exists():
            candidate = self.output_dir / f"{Path(filename).stem} ({counter}){Path(filename).suffix}"
            counter += 1
        return candidate

    def save(self, reference: PayloadReference, filename: str) -> Path:
        safe_name = sanitize_filename(filename)
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            target = self._unique_path(safe_name)
            fd, temp_name = tempfile.mkstemp(dir=self.output_dir, prefix=".", suffix=".part")
        except OSError as exc:
            raise DeliveryError(
                f"Cannot write to {self.output_dir}", details=str(exc), file_name=safe_name
            ) from exc

        temp_path = Path(temp_name)
        try:
            with os.fdopen(fd, "wb") as fh:
                shutil.copyfileobj(reference.open(), fh)
            os.replace(temp_path, target)
        except (OSError, PayloadReleasedError) as exc:
            temp_path.unlink(missing_ok=True)
            raise DeliveryError(
                "Saving converted file failed", details=str(exc), file_name=safe_name
            ) from exc

        logger.info("Saved %d bytes to %s", reference.size, target)
        return target
