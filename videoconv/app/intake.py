"""
Input Source
============
Drop zone and file-pick adapters that feed the controller.

Only the first file of a multi-file drop is consumed.
"""

from __future__ import annotations

import logging
import shlex
from pathlib import Path
from typing import Optional, Sequence
from urllib.parse import unquote, urlparse

from videoconv.app.controller import ConversionController
from videoconv.app.models import SourceFile


logger = logging.getLogger(__name__)


def normalize_dropped_path(raw: str) -> str:
    # Accept pasted paths from shell/Finder:
    # - quoted path
    # - path wrapped in parentheses
    # - file:// URI
    # - escaped spaces from shell copy
    value = raw.strip()
    if len(value) >= 2 and value.startswith("(") and value.endswith(")"):
        value = value[1:-1]
    value = value.strip().strip("'").strip('"')
    value = value.replace("\\ ", " ")

    if value.startswith("file://"):
        parsed = urlparse(value)
        value = unquote(parsed.path)

    return value


def parse_dropped_paths(text: str) -> list[Path]:
    """
    Split text pasted by a terminal drag-and-drop into paths.

    Terminals paste dropped files as shell-quoted paths separated by
    spaces or newlines.
    """
    text = text.strip()
    if not text:
        return []
    try:
        tokens = shlex.split(text)
    except ValueError:
        tokens = [text]
    paths = []
    for token in tokens:
        value = normalize_dropped_path(token)
        if value:
            paths.append(Path(value).expanduser())
    return paths


class DropZone:
    """
    Drag-and-drop target plus explicit picker for one controller.

    Example:
        zone = DropZone(controller)
        zone.drag_enter()
        zone.drop([SourceFile.from_path(Path("movie.mkv"))])
    """

    def __init__(self, controller: ConversionController):
        self.controller = controller
        self.is_drag_over = False

    def drag_enter(self) -> None:
        self.is_drag_over = True

    def drag_leave(self) -> None:
        self.is_drag_over = False

    def drop(self, files: Sequence[SourceFile]) -> Optional[SourceFile]:
        """
        Forward the first dropped file to the controller.

        Returns:
            The accepted file, or None for an empty drop

        Raises:
            UnsupportedFormatError: If the first file is not a catalog format
        """
        self.is_drag_over = False
        if not files:
            return None
        if len(files) > 1:
            logger.debug("Ignoring %d extra dropped file(s)", len(files) - 1)
        return self.controller.intake(files[0])

    def drop_paths(self, paths: Sequence[Path]) -> Optional[SourceFile]:
        """
        Drop files given by path.

        Raises:
            FileNotFoundError: If the first path does not exist
            UnsupportedFormatError: If its extension is not supported
        """
        if not paths:
            self.is_drag_over = False
            return None
        if len(paths) > 1:
            logger.debug("Ignoring %d extra dropped path(s)", len(paths) - 1)
        # Stat only the file that will be used
        return self.drop([SourceFile.from_path(paths[0])])

    def paste(self, text: str) -> Optional[SourceFile]:
        """Handle terminal paste of dropped file paths."""
        return self.drop_paths(parse_dropped_paths(text))

    def pick(self, file: Optional[SourceFile]) -> Optional[SourceFile]:
        """Forward a manually selected file; a cancelled pick does nothing."""
        if file is None:
            return None
        return self.controller.intake(file)
