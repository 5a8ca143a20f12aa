"""
TUI screens package.
"""

from videoconv.tui.screens.dashboard import ConverterShell
from videoconv.tui.screens.pick_modal import FilePickModal

__all__ = ["ConverterShell", "FilePickModal"]
