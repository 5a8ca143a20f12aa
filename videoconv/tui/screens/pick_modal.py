"""
File pick modal: the manual-selection half of the input source.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen
from textual.widgets import Button, DirectoryTree, Input, Static

from videoconv.app.catalog import FormatCatalog, extension_of
from videoconv.app.intake import normalize_dropped_path
from videoconv.tui.styles import PICK_MODAL_CSS


class FilePickModal(ModalScreen[Optional[Path]]):
    """Modal to choose a source video from the tree or by typed path."""

    BINDINGS = [
        ("enter", "submit", "Select"),
        ("escape", "cancel_modal", "Cancel"),
    ]

    CSS = PICK_MODAL_CSS

    def __init__(self, *, catalog: FormatCatalog, initial: Optional[Path] = None) -> None:
        super().__init__()
        self.catalog = catalog
        self.initial = initial

    def compose(self) -> ComposeResult:
        formats = ", ".join(fmt.upper() for fmt in self.catalog)
        with Container(id="modal-root"):
            yield Static("Select a video", id="modal-title")
            yield Static(f"Supported: {formats}", id="modal-help")
            yield Input(
                value=str(self.initial) if self.initial else "",
                placeholder="/path/to/movie.mkv",
                id="source-input",
                classes="field",
            )
            yield DirectoryTree(str(self._default_tree_root()), id="source-tree")
            yield Static("", id="modal-error")
            with Horizontal(id="modal-actions"):
                yield Button("Select", id="confirm", classes="-primary")
                yield Button("Cancel", id="cancel")

    @staticmethod
    def _default_tree_root() -> Path:
        return Path.home()

    def _set_error(self, message: str) -> None:
        self.query_one("#modal-error", Static).update(message)

    def _validate_source(self) -> Optional[Path]:
        raw = self.query_one("#source-input", Input).value
        if not raw.strip():
            self._set_error("Please select a source file.")
            return None

        source = Path(normalize_dropped_path(raw)).expanduser().resolve()
        if not source.exists():
            self._set_error(f"Source path not found: {source}")
            return None

        if not source.is_file():
            self._set_error(f"Selected path is not a file: {source}")
            return None

        extension = extension_of(source.name)
        if extension not in self.catalog:
            self._set_error(
                f"Unsupported file format: .{extension.upper()}. Please select a supported video file."
            )
            return None

        return source

    def on_directory_tree_file_selected(self, event: DirectoryTree.FileSelected) -> None:
        source = event.path
        if extension_of(source.name) not in self.catalog:
            self._set_error("Select a supported video file.")
            return

        self.query_one("#source-input", Input).value = str(source)
        self._set_error("")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "cancel":
            self.dismiss(None)
            return

        if event.button.id == "confirm":
            self._submit_form()

    def _submit_form(self) -> None:
        source = self._validate_source()
        if source is not None:
            self.dismiss(source)

    def action_submit(self) -> None:
        self._submit_form()

    def action_cancel_modal(self) -> None:
        self.dismiss(None)
