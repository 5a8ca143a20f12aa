"""
Dashboard screen shell for the converter layout.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Button, ProgressBar, RichLog, Select, Static

from videoconv.app.catalog import FormatCatalog


class ConverterShell(Container):
    """Actions bar plus drop zone, request, progress and log panes."""

    def __init__(self, catalog: FormatCatalog, **kwargs) -> None:
        super().__init__(**kwargs)
        self.catalog = catalog

    def compose(self) -> ComposeResult:
        with Horizontal(id="actions"):
            yield Button("Open (o)", id="open", classes="-primary")
            yield Button("Convert (c)", id="convert", disabled=True)
            yield Button("Reset (r)", id="reset")
            yield Static("Transform your videos with precision", classes="label")
        with Horizontal(id="panes"):
            with Vertical(id="drop-pane"):
                yield Static("Drop your video here", classes="label")
                yield Static("paste a path or press o to browse your files", id="drop-help")
                yield Static("  ".join(self.catalog.preview()), id="format-badges")
                yield Static("", id="banner")
            with Vertical(id="request-pane"):
                yield Static("Request", classes="label")
                yield Static("file: none", id="file-text")
                yield Static("size: -", id="size-text")
                yield Static("from: -", id="from-text")
                yield Select(self.catalog.options(), prompt="Select format", id="target-select")
                yield Static("state: idle", id="state-text")
            with Vertical(id="progress-pane"):
                yield Static("Progress", classes="label")
                yield ProgressBar(total=100, show_eta=False, id="progress-bar")
                yield Static("0%", id="progress-text")
            with Vertical(id="log-pane"):
                yield Static("Logs", classes="label")
                yield RichLog(id="log-view", wrap=True, highlight=True)
