"""
Textual TUI App
===============
Terminal front end for the conversion controller: drop zone, format
picker, progress bar, status banners and log.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from textual import events
from textual.app import App, ComposeResult
from textual.reactive import reactive
from textual.widgets import (
    Button,
    Footer,
    Header,
    ProgressBar,
    RichLog,
    Select,
    Static,
)

from videoconv.app.config import AppConfig, DEFAULT_SERVICE_URL
from videoconv.app.controller import ControllerCallbacks, ConversionController
from videoconv.app.events import AppEvent, EventType, RequestStatus
from videoconv.app.intake import DropZone
from videoconv.app.models import SourceFile
from videoconv.errors import ConversionError, SubmissionError, VideoConverterError
from videoconv.tui.screens.dashboard import ConverterShell
from videoconv.tui.screens.pick_modal import FilePickModal
from videoconv.tui.styles import APP_CSS


@dataclass
class LaunchOptions:
    source: Optional[Path] = None
    target: Optional[str] = None
    service_url: str = DEFAULT_SERVICE_URL
    output_dir: Optional[Path] = None

    def to_config(self) -> AppConfig:
        if self.output_dir is None:
            return AppConfig(service_url=self.service_url)
        return AppConfig(service_url=self.service_url, output_dir=self.output_dir)


class VideoConverterTUI(App):
    """Terminal dashboard for single-file video conversion."""

    CSS = APP_CSS

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("o", "open_file", "Open"),
        ("c", "convert", "Convert"),
        ("r", "reset", "Reset"),
    ]

    progress_value = reactive(0.0)
    current_status = reactive("idle")

    def __init__(
        self,
        options: Optional[LaunchOptions] = None,
        controller: Optional[ConversionController] = None
    ):
        super().__init__()
        self.options = options or LaunchOptions()
        if controller is None:
            controller = ConversionController(config=self.options.to_config())
        controller.callbacks = ControllerCallbacks(on_event=self._emit_event)
        self.controller = controller
        self.drop_zone = DropZone(controller)

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield ConverterShell(self.controller.catalog, id="root")
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_request_panel()
        self._log("ready")

        if self.options.source:
            self._intake_path(self.options.source)
        if self.options.target:
            self._select_target(self.options.target)

    def _log(self, message: str) -> None:
        self.query_one("#log-view", RichLog).write(message)

    def _set_banner(self, message: str, kind: str = "") -> None:
        banner = self.query_one("#banner", Static)
        banner.update(message)
        banner.set_class(kind == "error", "-error")
        banner.set_class(kind == "success", "-success")

    def _show_error(self, message: str) -> None:
        self._set_banner(message, "error")
        self._log(f"[error] {message}")

    def _refresh_request_panel(self) -> None:
        request = self.controller.request
        source = request.source_file
        self.query_one("#file-text", Static).update(f"file: {source.name if source else 'none'}")
        self.query_one("#size-text", Static).update(f"size: {source.display_size if source else '-'}")
        from_text = request.source_format.upper() if request.source_format else "-"
        self.query_one("#from-text", Static).update(f"from: {from_text}")
        self.query_one("#state-text", Static).update(f"state: {request.status.value}")

        select = self.query_one("#target-select", Select)
        if not request.target_format:
            if select.value != Select.BLANK:
                select.clear()
        elif select.value != request.target_format:
            select.value = request.target_format
        select.disabled = request.status == RequestStatus.CONVERTING

        convert = self.query_one("#convert", Button)
        convert.disabled = not self.controller.can_submit
        convert.set_class(self.controller.can_submit, "-primary")

    def _set_progress(self, value: float) -> None:
        self.progress_value = value
        self.query_one("#progress-bar", ProgressBar).update(progress=value)
        self.query_one("#progress-text", Static).update(f"{int(value)}%")

    def _emit_event(self, event: AppEvent) -> None:
        if event.event_type == EventType.PROGRESS:
            self._set_progress(event.progress)
        elif event.event_type == EventType.LOG:
            self._log(f"[{event.level}] {event.message}")
        elif event.event_type == EventType.STATE:
            self.current_status = event.state.value
            if event.message:
                self._log(f"[state] {event.message}")
            self._render_state(event.state)
            self._refresh_request_panel()

    def _render_state(self, state: RequestStatus) -> None:
        request = self.controller.request
        if state == RequestStatus.SUCCEEDED:
            self._set_banner(
                f"Video converted successfully to {request.target_format.upper()}! "
                f"Saved as {request.delivered_name}.",
                "success",
            )
        elif state == RequestStatus.FAILED:
            self._set_banner(request.error_detail or "Conversion failed", "error")
        elif state == RequestStatus.CONVERTING:
            self._set_banner("Converting...")
        else:
            self._set_banner("")
            self._set_progress(0.0)

    def _intake_path(self, path: Path) -> None:
        try:
            self.drop_zone.pick(SourceFile.from_path(path))
        except FileNotFoundError:
            self._show_error(f"Source path not found: {path}")
        except VideoConverterError as exc:
            self._show_error(exc.user_message)
        self._refresh_request_panel()

    def _select_target(self, target_format: str) -> None:
        try:
            self.controller.select_target(target_format)
        except VideoConverterError as exc:
            self._show_error(exc.user_message)
        self._refresh_request_panel()

    async def _submit(self) -> None:
        try:
            await self.controller.submit()
        except SubmissionError as exc:
            self._show_error(exc.user_message)
        except ConversionError:
            # FAILED state event already rendered the banner and log line
            self.bell()

    def on_paste(self, event: events.Paste) -> None:
        if isinstance(self.screen, FilePickModal):
            return
        try:
            self.drop_zone.paste(event.text)
        except FileNotFoundError as exc:
            self._show_error(f"Source path not found: {exc.filename}")
        except VideoConverterError as exc:
            self._show_error(exc.user_message)
        self._refresh_request_panel()

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id != "target-select":
            return
        if not isinstance(event.value, str):
            return
        if event.value == self.controller.request.target_format:
            return
        self._select_target(event.value)

    def action_open_file(self) -> None:
        source = self.controller.request.source_file
        modal = FilePickModal(
            catalog=self.controller.catalog,
            initial=source.path if source else None,
        )
        self.push_screen(modal, self._on_file_picked)

    def _on_file_picked(self, result: Optional[Path]) -> None:
        if result is None:
            self._log("file selection canceled")
            return
        self._intake_path(result)

    def action_convert(self) -> None:
        self.run_worker(self._submit(), group="conversion")

    def action_reset(self) -> None:
        self.controller.reset()
        self._refresh_request_panel()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "open":
            self.action_open_file()
        elif event.button.id == "convert":
            self.action_convert()
        elif event.button.id == "reset":
            self.action_reset()

    def on_unmount(self) -> None:
        self.controller.close()
