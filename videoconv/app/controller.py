"""
Conversion Request Controller
=============================
Central controller for the single-file conversion workflow.

Owns every state transition of the active request:

    IDLE -> FILE_ACCEPTED -> CONVERTING -> SUCCEEDED | FAILED -> IDLE

All methods run on one asyncio loop. The remote call and the progress
estimator are the only suspension points; a generation token captured
at submit time lets late completions of superseded requests be dropped.
"""

import asyncio
import logging
from dataclasses import dataclass, replace
from typing import Callable, NoReturn, Optional

from videoconv.app.catalog import normalize_format
from videoconv.app.config import AppConfig
from videoconv.app.events import (
    AppEvent,
    RequestStatus,
    make_log_event,
    make_progress_event,
    make_state_event,
)
from videoconv.app.models import (
    ConversionPayload,
    ConversionRequest,
    ConvertedFile,
    SourceFile,
)
from videoconv.concurrency import DelayedCall, GenerationCounter
from videoconv.delivery import DeliverySink, DirectorySink, PayloadReference, build_download_name
from videoconv.errors import (
    ConversionInProgressError,
    DeliveryError,
    IdenticalFormatsError,
    MissingFileError,
    MissingTargetError,
    ServiceFailureError,
    SubmissionError,
    UnsupportedFormatError,
    VideoConverterError,
)
from videoconv.progress import ProgressEstimator, SimulatedProgressEstimator
from videoconv.service import ConversionService, HttpConversionService


logger = logging.getLogger(__name__)

EstimatorFactory = Callable[[], ProgressEstimator]


@dataclass
class ControllerCallbacks:
    """Callbacks for request updates."""
    on_progress: Optional[Callable[[float], None]] = None
    on_state_change: Optional[Callable[[RequestStatus], None]] = None
    on_complete: Optional[Callable[[ConvertedFile], None]] = None
    on_error: Optional[Callable[[VideoConverterError], None]] = None
    on_event: Optional[Callable[[AppEvent], None]] = None


class ConversionController:
    """
    Request lifecycle state machine.

    Responsibilities:
        - Intake validation against the format catalog
        - Target selection
        - Submission to the conversion service with progress estimation
        - Delivery of the converted payload
        - Explicit and automatic reset

    Example:
        controller = ConversionController(config=AppConfig())

        controller.intake(SourceFile.from_path(Path("movie.mkv")))
        controller.select_target("mp4")
        converted = await controller.submit()   # saves movie.mp4

        # Three seconds later the controller is back to IDLE.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        service: Optional[ConversionService] = None,
        sink: Optional[DeliverySink] = None,
        estimator_factory: Optional[EstimatorFactory] = None,
        callbacks: Optional[ControllerCallbacks] = None
    ):
        """
        Initialize the controller.

        Args:
            config: Application configuration
            service: Conversion service (HttpConversionService if None)
            sink: Delivery sink (DirectorySink on config.output_dir if None)
            estimator_factory: Builds one progress estimator per submission
            callbacks: Optional update callbacks
        """
        self.config = config or AppConfig()
        self.catalog = self.config.catalog
        self.service = service or HttpConversionService(
            self.config.service_url, timeout=self.config.request_timeout
        )
        self.sink = sink or DirectorySink(self.config.output_dir)
        self.callbacks = callbacks or ControllerCallbacks()
        self._estimator_factory = estimator_factory or self._default_estimator

        self._generations = GenerationCounter()
        self._request = ConversionRequest()
        self._estimator: Optional[ProgressEstimator] = None
        self._auto_reset: Optional[DelayedCall] = None

    def _default_estimator(self) -> ProgressEstimator:
        return SimulatedProgressEstimator(
            interval=self.config.progress_interval,
            max_step=self.config.progress_max_step,
            ceiling=self.config.progress_ceiling,
        )

    # ==================== State ====================

    @property
    def request(self) -> ConversionRequest:
        """Copy of the current request."""
        return replace(self._request)

    @property
    def status(self) -> RequestStatus:
        return self._request.status

    @property
    def progress(self) -> float:
        return self._request.progress

    @property
    def generation(self) -> int:
        return self._request.generation

    @property
    def can_submit(self) -> bool:
        return self._request.can_submit

    @property
    def auto_reset_pending(self) -> bool:
        return self._auto_reset is not None and self._auto_reset.pending

    # ==================== Intake ====================

    def intake(self, file: SourceFile) -> SourceFile:
        """
        Accept a new source file, replacing any current request.

        A target format chosen for a request that was still waiting for
        submission carries over to the new file.

        Args:
            file: Candidate source file

        Returns:
            The accepted file

        Raises:
            UnsupportedFormatError: If the extension is not in the catalog;
                the current request is left untouched
        """
        extension = file.extension
        if extension not in self.catalog:
            self._reject(UnsupportedFormatError(extension, file_name=file.name))

        previous = self._request
        if previous.status == RequestStatus.CONVERTING:
            logger.info("Superseding in-flight request %d", previous.generation)

        self._cancel_pending()
        keep_target = previous.status == RequestStatus.FILE_ACCEPTED
        self._request = ConversionRequest(
            generation=self._generations.advance(),
            source_file=file,
            source_format=extension,
            target_format=previous.target_format if keep_target else "",
            status=RequestStatus.FILE_ACCEPTED,
        )
        self._log(f"accepted {file.name} ({file.display_size})")
        self._emit_state(f"file accepted: {file.name}")
        return file

    def select_target(self, target_format: str) -> None:
        """
        Choose the output format.

        Equality with the source format is checked at submission, not here.

        Raises:
            UnsupportedFormatError: If the format is not in the catalog
            ConversionInProgressError: If the request is converting
        """
        fmt = normalize_format(target_format)
        if fmt not in self.catalog:
            self._reject(UnsupportedFormatError(fmt))
        if self._request.status == RequestStatus.CONVERTING:
            self._reject(ConversionInProgressError(self._file_name()))

        self._request.target_format = fmt
        self._log(f"target format: {fmt}")

    # ==================== Submission ====================

    def validate_submission(self) -> None:
        """
        Check submit preconditions; the first failure wins.

        Raises:
            ConversionInProgressError: A submission is already outstanding
            MissingFileError: No file accepted
            MissingTargetError: No target format chosen
            IdenticalFormatsError: Target equals source format
        """
        request = self._request
        if request.status == RequestStatus.CONVERTING:
            raise ConversionInProgressError(self._file_name())
        if request.source_file is None:
            raise MissingFileError()
        if not request.target_format:
            raise MissingTargetError(request.source_file.name)
        if request.source_format == request.target_format:
            raise IdenticalFormatsError(request.source_format, request.source_file.name)

    async def submit(self) -> Optional[ConvertedFile]:
        """
        Send the request to the conversion service and deliver the result.

        The request moves to CONVERTING before the first suspension point,
        so a second submit() issued right after this one is rejected
        instead of racing it.

        Returns:
            The delivered file, or None if the request was superseded by a
            new intake or reset while the service call was outstanding

        Raises:
            SubmissionError: A precondition failed; no network call was made
            ServiceFailureError: The service failed; request is FAILED
            asyncio.CancelledError: The awaiting task was cancelled; a
                still-current request is FAILED with "Conversion cancelled"
            DeliveryError: Saving the payload failed; request is FAILED
        """
        try:
            self.validate_submission()
        except SubmissionError as error:
            self._reject(error)

        if self._request.status.is_terminal:
            self._renew_request()

        request = self._request
        generation = request.generation
        source = request.source_file
        target = request.target_format

        request.status = RequestStatus.CONVERTING
        request.progress = 0.0
        self._emit_state(f"converting {source.name} to {target}")
        self._emit_progress(generation, 0.0, "upload started")

        estimator = self._start_estimator(generation)
        try:
            payload = await self.service.convert(source, target)
        except VideoConverterError as error:
            self._stop_estimator(estimator)
            if self._is_stale(generation, error):
                return None
            self._fail(error)
            raise
        except Exception as exc:
            self._stop_estimator(estimator)
            if self._is_stale(generation, exc):
                return None
            logger.exception("Conversion service raised unexpectedly")
            error = ServiceFailureError(str(exc) or type(exc).__name__, file_name=source.name)
            self._fail(error)
            raise error from exc
        except asyncio.CancelledError:
            self._stop_estimator(estimator)
            if self._generations.is_current(generation):
                self._fail(ServiceFailureError("Conversion cancelled", file_name=source.name))
            raise
        finally:
            self._stop_estimator(estimator)

        if self._is_stale(generation, "result"):
            return None

        self._set_progress(self.config.progress_ceiling, "payload received")
        try:
            converted = self.deliver(payload)
        except DeliveryError as error:
            self._fail(error)
            raise

        request.status = RequestStatus.SUCCEEDED
        request.progress = 100.0
        self._emit_progress(generation, 100.0, "done")
        self._emit_state(f"converted successfully to {target.upper()}: {converted.name}")
        self._schedule_auto_reset(generation)
        if self.callbacks.on_complete:
            self.callbacks.on_complete(converted)
        return converted

    # ==================== Delivery ====================

    def deliver(self, payload: ConversionPayload) -> ConvertedFile:
        """
        Hand a payload to the delivery sink under "<base>.<target>".

        The payload reference is released as soon as the sink returns,
        whether or not it succeeded.

        Raises:
            MissingFileError / MissingTargetError: No request to name the file after
            DeliveryError: The sink could not save the payload
        """
        request = self._request
        if request.source_file is None:
            raise MissingFileError()
        if not request.target_format:
            raise MissingTargetError()

        name = build_download_name(request.source_file.name, request.target_format)
        try:
            with PayloadReference(payload.content) as reference:
                saved_path = self.sink.save(reference, name)
        except OSError as exc:
            raise DeliveryError("Saving converted file failed", details=str(exc), file_name=name) from exc

        # the sink may rename to avoid overwriting, e.g. "movie (1).mp4"
        request.delivered_name = saved_path.name
        self._log(f"saved {saved_path.name} to {saved_path.parent}")
        return ConvertedFile(
            name=saved_path.name,
            path=saved_path,
            size_bytes=payload.size_bytes,
            media_type=payload.media_type,
        )

    # ==================== Reset ====================

    def reset(self) -> None:
        """Clear the request and return to IDLE."""
        self._cancel_pending()
        self._request = ConversionRequest(generation=self._generations.advance())
        self._log("reset")
        self._emit_state("ready")

    def close(self) -> None:
        """
        Clean up resources.

        Call this when shutting down the application.
        """
        self._cancel_pending()
        self.service.close()

    # ==================== Internals ====================

    def _file_name(self) -> Optional[str]:
        source = self._request.source_file
        return source.name if source else None

    def _renew_request(self) -> None:
        # Resubmitting from a terminal state starts a fresh request for the same file.
        previous = self._request
        self._cancel_pending()
        self._request = ConversionRequest(
            generation=self._generations.advance(),
            source_file=previous.source_file,
            source_format=previous.source_format,
            target_format=previous.target_format,
            status=RequestStatus.FILE_ACCEPTED,
        )
        self._log(f"resubmitting {previous.source_file.name}")

    def _is_stale(self, generation: int, outcome: object) -> bool:
        if self._generations.is_current(generation):
            return False
        logger.info("Discarding %r from superseded request %d", outcome, generation)
        return True

    def _start_estimator(self, generation: int) -> ProgressEstimator:
        estimator = self._estimator_factory()
        self._estimator = estimator
        estimator.start(lambda value: self._on_estimate(generation, value))
        return estimator

    def _stop_estimator(self, estimator: ProgressEstimator) -> None:
        estimator.stop()
        if self._estimator is estimator:
            self._estimator = None

    def _on_estimate(self, generation: int, value: float) -> None:
        if not self._generations.is_current(generation):
            return
        if self._request.status != RequestStatus.CONVERTING:
            return
        # [ceiling, 100] is reserved for after the service has answered
        if value >= self.config.progress_ceiling:
            return
        self._set_progress(value)

    def _set_progress(self, value: float, message: str = "") -> None:
        request = self._request
        if value <= request.progress:
            return
        request.progress = value
        self._emit_progress(request.generation, value, message)

    def _fail(self, error: VideoConverterError) -> None:
        request = self._request
        request.status = RequestStatus.FAILED
        request.error_detail = error.user_message
        self._log(f"conversion failed: {error}", level="error")
        self._emit_state(error.user_message)
        self._schedule_auto_reset(request.generation)
        if self.callbacks.on_error:
            self.callbacks.on_error(error)

    def _reject(self, error: VideoConverterError) -> NoReturn:
        self._log(str(error), level="warning")
        if self.callbacks.on_error:
            self.callbacks.on_error(error)
        raise error

    def _schedule_auto_reset(self, generation: int) -> None:
        if self._auto_reset is not None:
            self._auto_reset.cancel()
        self._auto_reset = DelayedCall(
            self.config.reset_delay, self._on_auto_reset, generation
        ).start()

    def _on_auto_reset(self, generation: int) -> None:
        self._auto_reset = None
        if not self._generations.is_current(generation):
            return
        if not self._request.status.is_terminal:
            return
        logger.debug("Auto-reset after %.1fs dwell", self.config.reset_delay)
        self.reset()

    def _cancel_pending(self) -> None:
        if self._auto_reset is not None:
            self._auto_reset.cancel()
            self._auto_reset = None
        if self._estimator is not None:
            self._estimator.stop()
            self._estimator = None

    # ==================== Event emission ====================

    def _log(self, message: str, level: str = "info") -> None:
        logger.log(logging.getLevelName(level.upper()), message)
        if self.callbacks.on_event:
            self.callbacks.on_event(make_log_event(message=message, level=level))

    def _emit_state(self, message: str = "") -> None:
        request = self._request
        if self.callbacks.on_state_change:
            self.callbacks.on_state_change(request.status)
        if self.callbacks.on_event:
            self.callbacks.on_event(make_state_event(request.status, request.generation, message))

    def _emit_progress(self, generation: int, value: float, message: str = "") -> None:
        if self.callbacks.on_progress:
            self.callbacks.on_progress(value)
        if self.callbacks.on_event:
            self.callbacks.on_event(make_progress_event(generation, value, message))
