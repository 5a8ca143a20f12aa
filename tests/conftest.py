import asyncio
import pytest
from pathlib import Path
import sys

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from videoconv.app.config import AppConfig
from videoconv.app.controller import ControllerCallbacks, ConversionController
from videoconv.app.models import ConversionPayload
from videoconv.delivery import DeliverySink, DirectorySink
from videoconv.errors import DeliveryError
from videoconv.service import ConversionService


class FakeConversionService(ConversionService):
    """In-process stand-in for the remote converter."""

    def __init__(self, content: bytes = b"converted-bytes", error: Exception = None):
        self.content = content
        self.error = error
        self.gate = None
        self.calls = []
        self.closed = False

    def hold(self) -> asyncio.Event:
        """Make convert() wait until the returned event is set."""
        self.gate = asyncio.Event()
        return self.gate

    async def convert(self, source, target_format):
        self.calls.append((source.name, target_format))
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return ConversionPayload(content=self.content, media_type="video/" + target_format)

    def close(self) -> None:
        self.closed = True


class RecordingSink(DeliverySink):
    """Directory sink that remembers every reference it was handed."""

    def __init__(self, output_dir: Path, fail: bool = False):
        self.inner = DirectorySink(output_dir)
        self.fail = fail
        self.references = []

    def save(self, reference, filename):
        self.references.append(reference)
        if self.fail:
            raise DeliveryError("Saving converted file failed", details="disk full", file_name=filename)
        return self.inner.save(reference, filename)


@pytest.fixture
def output_dir(tmp_path):
    return tmp_path / "downloads"


@pytest.fixture
def fast_config(output_dir):
    """Config with short timers so lifecycle tests run quickly."""
    return AppConfig(
        progress_interval=0.01,
        progress_max_step=10.0,
        reset_delay=0.05,
        output_dir=output_dir,
    )


@pytest.fixture
def fake_service():
    return FakeConversionService()


@pytest.fixture
def recording_sink(output_dir):
    return RecordingSink(output_dir)


@pytest.fixture
def events():
    return []


@pytest.fixture
def controller(fast_config, fake_service, recording_sink, events):
    return ConversionController(
        config=fast_config,
        service=fake_service,
        sink=recording_sink,
        callbacks=ControllerCallbacks(on_event=events.append),
    )


@pytest.fixture
def sample_mkv(tmp_path):
    """Small file on disk with a supported extension."""
    path = tmp_path / "movie.mkv"
    path.write_bytes(b"\x1aE\xdf\xa3" + b"\x00" * 2044)
    return path
