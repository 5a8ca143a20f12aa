"""
Property-Based Tests for the Conversion Controller
==================================================
Uses Hypothesis to check intake validation and submit preconditions
over arbitrary file names and format pairs.
"""

import asyncio
import tempfile
from pathlib import Path

import pytest
from hypothesis import given, settings, strategies as st

from videoconv.app.catalog import DEFAULT_FORMATS
from videoconv.app.config import AppConfig
from videoconv.app.controller import ConversionController
from videoconv.app.events import RequestStatus
from videoconv.app.models import SourceFile
from videoconv.errors import IdenticalFormatsError, UnsupportedFormatError
from conftest import FakeConversionService


pytestmark = pytest.mark.property

stems = st.text(
    alphabet=st.characters(whitelist_categories=("Ll", "Lu", "Nd"), whitelist_characters=" _-"),
    min_size=1,
    max_size=30,
)
supported = st.sampled_from(DEFAULT_FORMATS)
unsupported = st.text(alphabet="abcdefghijklmnopqrstuvwxyz0123456789", min_size=1, max_size=6).filter(
    lambda ext: ext not in DEFAULT_FORMATS
)


def _controller(output_dir: Path) -> ConversionController:
    config = AppConfig(progress_interval=0.01, reset_delay=60.0, output_dir=output_dir)
    return ConversionController(config=config, service=FakeConversionService())


@given(stem=stems, ext=supported, upper=st.booleans())
@settings(max_examples=100)
def test_supported_extensions_are_accepted(stem, ext, upper):
    controller = _controller(Path(tempfile.gettempdir()))
    name = f"{stem}.{ext.upper() if upper else ext}"

    controller.intake(SourceFile.from_bytes(name, b"x"))

    request = controller.request
    assert request.status == RequestStatus.FILE_ACCEPTED
    assert request.source_format == ext
    assert request.progress == 0.0


@given(stem=stems, ext=unsupported)
@settings(max_examples=100)
def test_unsupported_extensions_leave_state_untouched(stem, ext):
    controller = _controller(Path(tempfile.gettempdir()))
    controller.intake(SourceFile.from_bytes("movie.mkv", b"x"))
    before = controller.request

    with pytest.raises(UnsupportedFormatError):
        controller.intake(SourceFile.from_bytes(f"{stem}.{ext}", b"x"))

    assert controller.request == before


@given(source=supported, target=supported)
@settings(max_examples=60, deadline=None)
def test_submit_reaches_service_only_for_distinct_formats(source, target):
    async def scenario(output_dir: Path) -> None:
        controller = _controller(output_dir)
        controller.intake(SourceFile.from_bytes(f"clip.{source}", b"payload"))
        controller.select_target(target)
        assert controller.can_submit == (source != target)

        if source == target:
            with pytest.raises(IdenticalFormatsError):
                await controller.submit()
            assert controller.service.calls == []
            assert controller.status == RequestStatus.FILE_ACCEPTED
        else:
            converted = await controller.submit()
            assert converted.name == f"clip.{target}"
            assert controller.service.calls == [(f"clip.{source}", target)]
            assert controller.status == RequestStatus.SUCCEEDED
            assert controller.progress == 100.0

    with tempfile.TemporaryDirectory() as tmp:
        asyncio.run(scenario(Path(tmp)))
