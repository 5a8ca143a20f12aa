"""
Input Source Tests
==================
Drop zone, pasted paths and the explicit picker.
"""

from pathlib import Path

import pytest

from videoconv.app.events import RequestStatus
from videoconv.app.intake import DropZone, normalize_dropped_path, parse_dropped_paths
from videoconv.app.models import SourceFile
from videoconv.errors import UnsupportedFormatError


class TestPathParsing:

    def test_normalize_dropped_path(self):
        assert normalize_dropped_path("'~/movie.mkv'") == "~/movie.mkv"
        assert normalize_dropped_path('"/tmp/my\\ clip.mov"') == "/tmp/my clip.mov"
        assert normalize_dropped_path("(/tmp/my clip.mp4)") == "/tmp/my clip.mp4"
        assert normalize_dropped_path("file:///tmp/My%20Clip.webm") == "/tmp/My Clip.webm"

    def test_parse_multiple_paths(self):
        paths = parse_dropped_paths("'/tmp/a b.mkv' /tmp/c.mp4\n")
        assert paths == [Path("/tmp/a b.mkv"), Path("/tmp/c.mp4")]

    def test_parse_escaped_spaces(self):
        assert parse_dropped_paths("/tmp/my\\ movie.mkv") == [Path("/tmp/my movie.mkv")]

    def test_parse_unbalanced_quote_falls_back(self):
        assert parse_dropped_paths("/tmp/it's.mkv") == [Path("/tmp/it's.mkv")]

    def test_parse_blank(self):
        assert parse_dropped_paths("   ") == []


class TestDropZone:

    def test_drag_flags(self, controller):
        zone = DropZone(controller)
        assert not zone.is_drag_over
        zone.drag_enter()
        assert zone.is_drag_over
        zone.drag_leave()
        assert not zone.is_drag_over

    def test_drop_takes_first_file(self, controller):
        zone = DropZone(controller)
        zone.drag_enter()
        accepted = zone.drop([
            SourceFile.from_bytes("first.mkv", b"1"),
            SourceFile.from_bytes("second.mov", b"2"),
        ])
        assert accepted.name == "first.mkv"
        assert controller.request.source_file.name == "first.mkv"
        assert not zone.is_drag_over

    def test_empty_drop_is_ignored(self, controller):
        zone = DropZone(controller)
        zone.drag_enter()
        assert zone.drop([]) is None
        assert controller.status == RequestStatus.IDLE
        assert not zone.is_drag_over

    def test_unsupported_drop(self, controller):
        zone = DropZone(controller)
        with pytest.raises(UnsupportedFormatError):
            zone.drop([SourceFile.from_bytes("song.xyz", b"1")])
        assert controller.status == RequestStatus.IDLE

    def test_drop_paths_stats_first_only(self, controller, sample_mkv, tmp_path):
        zone = DropZone(controller)
        accepted = zone.drop_paths([sample_mkv, tmp_path / "missing.mov"])
        assert accepted.path == sample_mkv
        assert accepted.size_bytes == 2048

    def test_drop_missing_path(self, controller, tmp_path):
        zone = DropZone(controller)
        with pytest.raises(FileNotFoundError):
            zone.drop_paths([tmp_path / "missing.mkv"])

    def test_paste(self, controller, sample_mkv):
        zone = DropZone(controller)
        accepted = zone.paste(f"'{sample_mkv}'")
        assert accepted.name == "movie.mkv"
        assert controller.status == RequestStatus.FILE_ACCEPTED

    def test_pick(self, controller):
        zone = DropZone(controller)
        assert zone.pick(None) is None
        assert controller.status == RequestStatus.IDLE
        zone.pick(SourceFile.from_bytes("trailer.webm", b"1"))
        assert controller.request.source_format == "webm"
