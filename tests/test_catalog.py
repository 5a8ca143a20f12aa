"""
Format Catalog Tests
====================
"""

import pytest

from videoconv.app.catalog import (
    DEFAULT_FORMATS,
    FormatCatalog,
    extension_of,
    normalize_format,
)


class TestExtensionOf:

    @pytest.mark.parametrize("name,expected", [
        ("movie.mkv", "mkv"),
        ("Movie.MKV", "mkv"),
        ("movie.final.mov", "mov"),
        ("archive.tar.gz", "gz"),
        ("noext", "noext"),
    ])
    def test_extension(self, name, expected):
        assert extension_of(name) == expected

    def test_normalize_format(self):
        assert normalize_format(" .MP4 ") == "mp4"
        assert normalize_format("webm") == "webm"


class TestFormatCatalog:

    def test_default_order(self):
        catalog = FormatCatalog()
        assert list(catalog) == list(DEFAULT_FORMATS)
        assert len(catalog) == 10
        assert catalog.formats[0] == "mp4"

    def test_membership_is_case_insensitive(self):
        catalog = FormatCatalog()
        assert "mkv" in catalog
        assert "MKV" in catalog
        assert "3gp" in catalog
        assert "xyz" not in catalog
        assert 3 not in catalog

    def test_custom_formats_are_normalized(self):
        catalog = FormatCatalog((".MP4", "Mkv"))
        assert catalog.formats == ("mp4", "mkv")

    def test_rejects_empty_catalog(self):
        with pytest.raises(ValueError):
            FormatCatalog(())

    def test_rejects_blank_entry(self):
        with pytest.raises(ValueError):
            FormatCatalog(("mp4", " "))

    def test_rejects_duplicates(self):
        with pytest.raises(ValueError):
            FormatCatalog(("mp4", "MP4"))

    def test_options(self):
        options = FormatCatalog().options()
        assert options[0] == ("MP4", "mp4")
        assert ("OGV", "ogv") in options
        assert len(options) == 10

    def test_preview(self):
        assert FormatCatalog().preview() == ["MP4", "MKV", "MOV", "AVI", "WEBM", "+5 more"]
        assert FormatCatalog(("mp4", "mkv")).preview() == ["MP4", "MKV"]
