"""
Format Catalog
==============
The fixed, ordered set of container formats the converter accepts.

Membership in the catalog is the only validity gate for both the
source and the target format.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


DEFAULT_FORMATS: tuple[str, ...] = (
    "mp4",
    "mkv",
    "mov",
    "avi",
    "webm",
    "flv",
    "wmv",
    "m4v",
    "3gp",
    "ogv",
)


def extension_of(file_name: str) -> str:
    """
    Lower-cased text after the last dot of a file name.

    A name without a dot yields the whole name.
    """
    return file_name.rsplit(".", 1)[-1].lower()


def normalize_format(value: str) -> str:
    return value.strip().lstrip(".").lower()


@dataclass(frozen=True)
class FormatCatalog:
    """
    Immutable catalog of supported extensions.

    Example:
        catalog = FormatCatalog()
        "mkv" in catalog        # True
        catalog.options()[0]    # ("MP4", "mp4")
    """

    formats: tuple[str, ...] = DEFAULT_FORMATS

    def __post_init__(self):
        normalized = tuple(normalize_format(f) for f in self.formats)
        if not normalized or any(not f for f in normalized):
            raise ValueError("Format catalog needs at least one non-empty format")
        if len(set(normalized)) != len(normalized):
            raise ValueError(f"Duplicate formats in catalog: {normalized}")
        # Frozen dataclass: bypass __setattr__ to store the normalized tuple
        object.__setattr__(self, "formats", normalized)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, str) and value.lower() in self.formats

    def __iter__(self) -> Iterator[str]:
        return iter(self.formats)

    def __len__(self) -> int:
        return len(self.formats)

    def options(self) -> list[tuple[str, str]]:
        """(label, value) pairs for a format picker."""
        return [(fmt.upper(), fmt) for fmt in self.formats]

    def preview(self, count: int = 5) -> list[str]:
        """Short badge list for the drop zone, e.g. MP4 ... WEBM, +5 more."""
        badges = [fmt.upper() for fmt in self.formats[:count]]
        remaining = len(self.formats) - count
        if remaining > 0:
            badges.append(f"+{remaining} more")
        return badges
