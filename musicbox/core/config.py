"""Configuration constants and settings for musicbox."""

from dataclasses import dataclass


class CatalogConfig:
    """Catalog file format constants."""

    HEADER_SEPARATOR = " : "
    TRACK_SEPARATOR_PATTERN = r"\s-\s"
    TIMESTAMP_SEPARATOR = ":"
    TIMESTAMP_FIELDS = 3

    # Durations are stored as 16-bit unsigned seconds (about 18.2 hours)
    MAX_DURATION_SECONDS = 65535

    # Placeholder album for track lines seen before the first header
    SENTINEL_NAME = "DEFAULT"
    SENTINEL_ARTIST = "DEFAULT"

    # Track lines carry no artist of their own
    PLACEHOLDER_ARTIST = "DEFAULT"

    ENCODING = "utf-8"


class AppInfo:
    """Application metadata."""

    NAME = "musicbox"
    VERSION = "1.0.0"
    DESCRIPTION = "Plain-text music catalog browser"


@dataclass
class ParserOptions:
    """Behaviour switches for the catalog parser."""

    allow_preamble: bool = False
    flush_trailing: bool = True
    skip_blank_lines: bool = False
    inherit_artist: bool = False

    def __post_init__(self):
        """Validate option values."""
        for name in (
            "allow_preamble",
            "flush_trailing",
            "skip_blank_lines",
            "inherit_artist",
        ):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be a boolean")
