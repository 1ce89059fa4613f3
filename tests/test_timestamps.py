"""Tests for timestamp conversion."""

import random

import pytest

from musicbox.catalog.timestamps import format_duration, parse_duration
from musicbox.core.config import CatalogConfig
from musicbox.core.exceptions import FormatError


class TestParseDuration:
    """Test parse_duration."""

    def test_minutes_and_seconds(self):
        assert parse_duration("0:1:20") == 80

    def test_padded_hours(self):
        assert parse_duration("1:00:00") == 3600

    def test_track_length(self):
        assert parse_duration("0:03:22") == 202

    def test_minutes_are_not_range_checked(self):
        assert parse_duration("0:90:00") == 5400

    def test_largest_duration(self):
        assert parse_duration("18:12:15") == CatalogConfig.MAX_DURATION_SECONDS

    @pytest.mark.parametrize(
        "text",
        ["1:2", "1:2:3:4", "", "a:00:00", "0:-1:00", "+1:00:00", "0:1.5:00", "0::00"],
    )
    def test_rejects_malformed(self, text):
        with pytest.raises(FormatError):
            parse_duration(text)

    def test_rejects_overflow(self):
        with pytest.raises(FormatError) as exc_info:
            parse_duration("18:12:16")

        assert "out of range" in str(exc_info.value)

    def test_error_mentions_field_count(self):
        with pytest.raises(FormatError) as exc_info:
            parse_duration("1:2")

        assert "2 field(s)" in exc_info.value.details


class TestFormatDuration:
    """Test format_duration."""

    def test_is_unpadded(self):
        assert format_duration(3661) == "1:1:1"
        assert format_duration(0) == "0:0:0"
        assert format_duration(202) == "0:3:22"

    def test_does_not_preserve_padding(self):
        assert format_duration(parse_duration("0:03:22")) == "0:3:22"

    def test_allows_totals_above_song_maximum(self):
        assert format_duration(70000) == "19:26:40"

    @pytest.mark.parametrize("value", [-1, 1.5, "60", True])
    def test_rejects_invalid(self, value):
        with pytest.raises(ValueError):
            format_duration(value)

    def test_round_trip(self):
        rng = random.Random(1967)
        limit = CatalogConfig.MAX_DURATION_SECONDS
        samples = [0, 59, 60, 3599, 3600, limit]
        samples += [rng.randint(0, limit) for _ in range(200)]

        for seconds in samples:
            assert parse_duration(format_duration(seconds)) == seconds
