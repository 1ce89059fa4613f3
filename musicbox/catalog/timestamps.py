"""Conversion between "H:M:S" timestamps and durations in seconds.

``format_duration`` never zero-pads, so ``parse_duration`` inverts it exactly
while the reverse direction drops any padding the input had::

    parse_duration(format_duration(202)) == 202
    format_duration(parse_duration("0:03:22")) == "0:3:22"
"""

import re

from ..core.config import CatalogConfig
from ..core.exceptions import FormatError

_FIELD = re.compile(r"[0-9]+")


def parse_duration(text: str) -> int:
    """Convert an ``H:M:S`` timestamp into a number of seconds."""
    fields = text.strip().split(CatalogConfig.TIMESTAMP_SEPARATOR)
    if len(fields) != CatalogConfig.TIMESTAMP_FIELDS:
        raise FormatError(
            "Invalid timestamp",
            details=f"expected H:M:S, got {len(fields)} field(s) in {text!r}",
        )

    values = []
    for field in fields:
        if not _FIELD.fullmatch(field):
            raise FormatError(
                "Invalid timestamp",
                details=f"{field!r} is not a non-negative integer in {text!r}",
            )
        values.append(int(field))

    hours, minutes, seconds = values
    total = hours * 3600 + minutes * 60 + seconds
    if total > CatalogConfig.MAX_DURATION_SECONDS:
        raise FormatError(
            "Duration out of range",
            details=(
                f"{text!r} is {total} seconds, "
                f"maximum is {CatalogConfig.MAX_DURATION_SECONDS}"
            ),
        )
    return total


def format_duration(seconds: int) -> str:
    """Convert a number of seconds into an unpadded ``H:M:S`` timestamp."""
    if isinstance(seconds, bool) or not isinstance(seconds, int):
        raise ValueError(f"Duration must be an integer, got {seconds!r}")
    # Totals over several songs may exceed the per-song maximum
    if seconds < 0:
        raise ValueError(f"Duration cannot be negative, got {seconds}")

    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    secs = seconds % 60
    return f"{hours}:{minutes}:{secs}"
