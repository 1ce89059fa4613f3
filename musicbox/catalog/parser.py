"""Line parser that rebuilds a Collection from a catalog text stream.

A catalog is a flat list of lines where each header line opens an album and
the track lines that follow belong to it::

    Jimi Hendrix Experience : Are You Experienced?
    0:03:22 - Foxy Lady
    0:03:46 - Manic Depression

Parsing is a fold over the lines: ``step`` takes the state built so far and
one line and returns the next state, ``finish`` closes the in-flight album.
"""

import logging
import re
from dataclasses import dataclass, field
from functools import reduce
from typing import Iterable, Optional

from ..core.config import CatalogConfig, ParserOptions
from ..core.exceptions import FormatError
from .models import Album, Collection, Song
from .timestamps import parse_duration

logger = logging.getLogger(__name__)

_TRACK_SEPARATOR = re.compile(CatalogConfig.TRACK_SEPARATOR_PATTERN)


@dataclass
class ParseState:
    """Everything carried from one line to the next."""

    collection: Collection = field(default_factory=Collection)
    current: Optional[Album] = None
    line_number: int = 0
    # True while ``current`` is the placeholder album for pre-header tracks
    sentinel: bool = False


class CatalogParser:
    """Builds a Collection out of catalog lines."""

    def __init__(self, options: Optional[ParserOptions] = None):
        """Initialize with optional parser options."""
        self.options = options or ParserOptions()

    def initial_state(self) -> ParseState:
        """State before the first line has been read."""
        if self.options.allow_preamble:
            sentinel = Album(
                CatalogConfig.SENTINEL_NAME, CatalogConfig.SENTINEL_ARTIST
            )
            return ParseState(current=sentinel, sentinel=True)
        return ParseState()

    def parse(self, lines: Iterable[str]) -> Collection:
        """Parse every line and return the finished collection.

        The first malformed line aborts the whole parse with ``FormatError``.
        """
        state = reduce(self.step, lines, self.initial_state())
        return self.finish(state)

    def step(self, state: ParseState, line: str) -> ParseState:
        """Consume a single line."""
        state.line_number += 1

        if self.options.skip_blank_lines and not line.strip():
            return state

        if _TRACK_SEPARATOR.search(line):
            self._add_track(state, line)
        else:
            self._start_album(state, line)
        return state

    def finish(self, state: ParseState) -> Collection:
        """Commit the in-flight album once the input is exhausted."""
        if self.options.flush_trailing:
            self._commit(state)
        elif state.current is not None:
            logger.debug(
                "Dropping trailing album '%s' (%d songs)",
                state.current.name,
                state.current.song_count,
            )

        logger.debug(
            "Parsed %d album(s) from %d line(s)",
            state.collection.count,
            state.line_number,
        )
        return state.collection

    def _add_track(self, state: ParseState, line: str) -> None:
        if state.current is None:
            raise FormatError(
                "Track line before any album header",
                line_number=state.line_number,
                line=line,
            )

        duration_text, name = _TRACK_SEPARATOR.split(line, maxsplit=1)
        try:
            length = parse_duration(duration_text)
        except FormatError as e:
            raise FormatError(
                e.message,
                line_number=state.line_number,
                line=line,
                details=e.details,
            ) from e

        if self.options.inherit_artist and not state.sentinel:
            artist = state.current.artist
        else:
            artist = CatalogConfig.PLACEHOLDER_ARTIST

        state.current.add(Song(name, artist, length))

    def _start_album(self, state: ParseState, line: str) -> None:
        parts = line.split(CatalogConfig.HEADER_SEPARATOR)
        if len(parts) != 2:
            raise FormatError(
                "Invalid album header",
                line_number=state.line_number,
                line=line,
                details=(
                    f"expected exactly one '{CatalogConfig.HEADER_SEPARATOR}', "
                    f"found {len(parts) - 1}"
                ),
            )

        artist, name = parts
        self._commit(state)
        state.current = Album(name, artist)
        state.sentinel = False

    def _commit(self, state: ParseState) -> None:
        album = state.current
        if album is None:
            return

        state.current = None
        if state.sentinel and not album.songs:
            return

        state.collection.add(album)
        logger.debug(
            "Committed album '%s' by '%s' with %d song(s)",
            album.name,
            album.artist,
            album.song_count,
        )
