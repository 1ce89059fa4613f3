"""Catalog domain models."""

from dataclasses import dataclass, field
from typing import List

from ..core.exceptions import AlbumNotFoundError
from .timestamps import format_duration


@dataclass(frozen=True)
class Song:
    """A single track and its length in seconds."""

    name: str
    artist: str
    length: int

    @property
    def timestamp(self) -> str:
        """Length as an unpadded H:M:S string."""
        return format_duration(self.length)

    @property
    def display_line(self) -> str:
        return f"{self.name} : {self.timestamp}"


@dataclass
class Album:
    """An album and its songs in track order."""

    name: str
    artist: str
    songs: List[Song] = field(default_factory=list)

    def add(self, song: Song) -> None:
        """Append a song to the end of the track list."""
        self.songs.append(song)

    @property
    def song_count(self) -> int:
        return len(self.songs)

    @property
    def total_length(self) -> int:
        """Running time of the album in seconds."""
        return sum(song.length for song in self.songs)

    @property
    def summary(self) -> str:
        return f"{self.name} - {self.artist} [{self.song_count} songs]"


@dataclass
class Collection:
    """Every album parsed from a single catalog file.

    ``count`` is kept in step with ``albums`` by ``add``; it is never
    recomputed from the list.
    """

    count: int = field(default=0, init=False)
    albums: List[Album] = field(default_factory=list, init=False)

    def add(self, album: Album) -> None:
        """Append a completed album."""
        self.albums.append(album)
        self.count += 1

    def get_length(self) -> int:
        """Number of albums in this collection."""
        return self.count

    @property
    def total_songs(self) -> int:
        return sum(album.song_count for album in self.albums)

    @property
    def total_length(self) -> int:
        """Running time of every album in seconds."""
        return sum(album.total_length for album in self.albums)

    def find_album(self, name: str) -> Album:
        """Return the first album whose name matches exactly."""
        for album in self.albums:
            if album.name == name:
                return album
        raise AlbumNotFoundError(name)

    def list_album_names(self) -> List[str]:
        """Album names in the order they were added."""
        return [album.name for album in self.albums]

    def list_songs(self, album_name: str) -> List[Song]:
        """Songs of the named album in track order."""
        return list(self.find_album(album_name).songs)
