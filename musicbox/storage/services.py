"""File access for catalog text files."""

from pathlib import Path
from typing import Iterator, Optional

from ..core.config import CatalogConfig
from ..core.exceptions import CatalogReadError


class CatalogReader:
    """Reads catalog files line by line."""

    def __init__(self, encoding: Optional[str] = None):
        """Initialize with optional text encoding."""
        self.encoding = encoding or CatalogConfig.ENCODING

    def read_lines(self, path: Path) -> Iterator[str]:
        """Yield each line of the file without its line ending.

        Lines are produced lazily, so read errors surface while iterating.
        """
        path = Path(path)
        try:
            with path.open("r", encoding=self.encoding, newline="") as handle:
                for line in handle:
                    yield line.rstrip("\r\n")
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogReadError(
                "Failed to read catalog file",
                file_path=str(path),
                details=str(e),
            ) from e
