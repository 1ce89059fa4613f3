"""Catalog loading service."""

import logging
from contextlib import closing
from pathlib import Path
from typing import Iterable, Optional

from ..core.config import ParserOptions
from ..storage.services import CatalogReader
from .models import Collection
from .parser import CatalogParser

logger = logging.getLogger(__name__)


class CatalogService:
    """Loads catalog files into collections."""

    def __init__(
        self,
        options: Optional[ParserOptions] = None,
        reader: Optional[CatalogReader] = None,
    ):
        """Initialize with optional parser options and reader."""
        self.options = options or ParserOptions()
        self.reader = reader or CatalogReader()
        self.parser = CatalogParser(self.options)

    def load(self, path: Path) -> Collection:
        """Parse the catalog file at ``path``."""
        logger.debug("Loading catalog from %s", path)
        with closing(self.reader.read_lines(path)) as lines:
            return self.parser.parse(lines)

    def parse_lines(self, lines: Iterable[str]) -> Collection:
        """Parse catalog lines that are already in memory."""
        return self.parser.parse(lines)
