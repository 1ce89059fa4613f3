"""Custom exceptions for the musicbox application."""


class MusicboxError(Exception):
    """Base exception for all musicbox errors."""

    def __init__(self, message: str, details: str = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class CatalogReadError(MusicboxError):
    """Raised when a catalog file cannot be opened or read."""

    def __init__(self, message: str, file_path: str = None, details: str = None):
        super().__init__(message, details)
        self.file_path = file_path


class FormatError(MusicboxError):
    """Raised when a line or timestamp does not match the catalog format."""

    def __init__(
        self,
        message: str,
        line_number: int = None,
        line: str = None,
        details: str = None,
    ):
        super().__init__(message, details)
        self.line_number = line_number
        self.line = line

    def __str__(self) -> str:
        text = super().__str__()
        if self.line_number is not None:
            text = f"line {self.line_number}: {text}"
        if self.line is not None:
            text += f" ({self.line!r})"
        return text


class AlbumNotFoundError(MusicboxError):
    """Raised when no album in a collection has the requested name."""

    def __init__(self, name: str):
        super().__init__(f"Couldn't find album '{name}'")
        self.name = name
