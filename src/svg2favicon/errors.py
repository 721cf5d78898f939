"""Error types raised by the favicon conversion pipeline."""

from typing import Optional


class FaviconError(Exception):
    """Base class for conversion failures.

    Attributes:
        path: File path involved in the failure, if any.
    """

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class ReadError(FaviconError):
    """Source file is missing or unreadable."""


class DecodeError(FaviconError):
    """Source content is not an SVG document that can be rasterized."""


class WriteError(FaviconError):
    """Output file could not be created or written."""
