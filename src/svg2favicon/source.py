"""SVG source loading."""

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from svg2favicon import svg_utils
from svg2favicon.errors import DecodeError, ReadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceImage:
    """Immutable SVG document bytes read from a file.

    The buffer is never modified after loading, so a single instance can be
    shared by concurrent renders.
    """

    path: str
    data: bytes

    @classmethod
    def load(cls, path: str) -> "SourceImage":
        """Read an SVG file.

        Raises:
            ReadError: If the file is missing or cannot be read.
        """
        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise ReadError(f"Failed to read {path}: {e}", path=path) from e
        logger.debug(f"Loaded {len(data)} bytes from {path}")
        return cls(path=path, data=data)

    def validate(self) -> ET.Element:
        """Check that the bytes hold an SVG document and return its root.

        Raises:
            DecodeError: If the content is not well-formed XML or the root
                element is not <svg>.
        """
        try:
            root = svg_utils.fromstring(self.data)
        except ET.ParseError as e:
            raise DecodeError(
                f"Malformed SVG in {self.path}: {e}", path=self.path
            ) from e
        if not svg_utils.is_svg(root):
            raise DecodeError(
                f"Root element of {self.path} is <{root.tag}>, expected <svg>",
                path=self.path,
            )
        return root
