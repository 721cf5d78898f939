from logging import getLogger

from svg2favicon.config import DEFAULT_SIZES, FAVICON_SIZE, FaviconConfig
from svg2favicon.convert import (
    ConversionResult,
    RenderedImage,
    convert,
    rasterize_sizes,
    render_size,
    write_favicon,
)
from svg2favicon.errors import DecodeError, FaviconError, ReadError, WriteError
from svg2favicon.source import SourceImage
from svg2favicon.version import __version__ as __version__

logger = getLogger(__name__)

__all__ = [
    "DEFAULT_SIZES",
    "FAVICON_SIZE",
    "ConversionResult",
    "DecodeError",
    "FaviconConfig",
    "FaviconError",
    "ReadError",
    "RenderedImage",
    "SourceImage",
    "WriteError",
    "convert",
    "rasterize_sizes",
    "render_size",
    "write_favicon",
]
