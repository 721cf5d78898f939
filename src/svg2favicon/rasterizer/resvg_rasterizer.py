"""Resvg-based rasterizer module.

This module provides SVG rasterization using the resvg library via resvg-py,
offering fast and deterministic rendering with no external dependencies.
"""

import logging
from io import BytesIO
from typing import Any, Optional, Union

import resvg_py
from PIL import Image

from svg2favicon import svg_utils

from .base_rasterizer import BaseRasterizer

logger = logging.getLogger(__name__)


class ResvgRasterizer(BaseRasterizer):
    """SVG rasterizer using resvg.

    Resvg is a CPU-only renderer without system-dependent antialiasing, so the
    same document rendered at the same size always produces the same pixels.

    Example:
        >>> rasterizer = ResvgRasterizer()
        >>> image = rasterizer.from_file('favicon.svg', size=32)
        >>> image.size
        (32, 32)

        >>> svg_content = '<svg>...</svg>'
        >>> image = rasterizer.from_string(svg_content, size=64)
    """

    def __init__(self, dpi: int = 0) -> None:
        """Initialize the resvg rasterizer.

        Args:
            dpi: Dots per inch used to resolve physical units when no size is
                given. If 0 (default), uses resvg's default of 96 DPI.
        """
        self.dpi = dpi

    def _size_options(self, size: Optional[int]) -> dict[str, Any]:
        if size is None:
            return {}
        return {"width": size, "height": size}

    def _to_image(self, png_bytes: Any, size: Optional[int]) -> Image.Image:
        image = Image.open(BytesIO(bytes(png_bytes)))
        image = self._composite_background(image)
        if size is not None:
            image = self._fit_square(image, size)
        return image

    def from_file(self, filepath: str, size: Optional[int] = None) -> Image.Image:
        """Rasterize an SVG file to a PIL Image.

        Args:
            filepath: Path to the SVG file to rasterize.
            size: Target edge length in pixels.

        Returns:
            PIL Image object in RGBA mode containing the rasterized SVG.

        Raises:
            ValueError: If the SVG content is invalid.
        """
        png_bytes = resvg_py.svg_to_bytes(
            svg_path=filepath, dpi=int(self.dpi), **self._size_options(size)
        )
        return self._to_image(png_bytes, size)

    def from_string(
        self, svg_content: Union[str, bytes], size: Optional[int] = None
    ) -> Image.Image:
        """Rasterize SVG content from a string to a PIL Image.

        This method directly rasterizes the SVG content without creating a
        temporary file.

        Args:
            svg_content: SVG content as string or bytes.
            size: Target edge length in pixels.

        Returns:
            PIL Image object in RGBA mode containing the rasterized SVG.

        Raises:
            ValueError: If the SVG content is invalid.
        """
        svg_string = (
            svg_utils.decode(svg_content)
            if isinstance(svg_content, bytes)
            else svg_content
        )
        png_bytes = resvg_py.svg_to_bytes(
            svg_string=svg_string, dpi=int(self.dpi), **self._size_options(size)
        )
        return self._to_image(png_bytes, size)
