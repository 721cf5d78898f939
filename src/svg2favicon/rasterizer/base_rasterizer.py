import logging
import os
import tempfile
from abc import ABC, abstractmethod
from typing import Optional, Union

from PIL import Image

from svg2favicon import svg_utils

logger = logging.getLogger(__name__)


class BaseRasterizer(ABC):
    """Base class for SVG rasterizer implementations.

    This abstract base class defines the interface for converting SVG documents
    to raster images (PIL Image objects). Subclasses must implement the
    `from_file` method to provide the actual rasterization logic.
    """

    def from_string(
        self, svg_content: Union[str, bytes], size: Optional[int] = None
    ) -> Image.Image:
        """Rasterize SVG content from a string or bytes to a PIL Image.

        This is a convenience method that writes the SVG content to a temporary
        file and calls `from_file`. Subclasses may override this for more
        efficient implementations.

        Args:
            svg_content: SVG content as string or bytes.
            size: Target edge length in pixels. If None, the intrinsic size of
                the document is used.

        Returns:
            PIL Image object containing the rasterized SVG.
        """
        svg_string = (
            svg_utils.decode(svg_content)
            if isinstance(svg_content, bytes)
            else svg_content
        )
        with tempfile.NamedTemporaryFile(suffix=".svg", mode="wb", delete=False) as f:
            f.write(svg_string.encode("utf-8"))
        try:
            return self.from_file(f.name, size=size)
        finally:
            os.unlink(f.name)

    @abstractmethod
    def from_file(self, filepath: str, size: Optional[int] = None) -> Image.Image:
        """Rasterize an SVG file to a PIL Image.

        Args:
            filepath: Path to the SVG file to rasterize.
            size: Target edge length in pixels. If given, the result must be
                exactly size x size.

        Returns:
            PIL Image object containing the rasterized SVG.
        """
        raise NotImplementedError

    def _composite_background(self, image: Image.Image) -> Image.Image:
        """Composite image onto a transparent background to normalize alpha.

        Args:
            image: Input PIL Image, typically with RGBA mode.

        Returns:
            PIL Image with normalized alpha channel.
        """
        background = Image.new("RGBA", size=image.size, color=(255, 255, 255, 0))
        background.alpha_composite(image.convert("RGBA"))
        return background

    def _fit_square(self, image: Image.Image, size: int) -> Image.Image:
        """Center the image on a transparent size x size canvas.

        Images larger than the canvas are first scaled down, keeping their
        aspect ratio. Images that already match are returned unchanged.
        """
        if image.size == (size, size):
            return image
        logger.debug(f"Fitting {image.width}x{image.height} raster into {size}x{size}")
        image = image.convert("RGBA")
        if image.width > size or image.height > size:
            image = image.copy()
            image.thumbnail((size, size), Image.Resampling.LANCZOS)
        canvas = Image.new("RGBA", (size, size), color=(255, 255, 255, 0))
        offset = ((size - image.width) // 2, (size - image.height) // 2)
        canvas.alpha_composite(image, dest=offset)
        return canvas
