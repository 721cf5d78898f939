"""SVG to PNG favicon conversion pipeline.

Example usage::

    from svg2favicon import FaviconConfig, convert

    # Fixed paths: ./priv/static/images/favicon.svg -> ./priv/static/favicon.png
    result = convert()

    # Custom paths and sizes.
    config = FaviconConfig(source="logo.svg", output="favicon.png", sizes=(16, 32))
    result = convert(config)
    png_bytes = result.get(16).data
"""

import concurrent.futures
import logging
import os
import shutil
import tempfile
from dataclasses import dataclass
from typing import Optional, Sequence

from PIL import Image

from svg2favicon import svg_utils
from svg2favicon.config import FaviconConfig
from svg2favicon.errors import DecodeError, WriteError
from svg2favicon.image_utils import decode_image, encode_image
from svg2favicon.rasterizer import BaseRasterizer, ResvgRasterizer
from svg2favicon.source import SourceImage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedImage:
    """PNG-encoded raster of size x size pixels."""

    size: int
    data: bytes

    def to_image(self) -> Image.Image:
        """Decode the PNG buffer to a PIL Image."""
        return decode_image(self.data)


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of a successful conversion run.

    Attributes:
        images: Rendered images in request order.
        output: Path of the written favicon, or None if the favicon size was
            not requested.
    """

    images: tuple[RenderedImage, ...]
    output: Optional[str] = None

    @property
    def sizes(self) -> list[int]:
        """Rendered sizes in request order."""
        return [image.size for image in self.images]

    def get(self, size: int) -> RenderedImage:
        """Return the rendered image of the given size.

        Raises:
            KeyError: If the size was not rendered.
        """
        for image in self.images:
            if image.size == size:
                return image
        raise KeyError(size)


def render_size(
    source: SourceImage, size: int, rasterizer: BaseRasterizer
) -> RenderedImage:
    """Render the source at size x size pixels and encode it as PNG.

    Raises:
        DecodeError: If the renderer cannot rasterize the source.
    """
    try:
        image = rasterizer.from_string(source.data, size=size)
    except Exception as e:
        raise DecodeError(
            f"Failed to rasterize {source.path} at {size}x{size}: {e}",
            path=source.path,
        ) from e
    data = encode_image(image, "PNG")
    logger.debug(f"Rendered {size}x{size} ({len(data)} bytes)")
    return RenderedImage(size=size, data=data)


def rasterize_sizes(
    source: SourceImage,
    sizes: Sequence[int],
    rasterizer: Optional[BaseRasterizer] = None,
    max_workers: int = 1,
) -> list[RenderedImage]:
    """Render the source once per requested size.

    Args:
        source: SVG source to render.
        sizes: Edge lengths in pixels.
        rasterizer: Rasterizer backend. Defaults to ResvgRasterizer.
        max_workers: Number of worker threads. 1 renders sequentially.

    Returns:
        One RenderedImage per size, in the order of sizes.

    Raises:
        DecodeError: If any size fails to render.
    """
    if rasterizer is None:
        rasterizer = ResvgRasterizer()

    if max_workers <= 1 or len(sizes) <= 1:
        return [render_size(source, size, rasterizer) for size in sizes]

    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        # map() yields in submission order and re-raises the first failure.
        return list(
            executor.map(lambda size: render_size(source, size, rasterizer), sizes)
        )


def write_favicon(image: RenderedImage, output: str) -> str:
    """Write the PNG buffer to output, replacing any existing file.

    The buffer goes to a temporary file in the same directory, which is then
    renamed over output, so a failed write leaves any existing file intact.
    The parent directory must already exist.

    Raises:
        WriteError: If the file cannot be created or written.
    """
    dirname = os.path.dirname(os.path.abspath(output))
    temp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            dir=dirname, prefix=".favicon-", suffix=".tmp", delete=False
        ) as f:
            temp_path = f.name
            f.write(image.data)
        # NamedTemporaryFile creates the file as 0600.
        if os.path.exists(output):
            shutil.copymode(output, temp_path)
        else:
            os.chmod(temp_path, 0o644)
        os.replace(temp_path, output)
    except OSError as e:
        if temp_path is not None and os.path.exists(temp_path):
            os.unlink(temp_path)
        raise WriteError(f"Failed to write {output}: {e}", path=output) from e
    return output


def convert(
    config: Optional[FaviconConfig] = None,
    rasterizer: Optional[BaseRasterizer] = None,
) -> ConversionResult:
    """Rasterize an SVG favicon at every configured size and save the PNG fallback.

    Args:
        config: Conversion settings. Defaults to FaviconConfig.default().
        rasterizer: Rasterizer backend. Defaults to ResvgRasterizer.

    Returns:
        ConversionResult with the rendered images and the written path.

    Raises:
        ValueError: If the configuration is invalid.
        ReadError: If the source cannot be read.
        DecodeError: If the source is not a renderable SVG document.
        WriteError: If the favicon cannot be written.
    """
    if config is None:
        config = FaviconConfig.default()
    config.validate()

    source = SourceImage.load(config.source)
    dimensions = svg_utils.get_dimensions(source.validate())
    if dimensions is not None and dimensions[0] != dimensions[1]:
        logger.warning(
            f"{config.source} is not square ({dimensions[0]:g}x{dimensions[1]:g}); "
            "rasters will be padded to square"
        )

    images = rasterize_sizes(
        source, config.sizes, rasterizer=rasterizer, max_workers=config.max_workers
    )
    logger.info("SVG converted to PNG buffers")
    logger.info(f"Sizes generated: {list(config.sizes)}")

    if not config.persists():
        logger.warning(
            f"Size {config.favicon_size} was not requested; skipping {config.output}"
        )
        return ConversionResult(images=tuple(images))

    favicon = next(image for image in images if image.size == config.favicon_size)
    output = write_favicon(favicon, config.output)
    logger.info(
        f"Created {output} ({config.favicon_size}x{config.favicon_size})"
    )
    return ConversionResult(images=tuple(images), output=output)
