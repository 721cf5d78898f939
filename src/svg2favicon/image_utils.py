import io
import logging

from PIL import Image

logger = logging.getLogger(__name__)


def encode_image(image: Image.Image, format: str = "PNG") -> bytes:
    """Encode a PIL image to bytes in the specified format.

    PNG output carries no timestamp or text chunks, so equal pixels encode to
    equal bytes.
    """
    with io.BytesIO() as output:
        image.save(output, format=format.upper())
        return output.getvalue()


def decode_image(data: bytes, mode: str | None = None) -> Image.Image:
    """Decode image data from bytes to a PIL image."""
    with io.BytesIO(data) as buffer:
        image = Image.open(buffer)
        image.load()
    if mode is not None:
        return image.convert(mode)
    return image

