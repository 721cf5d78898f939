import codecs
import logging
import re
import xml.etree.ElementTree as ET
from re import Pattern
from typing import Optional, Tuple, Union

logger = logging.getLogger(__name__)

NAMESPACE = "http://www.w3.org/2000/svg"

XML_ENCODING_RE: Pattern[bytes] = re.compile(
    rb"""^\s*<\?xml\s[^>]*?encoding\s*=\s*["']([A-Za-z][A-Za-z0-9._-]*)["']"""
)
XML_DECLARATION_RE: Pattern[str] = re.compile(r"^\s*<\?xml\s[^>]*\?>")
LENGTH_RE: Pattern[str] = re.compile(
    r"^\s*([0-9]*\.?[0-9]+(?:[eE][-+]?[0-9]+)?)\s*(px)?\s*$"
)


def fromstring(data: Union[str, bytes]) -> ET.Element:
    """Parse an XML string to an Element."""
    return ET.fromstring(data)


def is_svg(node: ET.Element) -> bool:
    """Check if the node is an <svg> root, with or without namespace."""
    return node.tag in ("svg", f"{{{NAMESPACE}}}svg")


def detect_encoding(data: bytes) -> str:
    """Return the codec for XML bytes.

    A byte order mark wins over the XML declaration. Without either, UTF-8 is
    assumed.
    """
    if data.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        return "utf-16"
    if data.startswith(codecs.BOM_UTF8):
        return "utf-8-sig"
    match = XML_ENCODING_RE.match(data)
    if match:
        encoding = match.group(1).decode("ascii")
        if codecs.lookup(encoding).name != "utf-8":
            return encoding
    return "utf-8-sig"


def decode(data: bytes) -> str:
    """Decode XML bytes to text, dropping the XML declaration.

    The declaration is removed because it may name an encoding that no longer
    applies to the decoded text.

    Raises:
        LookupError: If the declared encoding is unknown.
        UnicodeDecodeError: If the bytes do not match the encoding.
    """
    text = data.decode(detect_encoding(data))
    return XML_DECLARATION_RE.sub("", text, count=1)


def get_viewbox(node: ET.Element) -> Optional[Tuple[float, float, float, float]]:
    """Return the viewBox of an <svg> node as (x, y, width, height)."""
    value = node.attrib.get("viewBox")
    if value is None:
        return None
    parts = value.replace(",", " ").split()
    if len(parts) != 4:
        logger.debug(f"Ignoring malformed viewBox: {value!r}")
        return None
    try:
        x, y, width, height = (float(part) for part in parts)
    except ValueError:
        logger.debug(f"Ignoring malformed viewBox: {value!r}")
        return None
    return (x, y, width, height)


def get_dimensions(node: ET.Element) -> Optional[Tuple[float, float]]:
    """Return the (width, height) of an <svg> node.

    The viewBox is used when present, otherwise the width and height
    attributes. Only unitless and px lengths are read; percentages and other
    units give None.
    """
    viewbox = get_viewbox(node)
    if viewbox is not None:
        return (viewbox[2], viewbox[3])
    width = _parse_length(node.attrib.get("width"))
    height = _parse_length(node.attrib.get("height"))
    if width is None or height is None:
        return None
    return (width, height)


def _parse_length(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    match = LENGTH_RE.match(value)
    if not match:
        return None
    return float(match.group(1))
