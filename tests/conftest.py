from pathlib import Path

import pytest

CIRCLE_SVG = """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">
    <circle cx="50" cy="50" r="40" fill="#ff6600"/>
</svg>"""

WIDE_SVG = """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="200" height="100" viewBox="0 0 200 100">
    <rect width="200" height="100" fill="blue"/>
</svg>"""


@pytest.fixture
def circle_svg() -> str:
    """100x100 viewBox with a single filled circle."""
    return CIRCLE_SVG


@pytest.fixture
def wide_svg() -> str:
    """2:1 viewBox filled with a rectangle."""
    return WIDE_SVG


@pytest.fixture
def circle_svg_path(tmp_path: Path, circle_svg: str) -> Path:
    """Circle SVG written to a temporary file."""
    path = tmp_path / "favicon.svg"
    path.write_text(circle_svg, encoding="utf-8")
    return path


@pytest.fixture
def static_dir(tmp_path: Path, circle_svg: str) -> Path:
    """Project root holding priv/static/images/favicon.svg."""
    images = tmp_path / "priv" / "static" / "images"
    images.mkdir(parents=True)
    (images / "favicon.svg").write_text(circle_svg, encoding="utf-8")
    return tmp_path


@pytest.fixture
def latin1_svg() -> bytes:
    """Circle SVG declared and encoded as ISO-8859-1."""
    return (
        '<?xml version="1.0" encoding="ISO-8859-1"?>\n'
        '<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" '
        'viewBox="0 0 100 100">\n'
        "    <title>Café</title>\n"
        '    <circle cx="50" cy="50" r="40" fill="#ff6600"/>\n'
        "</svg>"
    ).encode("latin-1")
