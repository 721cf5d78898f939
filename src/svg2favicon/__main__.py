import logging
import sys

from svg2favicon import convert
from svg2favicon.errors import FaviconError

logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.INFO) -> None:
    """Send records below WARNING to stdout and the rest to stderr."""
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(logging.Formatter("%(message)s"))
    stdout_handler.addFilter(lambda record: record.levelno < logging.WARNING)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    logging.basicConfig(
        level=level, handlers=[stdout_handler, stderr_handler], force=True
    )


def main() -> None:
    """Convert ./priv/static/images/favicon.svg to ./priv/static/favicon.png."""
    setup_logging()
    try:
        convert()
    except FaviconError as e:
        logger.error(f"Error converting SVG: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
