"""Conversion settings.

The defaults reproduce the fixed layout of a Phoenix-style static directory:
the SVG favicon is read from ``priv/static/images`` and the PNG fallback is
written to ``priv/static``. Every value can be overridden through the
constructor so the pipeline can run against arbitrary paths.
"""

import logging
import os
from dataclasses import dataclass
from typing import Tuple

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = os.path.join(".", "priv", "static", "images", "favicon.svg")
DEFAULT_OUTPUT = os.path.join(".", "priv", "static", "favicon.png")
DEFAULT_SIZES: Tuple[int, ...] = (16, 24, 32, 48, 64, 128, 256)
FAVICON_SIZE = 32


@dataclass(frozen=True)
class FaviconConfig:
    """Settings for a single favicon conversion run.

    Example:
        >>> config = FaviconConfig.default()
        >>> config.sizes
        (16, 24, 32, 48, 64, 128, 256)
        >>>
        >>> # Inject paths, e.g. in tests
        >>> config = FaviconConfig(
        ...     source="input.svg",
        ...     output="out/favicon.png",
        ...     sizes=(16, 32, 64),
        ... )
    """

    source: str = DEFAULT_SOURCE
    output: str = DEFAULT_OUTPUT
    sizes: Tuple[int, ...] = DEFAULT_SIZES
    favicon_size: int = FAVICON_SIZE
    max_workers: int = 1  # 1 renders sequentially

    @classmethod
    def default(cls) -> "FaviconConfig":
        """Create a FaviconConfig with the fixed input and output paths."""
        return cls()

    def validate(self) -> None:
        """Check the requested sizes and worker count.

        Raises:
            ValueError: If sizes is empty, contains duplicates or a value that
                is not a positive integer, or if max_workers is not positive.
        """
        if not self.sizes:
            raise ValueError("At least one size must be requested")
        for size in self.sizes:
            if not _is_positive_int(size):
                raise ValueError(f"Size must be a positive integer: {size!r}")
        if len(set(self.sizes)) != len(self.sizes):
            raise ValueError(f"Duplicate sizes requested: {list(self.sizes)}")
        if not _is_positive_int(self.favicon_size):
            raise ValueError(
                f"Favicon size must be a positive integer: {self.favicon_size!r}"
            )
        if not _is_positive_int(self.max_workers):
            raise ValueError(
                f"max_workers must be a positive integer: {self.max_workers!r}"
            )

    def persists(self) -> bool:
        """Check if the favicon size is among the requested sizes."""
        return self.favicon_size in self.sizes


def _is_positive_int(value: object) -> bool:
    # bool is a subclass of int
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
