"""Diamond-Square terrain heightmap generation."""

from .core import (
    HeightGrid,
    InvalidSizeError,
    OutOfBoundsError,
    generate,
    tile_corners,
)

__version__ = "0.1.0"

__all__ = ["HeightGrid", "InvalidSizeError", "OutOfBoundsError", "generate", "tile_corners"]
