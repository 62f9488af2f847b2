"""Typed errors raised by heightmap generation."""


class HeightmapError(Exception):
    """Base class for heightmap errors."""


class InvalidSizeError(HeightmapError, ValueError):
    """Grid size is not of the form 2^k + 1 (k >= 1) or exceeds the limit."""

    def __init__(self, size, reason: str = "size - 1 must be a power of two and size >= 3"):
        self.size = size
        super().__init__(f"Invalid grid size {size!r}: {reason}")


class OutOfBoundsError(HeightmapError, IndexError):
    """Coordinate access outside [0, size)."""

    def __init__(self, x, y, size: int):
        self.x = x
        self.y = y
        self.size = size
        super().__init__(f"Coordinate ({x}, {y}) outside grid of size {size}")


class FrozenGridError(HeightmapError, RuntimeError):
    """Write attempted on a grid that has been handed off."""
