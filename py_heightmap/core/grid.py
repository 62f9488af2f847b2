"""
Square elevation grid used as the working buffer for Diamond-Square.

The grid is a single NumPy array addressed by (x, y). Storage is row-major,
so the cell at column x, row y lives at ``cells[y, x]``. Unset cells hold NaN
until the refiner writes them.
"""

from typing import Tuple

import numpy as np

from .errors import FrozenGridError, InvalidSizeError, OutOfBoundsError

Coordinate = Tuple[int, int]


def is_valid_size(size) -> bool:
    """Return True if ``size`` is 2^k + 1 for some k >= 1."""
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        return False
    size = int(size)
    if size < 3:
        return False
    n = size - 1
    return n & (n - 1) == 0


def _is_index(value) -> bool:
    return not isinstance(value, bool) and isinstance(value, (int, np.integer))


class HeightGrid:
    """
    Fixed-size square grid of float elevations.

    The grid never interprets its values: no clamping, no normalisation.
    After generation it is frozen and becomes a read-only snapshot.

    Attributes:
        size (int): Side length, always 2^k + 1.
        levels (int): k, the number of diamond-square passes needed.
    """

    def __init__(self, size: int):
        """
        Allocate a ``size x size`` grid with every cell unset.

        Args:
            size: Side length, must be 2^k + 1 with k >= 1

        Raises:
            InvalidSizeError: If size is not of the required form
        """
        if not is_valid_size(size):
            raise InvalidSizeError(size)

        self.size = int(size)
        self.levels = (self.size - 1).bit_length() - 1
        self._cells = np.full((self.size, self.size), np.nan, dtype=np.float64)
        self._frozen = False

    @classmethod
    def create(cls, size: int) -> "HeightGrid":
        """Allocate a new grid (alias of the constructor)."""
        return cls(size)

    def _check_bounds(self, x, y) -> None:
        if not (_is_index(x) and _is_index(y)):
            raise OutOfBoundsError(x, y, self.size)
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise OutOfBoundsError(x, y, self.size)

    def get(self, x: int, y: int) -> float:
        """Return the elevation at (x, y)."""
        self._check_bounds(x, y)
        return float(self._cells[y, x])

    def set(self, x: int, y: int, value: float) -> None:
        """Write the elevation at (x, y)."""
        self._check_bounds(x, y)
        if self._frozen:
            raise FrozenGridError("Grid is frozen and can no longer be modified")
        self._cells[y, x] = value

    def is_set(self, x: int, y: int) -> bool:
        """Return True if (x, y) has been assigned a value."""
        self._check_bounds(x, y)
        return not np.isnan(self._cells[y, x])

    def is_complete(self) -> bool:
        """Return True if every cell holds a finite value."""
        return bool(np.all(np.isfinite(self._cells)))

    def corners(self) -> Tuple[Coordinate, Coordinate, Coordinate, Coordinate]:
        """Corner coordinates in order (0,0), (0,N-1), (N-1,0), (N-1,N-1)."""
        last = self.size - 1
        return ((0, 0), (0, last), (last, 0), (last, last))

    def dimensions(self) -> Tuple[int, int]:
        """Return (width, height)."""
        return (self.size, self.size)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "HeightGrid":
        """Make the grid read-only. Returns self for chaining."""
        self._frozen = True
        self._cells.setflags(write=False)
        return self

    def to_array(self) -> np.ndarray:
        """Read-only view of the cells, indexed [y, x]."""
        view = self._cells.view()
        view.setflags(write=False)
        return view

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "mutable"
        return f"HeightGrid(size={self.size}, levels={self.levels}, {state})"
