"""
Post-generation helpers for finished heightmaps.

None of these touch the grid; they read it and hand back NumPy arrays or
plain values for whatever consumes the terrain next.
"""

from dataclasses import dataclass

import numpy as np

from .grid import HeightGrid


@dataclass(frozen=True)
class HeightmapStats:
    """Summary statistics of a heightmap."""

    size: int
    min: float
    max: float
    mean: float
    std: float

    @property
    def relief(self) -> float:
        """Difference between highest and lowest cell."""
        return self.max - self.min


def to_array(grid: HeightGrid) -> np.ndarray:
    """Copy of the grid as a float64 array indexed [y, x]."""
    return np.array(grid.to_array(), dtype=np.float64, copy=True)


def summarize(grid: HeightGrid) -> HeightmapStats:
    """
    Min, max, mean and standard deviation over the set cells.

    Mean and std are taken on heights scaled by the largest magnitude, so
    grids with values near the float maximum still give finite results.
    """
    heights = grid.to_array()
    scale = float(np.nanmax(np.abs(heights)))
    if scale == 0.0:
        scale = 1.0
    scaled = heights / scale
    return HeightmapStats(
        size=grid.size,
        min=float(np.nanmin(heights)),
        max=float(np.nanmax(heights)),
        mean=float(np.nanmean(scaled)) * scale,
        std=float(np.nanstd(scaled)) * scale,
    )


def logistic_normalize(grid: HeightGrid) -> np.ndarray:
    """
    Squash raw elevations into [0, 1] with the logistic curve 1 / (1 + e^-h).

    Zero maps to 0.5 and the mapping is monotonic. In float64 the curve
    saturates: heights above about 37 give exactly 1.0 and heights below
    about -709 give exactly 0.0.
    """
    heights = grid.to_array()
    with np.errstate(over="ignore"):
        return 1.0 / (1.0 + np.exp(-heights))
