"""
Diamond-Square heightmap generation.

The refiner fills a (2^k + 1)-sided grid from its four corners in k passes.
Each pass runs a square step (centres of the current sub-squares) and then a
diamond step (midpoints of the sub-square edges), halving the step size and
decaying the perturbation amplitude by 2^-H afterwards.

Draws are taken from the amplitude source in a fixed order: corners (when
not supplied), then per pass the square step row by row, left to right,
followed by the diamond step in the same order. Changing that order changes
the terrain for a given seed.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple, Union

import structlog

from ..config import settings
from .amplitude import AleaAmplitudeSource, AmplitudeSource
from .errors import InvalidSizeError
from .grid import HeightGrid, is_valid_size
from .heightmap_analysis import summarize

logger = structlog.get_logger()

Corners = Tuple[float, float, float, float]


@dataclass
class DiamondSquareConfig:
    """Configuration for one Diamond-Square run."""

    size: int
    seed: Union[int, str]
    initial_roughness: float
    roughness_decay: float
    corners: Optional[Corners] = None


class DiamondSquareRefiner:
    """
    Runs the Diamond-Square subdivision over a freshly allocated grid.

    Bad input is rejected here, before any grid is allocated, so a run
    either completes or never starts.
    """

    def __init__(
        self, config: DiamondSquareConfig, source: Optional[AmplitudeSource] = None
    ):
        """
        Args:
            config: Run configuration
            source: Perturbation source, defaults to Alea seeded with config.seed

        Raises:
            InvalidSizeError: If config.size is not 2^k + 1 or is above
                settings.max_grid_size
            ValueError: If roughness parameters or corners are unusable
        """
        if not is_valid_size(config.size):
            raise InvalidSizeError(config.size)
        if config.size > settings.max_grid_size:
            raise InvalidSizeError(
                config.size, f"exceeds maximum grid size {settings.max_grid_size}"
            )
        if not math.isfinite(config.initial_roughness) or config.initial_roughness < 0:
            raise ValueError(
                f"initial_roughness must be finite and >= 0, got {config.initial_roughness!r}"
            )
        if not math.isfinite(config.roughness_decay) or config.roughness_decay <= 0:
            raise ValueError(
                f"roughness_decay must be finite and > 0, got {config.roughness_decay!r}"
            )
        if config.corners is not None:
            if len(config.corners) != 4:
                raise ValueError(f"Expected 4 corner values, got {len(config.corners)}")
            if not all(math.isfinite(c) for c in config.corners):
                raise ValueError(f"Corner values must be finite, got {config.corners!r}")

        self.config = config
        self.source = source if source is not None else AleaAmplitudeSource(config.seed)

    def amplitude_at(self, pass_index: int) -> float:
        """Perturbation amplitude for pass ``pass_index``: a0 * 2^(-p*H)."""
        return self.config.initial_roughness * 2.0 ** (
            -pass_index * self.config.roughness_decay
        )

    def run(self) -> HeightGrid:
        """
        Generate the heightmap.

        Returns:
            The completed grid, frozen
        """
        cfg = self.config
        grid = HeightGrid(cfg.size)

        logger.info(
            "Starting diamond-square generation",
            size=cfg.size,
            seed=cfg.seed,
            initial_roughness=cfg.initial_roughness,
            roughness_decay=cfg.roughness_decay,
            passes=grid.levels,
        )

        self._seed_corners(grid)

        step = cfg.size - 1
        for pass_index in range(grid.levels):
            amplitude = self.amplitude_at(pass_index)
            logger.debug(
                "Diamond-square pass", pass_index=pass_index, step=step, amplitude=amplitude
            )
            self._square_step(grid, step, amplitude)
            self._diamond_step(grid, step, amplitude)
            step //= 2

        grid.freeze()

        stats = summarize(grid)
        logger.info(
            "Diamond-square generation complete",
            size=cfg.size,
            min_height=stats.min,
            max_height=stats.max,
            mean_height=stats.mean,
        )
        return grid

    def _seed_corners(self, grid: HeightGrid) -> None:
        if self.config.corners is not None:
            values = tuple(float(c) for c in self.config.corners)
        else:
            a0 = self.config.initial_roughness
            values = tuple(self.source.next(a0) for _ in range(4))

        for (x, y), value in zip(grid.corners(), values):
            grid.set(x, y, value)

    def _square_step(self, grid: HeightGrid, step: int, amplitude: float) -> None:
        """Set each sub-square centre to the mean of its 4 corners plus noise."""
        half = step // 2
        for y in range(0, grid.size - 1, step):
            for x in range(0, grid.size - 1, step):
                # Divided per term: the plain sum of four heights can exceed the float range
                mean = (
                    grid.get(x, y) / 4
                    + grid.get(x + step, y) / 4
                    + grid.get(x, y + step) / 4
                    + grid.get(x + step, y + step) / 4
                )
                grid.set(x + half, y + half, mean + self.source.next(amplitude))

    def _diamond_step(self, grid: HeightGrid, step: int, amplitude: float) -> None:
        """
        Set each edge midpoint to the mean of its in-grid neighbours plus noise.

        Neighbours are top, left, right, bottom at distance step/2. Border
        midpoints have three of them; there is no wraparound.
        """
        half = step // 2
        size = grid.size
        for y in range(0, size, half):
            for x in range((y + half) % step, size, step):
                neighbours = [
                    grid.get(nx, ny)
                    for nx, ny in ((x, y - half), (x - half, y), (x + half, y), (x, y + half))
                    if 0 <= nx < size and 0 <= ny < size
                ]
                count = len(neighbours)
                mean = 0.0
                for value in neighbours:
                    mean += value / count
                grid.set(x, y, mean + self.source.next(amplitude))


def generate(
    size: int,
    seed: Union[int, str],
    initial_roughness: float,
    roughness_decay: float,
    corners: Optional[Corners] = None,
    source: Optional[AmplitudeSource] = None,
) -> HeightGrid:
    """
    Generate a Diamond-Square heightmap.

    Args:
        size: Grid side, 2^k + 1 with k >= 1
        seed: Seed for the default Alea amplitude source
        initial_roughness: Amplitude a0 of the first pass
        roughness_decay: H; amplitude is multiplied by 2^-H after each pass
        corners: (c00, c0N, cN0, cNN); drawn from the source when omitted
        source: Replacement amplitude source; ``seed`` is then unused

    Returns:
        Frozen HeightGrid

    Raises:
        InvalidSizeError: If size is not 2^k + 1
    """
    config = DiamondSquareConfig(
        size=size,
        seed=seed,
        initial_roughness=initial_roughness,
        roughness_decay=roughness_decay,
        corners=corners,
    )
    return DiamondSquareRefiner(config, source).run()


def generate_from_settings(
    seed: Union[int, str], corners: Optional[Corners] = None
) -> HeightGrid:
    """Generate with size and roughness defaults taken from ``settings``."""
    return generate(
        size=settings.default_size,
        seed=seed,
        initial_roughness=settings.default_roughness,
        roughness_decay=settings.default_roughness_decay,
        corners=corners,
    )
