"""
Random amplitude sources for midpoint displacement.

The refiner never talks to a generator directly; it asks an
``AmplitudeSource`` for one perturbation at a time. Draws are sequential
and stateful, so the order in which the refiner asks is part of the output.
"""

import math
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple, Union

import structlog

from .alea_prng import AleaPRNG

logger = structlog.get_logger()

Seed = Union[int, str]


def _check_amplitude(amplitude: float) -> None:
    if not math.isfinite(amplitude) or amplitude < 0:
        raise ValueError(f"Amplitude must be finite and non-negative, got {amplitude!r}")


class AmplitudeSource(ABC):
    """Seedable source of perturbations in [-amplitude, +amplitude]."""

    @abstractmethod
    def seed(self, value: Seed) -> None:
        """Reset the source deterministically from ``value``."""

    @abstractmethod
    def next(self, amplitude: float) -> float:
        """Return one perturbation in [-amplitude, +amplitude]."""


class AleaAmplitudeSource(AmplitudeSource):
    """
    Uniform perturbations backed by an Alea generator.

    Every call to ``next`` advances the generator exactly once, including
    zero-amplitude calls, so the n-th draw always comes from the n-th value.
    """

    def __init__(self, seed: Seed = "default"):
        self._prng = AleaPRNG(seed)

    @property
    def draws(self) -> int:
        """Number of values drawn since the last reseed."""
        return self._prng.call_count

    def seed(self, value: Seed) -> None:
        self._prng = AleaPRNG(value)

    def next(self, amplitude: float) -> float:
        _check_amplitude(amplitude)
        value = amplitude * (2.0 * self._prng.random() - 1.0)
        if amplitude == 0:
            return 0.0
        return value


class FixedSequenceSource(AmplitudeSource):
    """
    Replays a scripted list of unit factors in [-1, 1].

    ``next(a)`` returns ``factor * a`` and records ``a`` in ``requested``.
    Useful wherever the perturbations need to be known in advance.
    """

    def __init__(self, factors: Sequence[float], cycle: bool = False):
        for factor in factors:
            if not -1.0 <= factor <= 1.0:
                raise ValueError(f"Factor {factor!r} outside [-1, 1]")
        if cycle and not factors:
            raise ValueError("Cannot cycle an empty factor sequence")
        self._factors = list(factors)
        self._cycle = cycle
        self._index = 0
        self.requested: List[float] = []

    def seed(self, value: Optional[Seed] = None) -> None:
        """Rewind to the first factor. The value itself is ignored."""
        self._index = 0
        self.requested = []

    def next(self, amplitude: float) -> float:
        _check_amplitude(amplitude)
        if self._index >= len(self._factors):
            if not self._cycle:
                raise ValueError(
                    f"Fixed sequence exhausted after {len(self._factors)} draws"
                )
            self._index = 0
        factor = self._factors[self._index]
        self._index += 1
        self.requested.append(amplitude)
        return factor * amplitude


def tile_corners(
    seed: Seed, position: Tuple[int, int]
) -> Tuple[float, float, float, float]:
    """
    Corner elevations for the tile at integer lattice ``position``.

    Each corner value depends only on (seed, lattice point), so two tiles that
    share an edge share the two corner values on that edge.

    Args:
        seed: World seed
        position: (px, py) tile coordinate

    Returns:
        (c00, c0N, cN0, cNN), each in [0, 1)
    """
    px, py = position
    lattice = ((px, py), (px, py + 1), (px + 1, py), (px + 1, py + 1))
    values = tuple(AleaPRNG((seed, x, y)).random() for x, y in lattice)
    logger.debug("Tile corners derived", seed=seed, position=position, corners=values)
    return values
