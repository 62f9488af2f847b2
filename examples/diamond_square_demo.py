#!/usr/bin/env python3
"""
Simple demo script showing diamond-square generation.
"""

import numpy as np
import structlog
from py_heightmap.core import generate, tile_corners, summarize, logistic_normalize
from py_heightmap.logging_config import configure_logging

logger = structlog.get_logger()


def main():
    """Generate a few heightmaps and print their statistics."""
    configure_logging(fmt="console")

    print("Diamond-Square Heightmap Demo")
    print("=" * 40)

    for decay in (0.4, 0.8, 1.2):
        grid = generate(129, "demo", initial_roughness=2.0, roughness_decay=decay)
        stats = summarize(grid)

        print(f"\nH = {decay}")
        print("-" * 30)
        print(f"  Size: {grid.dimensions()}")
        print(f"  Height range: {stats.min:.3f} to {stats.max:.3f}")
        print(f"  Mean height: {stats.mean:.3f}, std: {stats.std:.3f}")

        normalized = logistic_normalize(grid)
        hist, _ = np.histogram(normalized, bins=5, range=(0.0, 1.0))
        print(f"  Normalized histogram: {hist.tolist()}")

    print("\nTiles sharing an edge:")
    left = generate(33, "world", 1.0, 1.0, corners=tile_corners("world", (0, 0)))
    right = generate(33, "world", 1.0, 1.0, corners=tile_corners("world", (1, 0)))
    print(f"  left (32, 0) = {left.get(32, 0):.4f}, right (0, 0) = {right.get(0, 0):.4f}")


if __name__ == "__main__":
    main()
