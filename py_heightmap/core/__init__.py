"""
Core heightmap generation functionality.
"""

from .errors import HeightmapError, InvalidSizeError, OutOfBoundsError, FrozenGridError
from .grid import HeightGrid, is_valid_size
from .alea_prng import AleaPRNG
from .amplitude import AmplitudeSource, AleaAmplitudeSource, FixedSequenceSource, tile_corners
from .diamond_square import DiamondSquareConfig, DiamondSquareRefiner, generate, generate_from_settings
from .heightmap_analysis import HeightmapStats, summarize, to_array, logistic_normalize

__all__ = ['HeightmapError', 'InvalidSizeError', 'OutOfBoundsError', 'FrozenGridError',
           'HeightGrid', 'is_valid_size', 'AleaPRNG',
           'AmplitudeSource', 'AleaAmplitudeSource', 'FixedSequenceSource', 'tile_corners',
           'DiamondSquareConfig', 'DiamondSquareRefiner', 'generate', 'generate_from_settings',
           'HeightmapStats', 'summarize', 'to_array', 'logistic_normalize']
