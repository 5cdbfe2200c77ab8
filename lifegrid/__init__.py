"""Conway's Game of Life on a fixed grid, with community counting."""

from .errors import (
    LifeGridError,
    InvalidArgument,
    OutOfBounds,
    DataFormatError,
    ResourceUnavailable
)
from .utils import GameOfLife, WeightedQuickUnionUF, BOUNDED, TOROIDAL
from .evaluation import count_communities, community_sizes

__version__ = '0.1.0'

__all__ = [
    'LifeGridError',
    'InvalidArgument',
    'OutOfBounds',
    'DataFormatError',
    'ResourceUnavailable',
    'GameOfLife',
    'WeightedQuickUnionUF',
    'BOUNDED',
    'TOROIDAL',
    'count_communities',
    'community_sizes',
]
