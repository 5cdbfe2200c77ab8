"""Game of Life simulation, union-find and grid file utilities"""

from .adjacency import BOUNDED, TOROIDAL, ADJACENCY_POLICIES, validate_adjacency
from .union_find import WeightedQuickUnionUF
from .game_of_life import GameOfLife, count_neighbors, step, place_pattern
from .patterns import get_pattern, PATTERN_CATEGORIES
from .grid_io import parse_grid, load_grid, format_grid, dump_grid

__all__ = [
    'BOUNDED',
    'TOROIDAL',
    'ADJACENCY_POLICIES',
    'validate_adjacency',
    'WeightedQuickUnionUF',
    'GameOfLife',
    'count_neighbors',
    'step',
    'place_pattern',
    'get_pattern',
    'PATTERN_CATEGORIES',
    'parse_grid',
    'load_grid',
    'format_grid',
    'dump_grid',
]
