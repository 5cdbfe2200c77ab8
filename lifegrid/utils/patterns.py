"""Seed grid and a handful of well-known patterns."""
import numpy as np

from ..errors import InvalidArgument


# Default 5x5 seed: dies out after four generations without touching the edges
SEED = np.array([
    [0, 0, 0, 0, 0],
    [0, 1, 0, 1, 0],
    [0, 0, 1, 0, 0],
    [0, 0, 1, 1, 0],
    [0, 0, 0, 0, 0]
], dtype=bool)


# Still lifes
BLOCK = np.array([
    [1, 1],
    [1, 1]
], dtype=bool)

BEEHIVE = np.array([
    [0, 1, 1, 0],
    [1, 0, 0, 1],
    [0, 1, 1, 0]
], dtype=bool)


# Oscillators (period 2)
BLINKER = np.array([
    [1, 1, 1]
], dtype=bool)

TOAD = np.array([
    [0, 1, 1, 1],
    [1, 1, 1, 0]
], dtype=bool)


# Spaceships
GLIDER = np.array([
    [0, 1, 0],
    [0, 0, 1],
    [1, 1, 1]
], dtype=bool)


PATTERN_CATEGORIES = {
    'seeds': {
        'seed': SEED
    },
    'still_lifes': {
        'block': BLOCK,
        'beehive': BEEHIVE
    },
    'oscillators_p2': {
        'blinker': BLINKER,
        'toad': TOAD
    },
    'spaceships': {
        'glider': GLIDER
    }
}


def get_pattern(name: str) -> np.ndarray:
    """Return a copy of the named pattern."""
    for category in PATTERN_CATEGORIES.values():
        if name in category:
            return category[name].copy()

    available = [pattern for cat in PATTERN_CATEGORIES.values() for pattern in cat.keys()]
    raise InvalidArgument(f"Pattern '{name}' not found. Available patterns: {available}")
