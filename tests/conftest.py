import numpy as np
import pytest

from lifegrid.utils.game_of_life import GameOfLife, place_pattern
from lifegrid.utils.patterns import BLOCK


@pytest.fixture
def seed_game():
    return GameOfLife()


@pytest.fixture
def two_blocks():
    """8x8 grid with two 2x2 blocks, at least two dead cells apart."""
    grid = np.zeros((8, 8), dtype=bool)
    grid[1:3, 1:3] = BLOCK
    grid[5:7, 5:7] = BLOCK
    return grid


@pytest.fixture
def block_game():
    return GameOfLife(place_pattern((6, 6), BLOCK))


@pytest.fixture
def random_grid():
    rng = np.random.default_rng(42)
    return rng.random((12, 9)) < 0.35


@pytest.fixture
def grid_file(tmp_path):
    def _write(text, name="grid.txt"):
        path = tmp_path / name
        path.write_text(text)
        return path
    return _write
