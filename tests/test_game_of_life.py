import numpy as np
import pytest

from lifegrid.errors import DataFormatError, InvalidArgument, OutOfBounds
from lifegrid.utils.adjacency import BOUNDED, TOROIDAL
from lifegrid.utils.game_of_life import GameOfLife, count_neighbors, step, place_pattern
from lifegrid.utils.patterns import BLINKER, GLIDER, SEED, get_pattern


def test_seed_construction(seed_game):
    assert seed_game.shape == (5, 5)
    assert seed_game.get_total_alive_cells() == 5
    alive = {(r, c) for r in range(5) for c in range(5) if seed_game.get_cell_state(r, c)}
    assert alive == {(1, 1), (1, 3), (2, 2), (3, 2), (3, 3)}


def test_seed_dies_after_four_generations(seed_game):
    seed_game.next_generation(3)
    assert seed_game.is_alive()
    seed_game.next_generation()
    assert not seed_game.is_alive()
    assert seed_game.get_total_alive_cells() == 0


def test_from_cells_counts_alive():
    game = GameOfLife.from_cells(2, 3, [True, False, True, False, False, True])
    assert game.shape == (2, 3)
    assert game.get_total_alive_cells() == 3
    assert game.get_cell_state(0, 2)
    assert not game.get_cell_state(1, 0)


def test_from_cells_wrong_length():
    with pytest.raises(DataFormatError):
        GameOfLife.from_cells(2, 2, [True, False, True])


@pytest.mark.parametrize("rows, columns", [(0, 2), (2, 0), (-3, 3)])
def test_from_cells_bad_dimensions(rows, columns):
    with pytest.raises(InvalidArgument):
        GameOfLife.from_cells(rows, columns, [])


def test_rejects_non_2d_grid():
    with pytest.raises(InvalidArgument):
        GameOfLife(np.zeros(4, dtype=bool))
    with pytest.raises(InvalidArgument):
        GameOfLife(np.zeros((0, 3), dtype=bool))


def test_rejects_unknown_adjacency():
    with pytest.raises(InvalidArgument):
        GameOfLife(adjacency='hexagonal')
    with pytest.raises(InvalidArgument):
        GameOfLife(community_adjacency='spherical')


def test_get_grid_returns_copy(seed_game):
    grid = seed_game.get_grid()
    grid[:] = True
    assert seed_game.get_total_alive_cells() == 5
    assert np.array_equal(seed_game.get_grid(), SEED)


def test_constructor_copies_input():
    grid = place_pattern((5, 5), BLINKER)
    game = GameOfLife(grid)
    grid[:] = False
    assert game.get_total_alive_cells() == 3


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (5, 0), (0, 5)])
def test_out_of_bounds_access(seed_game, row, col):
    with pytest.raises(OutOfBounds):
        seed_game.get_cell_state(row, col)
    with pytest.raises(OutOfBounds):
        seed_game.num_of_alive_neighbors(row, col)


def test_is_alive():
    assert not GameOfLife(np.zeros((3, 3), dtype=bool)).is_alive()
    grid = np.zeros((3, 3), dtype=bool)
    grid[2, 2] = True
    assert GameOfLife(grid).is_alive()


def test_neighbors_of_seed(seed_game):
    assert seed_game.num_of_alive_neighbors(2, 2) == 4
    assert seed_game.num_of_alive_neighbors(1, 2) == 3
    assert seed_game.num_of_alive_neighbors(0, 0) == 1


def test_neighbors_bounded_vs_toroidal():
    grid = np.zeros((5, 5), dtype=bool)
    grid[4, 4] = True
    grid[0, 2] = True
    bounded = GameOfLife(grid, adjacency=BOUNDED)
    toroidal = GameOfLife(grid, adjacency=TOROIDAL)
    assert bounded.num_of_alive_neighbors(0, 0) == 0
    assert toroidal.num_of_alive_neighbors(0, 0) == 1
    assert bounded.num_of_alive_neighbors(4, 2) == 0
    assert toroidal.num_of_alive_neighbors(4, 2) == 1


def test_full_grid_neighbor_counts():
    full = np.ones((3, 4), dtype=bool)
    bounded = GameOfLife(full)
    toroidal = GameOfLife(full, adjacency=TOROIDAL)
    assert bounded.num_of_alive_neighbors(0, 0) == 3
    assert bounded.num_of_alive_neighbors(0, 1) == 5
    assert bounded.num_of_alive_neighbors(1, 1) == 8
    assert toroidal.num_of_alive_neighbors(0, 0) == 8


@pytest.mark.parametrize("adjacency", [BOUNDED, TOROIDAL])
def test_neighbor_counts_in_range_and_match_vectorised(random_grid, adjacency):
    game = GameOfLife(random_grid, adjacency=adjacency)
    expected = count_neighbors(random_grid, adjacency)
    for r in range(game.rows):
        for c in range(game.columns):
            n = game.num_of_alive_neighbors(r, c)
            assert 0 <= n <= 8
            assert n == expected[r, c]


def test_single_cell_dies():
    grid = np.zeros((4, 4), dtype=bool)
    grid[1, 2] = True
    game = GameOfLife(grid)
    game.next_generation()
    assert not game.is_alive()
    assert game.get_total_alive_cells() == 0


def test_block_is_stable(block_game):
    before = block_game.get_grid()
    block_game.next_generation()
    assert np.array_equal(block_game.get_grid(), before)
    assert block_game.get_total_alive_cells() == 4


def test_blinker_oscillates():
    game = GameOfLife(place_pattern((5, 5), BLINKER))
    start = game.get_grid()
    game.next_generation()
    assert game.get_total_alive_cells() == 3
    assert game.get_grid()[1:4, 2].all()
    game.next_generation()
    assert np.array_equal(game.get_grid(), start)


def test_glider_wraps_on_torus():
    grid = place_pattern((6, 6), GLIDER, position=(0, 0))
    game = GameOfLife(grid, adjacency=TOROIDAL)
    # A glider returns to its shape shifted by (1, 1) every 4 generations
    game.next_generation(24)
    assert np.array_equal(game.get_grid(), grid)


def test_compute_new_grid_is_pure(seed_game):
    before = seed_game.get_grid()
    first = seed_game.compute_new_grid()
    second = seed_game.compute_new_grid()
    assert np.array_equal(first, second)
    assert np.array_equal(seed_game.get_grid(), before)
    assert seed_game.get_total_alive_cells() == 5


def test_next_generation_is_deterministic(random_grid):
    a = GameOfLife(random_grid)
    b = GameOfLife(random_grid)
    a.next_generation()
    b.next_generation()
    assert np.array_equal(a.get_grid(), b.get_grid())


@pytest.mark.parametrize("adjacency", [BOUNDED, TOROIDAL])
def test_alive_count_matches_rescan(random_grid, adjacency):
    game = GameOfLife(random_grid, adjacency=adjacency)
    for _ in range(5):
        game.next_generation()
        assert game.get_total_alive_cells() == int(game.get_grid().sum())


def test_zero_generations_is_noop(random_grid):
    game = GameOfLife(random_grid)
    count = game.get_total_alive_cells()
    game.next_generation(0)
    assert np.array_equal(game.get_grid(), random_grid)
    assert game.get_total_alive_cells() == count


@pytest.mark.parametrize("n, m", [(0, 3), (2, 3), (4, 0), (1, 1)])
def test_generations_compose(random_grid, n, m):
    split = GameOfLife(random_grid)
    split.next_generation(n)
    split.next_generation(m)
    joined = GameOfLife(random_grid)
    joined.next_generation(n + m)
    assert np.array_equal(split.get_grid(), joined.get_grid())
    assert split.get_total_alive_cells() == joined.get_total_alive_cells()


@pytest.mark.parametrize("n", [-1, 1.5, "2", True])
def test_invalid_generation_count_leaves_state(seed_game, n):
    with pytest.raises(InvalidArgument):
        seed_game.next_generation(n)
    assert np.array_equal(seed_game.get_grid(), SEED)
    assert seed_game.get_total_alive_cells() == 5


def test_simulate_does_not_advance(seed_game):
    trajectory = seed_game.simulate(4)
    assert trajectory.shape == (5, 5, 5)
    assert np.array_equal(trajectory[0], SEED)
    assert not trajectory[4].any()
    assert seed_game.get_total_alive_cells() == 5


def test_step_matches_engine(random_grid):
    game = GameOfLife(random_grid, adjacency=TOROIDAL)
    assert np.array_equal(step(random_grid, TOROIDAL), game.compute_new_grid())


def test_place_pattern_centers_and_clips():
    grid = place_pattern((5, 5), get_pattern('block'))
    assert grid[1:3, 1:3].all()
    assert grid.sum() == 4
    clipped = place_pattern((4, 4), GLIDER, position=(2, 2))
    assert clipped.sum() == int(GLIDER[:2, :2].sum())


def test_get_pattern_unknown():
    with pytest.raises(InvalidArgument):
        get_pattern('gosper')


def test_str_renders_grid(seed_game):
    lines = str(seed_game).splitlines()
    assert lines[1] == ".#.#."
    assert len(lines) == 5


@pytest.mark.parametrize("row, col", [(1.5, 0), (0, 2.0), (False, 1), (None, 0)])
def test_non_integer_coordinates(seed_game, row, col):
    with pytest.raises(OutOfBounds):
        seed_game.get_cell_state(row, col)
    with pytest.raises(OutOfBounds):
        seed_game.num_of_alive_neighbors(row, col)


def test_numpy_integer_coordinates(seed_game):
    assert seed_game.get_cell_state(np.int64(1), np.int64(1))
    assert seed_game.num_of_alive_neighbors(np.int32(2), np.int32(2)) == 4


@pytest.mark.parametrize("num_steps", [-1, 2.5, True, "3"])
def test_simulate_rejects_bad_step_count(seed_game, num_steps):
    with pytest.raises(InvalidArgument):
        seed_game.simulate(num_steps)


def test_place_pattern_at_corner():
    grid = place_pattern((5, 5), BLINKER, position=(4, 0))
    assert grid[4, :3].all()
    assert grid.sum() == 3


@pytest.mark.parametrize("position", [(5, 0), (0, -1)])
def test_place_pattern_outside_grid(position):
    with pytest.raises(OutOfBounds):
        place_pattern((5, 5), BLINKER, position=position)


def test_place_pattern_larger_than_grid():
    with pytest.raises(OutOfBounds):
        place_pattern((2, 2), get_pattern('beehive'))
    with pytest.raises(InvalidArgument):
        place_pattern((0, 4), BLINKER)
