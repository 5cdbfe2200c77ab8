"""Conway's Game of Life simulator."""
import logging
from typing import Iterable, Optional, Tuple

import numpy as np

from ..errors import InvalidArgument, OutOfBounds
from ..evaluation.communities import count_communities
from .adjacency import BOUNDED, TOROIDAL, MOORE_OFFSETS, validate_adjacency
from .grid_io import cells_to_grid, format_grid, load_grid
from .patterns import SEED
from .union_find import is_integer

logger = logging.getLogger(__name__)


def count_neighbors(state: np.ndarray, adjacency: str = BOUNDED) -> np.ndarray:
    """Count live neighbours of every cell under the given adjacency policy."""
    validate_adjacency(adjacency)
    cells = state.astype(int)
    neighbors = np.zeros_like(cells)

    if adjacency == TOROIDAL:
        for di, dj in MOORE_OFFSETS:
            neighbors += np.roll(np.roll(cells, -di, axis=0), -dj, axis=1)
        return neighbors

    # Off-grid neighbours are the zero border
    h, w = cells.shape
    padded = np.pad(cells, 1)
    for di, dj in MOORE_OFFSETS:
        neighbors += padded[1 + di:1 + di + h, 1 + dj:1 + dj + w]
    return neighbors


def step(state: np.ndarray, adjacency: str = BOUNDED) -> np.ndarray:
    """Compute the next state for the provided grid."""
    alive = state.astype(bool)
    neighbors = count_neighbors(alive, adjacency)
    return (alive & ((neighbors == 2) | (neighbors == 3))) | (~alive & (neighbors == 3))


def _check_count(n, what: str) -> None:
    if not is_integer(n):
        raise InvalidArgument(f"{what} count must be an integer, got {n!r}")
    if n < 0:
        raise InvalidArgument(f"{what} count must be non-negative, got {n}")


class GameOfLife:
    """
    Game of Life simulation owning one fixed-size grid.

    ``adjacency`` selects how neighbours are counted when advancing
    generations, ``community_adjacency`` how live cells are joined into
    communities. Both are 'bounded' (off-grid cells do not exist) or
    'toroidal' (edges wrap around).
    """

    def __init__(self,
                 grid: Optional[np.ndarray] = None,
                 adjacency: str = BOUNDED,
                 community_adjacency: str = BOUNDED):
        """
        Create a simulation from an initial grid, or from the 5x5 seed.

        Args:
            grid: 2-D array of cell states, copied; None for the seed pattern
            adjacency: Neighbour policy for generation advance
            community_adjacency: Default policy for num_of_communities

        Raises:
            InvalidArgument: If the grid is not 2-D or has an empty dimension,
                or a policy is unknown
        """
        self._adjacency = validate_adjacency(adjacency)
        self._community_adjacency = validate_adjacency(community_adjacency)

        if grid is None:
            grid = SEED
        grid = np.array(grid, dtype=bool)
        if grid.ndim != 2 or grid.shape[0] <= 0 or grid.shape[1] <= 0:
            raise InvalidArgument(f"Grid must be 2-D with positive dimensions, got shape {grid.shape}")

        self._grid = grid
        self._total_alive_cells = int(np.count_nonzero(grid))
        logger.debug("Created %dx%d simulation with %d alive cells (%s)",
                     self.rows, self.columns, self._total_alive_cells, self._adjacency)

    @classmethod
    def from_cells(cls, rows: int, columns: int, cells: Iterable[bool], **kwargs) -> 'GameOfLife':
        """Create a simulation from a row-major sequence of rows * columns booleans."""
        if rows <= 0 or columns <= 0:
            raise InvalidArgument(f"Dimensions must be positive, got {rows}x{columns}")
        return cls(cells_to_grid(rows, columns, cells), **kwargs)

    @classmethod
    def from_file(cls, path, **kwargs) -> 'GameOfLife':
        """Create a simulation from a grid text file (see grid_io)."""
        return cls(load_grid(path), **kwargs)

    @property
    def rows(self) -> int:
        return self._grid.shape[0]

    @property
    def columns(self) -> int:
        return self._grid.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._grid.shape

    @property
    def adjacency(self) -> str:
        return self._adjacency

    @property
    def community_adjacency(self) -> str:
        return self._community_adjacency

    @property
    def grid(self) -> np.ndarray:
        return self.get_grid()

    def get_grid(self) -> np.ndarray:
        """Return a copy of the current grid."""
        return self._grid.copy()

    def get_total_alive_cells(self) -> int:
        """Return the number of alive cells in the current grid."""
        return self._total_alive_cells

    def _check_bounds(self, row: int, col: int) -> None:
        if not (is_integer(row) and is_integer(col)):
            raise OutOfBounds(f"Cell coordinates must be integers, got ({row!r}, {col!r})")
        if not (0 <= row < self.rows and 0 <= col < self.columns):
            raise OutOfBounds(
                f"Cell ({row}, {col}) outside grid of size {self.rows}x{self.columns}"
            )

    def get_cell_state(self, row: int, col: int) -> bool:
        """Return True if the cell at (row, col) is alive."""
        self._check_bounds(row, col)
        return bool(self._grid[row, col])

    def is_alive(self) -> bool:
        """Return True if at least one cell is alive."""
        return bool(self._grid.any())

    def num_of_alive_neighbors(self, row: int, col: int) -> int:
        """Return the number of alive cells among the 8 neighbours of (row, col)."""
        self._check_bounds(row, col)
        count = 0
        for di, dj in MOORE_OFFSETS:
            r, c = row + di, col + dj
            if self._adjacency == TOROIDAL:
                r, c = r % self.rows, c % self.columns
            elif not (0 <= r < self.rows and 0 <= c < self.columns):
                continue
            if self._grid[r, c]:
                count += 1
        return count

    def compute_new_grid(self) -> np.ndarray:
        """Return the next generation as a new grid, leaving this one untouched."""
        return step(self._grid, self._adjacency)

    def next_generation(self, n: int = 1) -> None:
        """
        Advance the grid by n generations.

        Args:
            n: Number of generations, 0 leaves the grid unchanged

        Raises:
            InvalidArgument: If n is negative or not an integer
        """
        _check_count(n, "Generation")

        for _ in range(n):
            self._grid = self.compute_new_grid()
            self._total_alive_cells = int(np.count_nonzero(self._grid))
        logger.debug("Advanced %d generations, %d alive cells", n, self._total_alive_cells)

    def simulate(self, num_steps: int) -> np.ndarray:
        """Return the trajectory of the next num_steps generations without advancing."""
        _check_count(num_steps, "Step")

        trajectory = np.zeros((num_steps + 1, self.rows, self.columns), dtype=bool)
        trajectory[0] = self._grid
        current_state = self._grid
        for t in range(1, num_steps + 1):
            current_state = step(current_state, self._adjacency)
            trajectory[t] = current_state
        return trajectory

    def num_of_communities(self, adjacency: Optional[str] = None, connectivity: int = 4) -> int:
        """
        Count connected groups of alive cells.

        Args:
            adjacency: 'bounded' or 'toroidal', defaults to community_adjacency
            connectivity: 4 for edge neighbours only, 8 to include diagonals

        Returns:
            Number of communities
        """
        if adjacency is None:
            adjacency = self._community_adjacency
        return count_communities(self._grid, adjacency=adjacency,
                                 connectivity=connectivity,
                                 total_alive=self._total_alive_cells)

    def __str__(self):
        return format_grid(self._grid)


def place_pattern(grid_size: Tuple[int, int],
                  pattern: np.ndarray,
                  position: Optional[Tuple[int, int]] = None) -> np.ndarray:
    """
    Stamp a pattern onto an empty grid.

    Args:
        grid_size: (rows, columns) of the new grid
        pattern: 2-D array of cell states
        position: Top-left cell of the pattern, centered if None

    Returns:
        Boolean grid; pattern cells past the bottom or right edge are dropped

    Raises:
        InvalidArgument: If a grid dimension is not positive
        OutOfBounds: If the top-left cell lies outside the grid
    """
    pattern = np.asarray(pattern, dtype=bool)
    if any(size <= 0 for size in grid_size):
        raise InvalidArgument(f"Grid size must be positive, got {tuple(grid_size)}")
    grid = np.zeros(grid_size, dtype=bool)
    if position is None:
        position = tuple((g - p) // 2 for g, p in zip(grid.shape, pattern.shape))

    top, left = position
    if not (0 <= top < grid.shape[0] and 0 <= left < grid.shape[1]):
        raise OutOfBounds(f"Pattern {pattern.shape} does not fit at {position} in grid {grid.shape}")

    window = grid[top:top + pattern.shape[0], left:left + pattern.shape[1]]
    window[...] = pattern[:window.shape[0], :window.shape[1]]
    return grid
