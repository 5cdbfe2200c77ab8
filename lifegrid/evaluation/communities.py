"""Connected communities of alive cells."""
import logging
from typing import List, Optional

import numpy as np

from ..utils.adjacency import TOROIDAL, BOUNDED, neighbor_offsets, validate_adjacency
from ..utils.union_find import WeightedQuickUnionUF

logger = logging.getLogger(__name__)


def build_union_find(grid: np.ndarray,
                     adjacency: str = BOUNDED,
                     connectivity: int = 4) -> WeightedQuickUnionUF:
    """
    Join every alive cell with its alive neighbours.

    Args:
        grid: Boolean grid (H x W)
        adjacency: 'bounded' skips off-grid neighbours, 'toroidal' wraps them
        connectivity: 4 for N/S/E/W, 8 to include diagonals

    Returns:
        Union-find over all cells; dead cells stay singletons
    """
    validate_adjacency(adjacency)
    offsets = neighbor_offsets(connectivity)
    rows, columns = grid.shape
    uf = WeightedQuickUnionUF(rows, columns)

    for i in range(rows):
        for j in range(columns):
            if not grid[i, j]:
                continue
            for di, dj in offsets:
                ni, nj = i + di, j + dj
                if adjacency == TOROIDAL:
                    ni, nj = ni % rows, nj % columns
                elif not (0 <= ni < rows and 0 <= nj < columns):
                    continue
                if grid[ni, nj]:
                    uf.union(i, j, ni, nj)
    return uf


def count_communities(grid: np.ndarray,
                      adjacency: str = BOUNDED,
                      connectivity: int = 4,
                      total_alive: Optional[int] = None) -> int:
    """
    Count maximal connected groups of alive cells.

    Distinct roots are collected over every cell; each dead cell is its own
    untouched root, so subtracting the dead-cell count leaves the number of
    alive communities.

    Args:
        grid: Boolean grid (H x W)
        adjacency: 'bounded' or 'toroidal'
        connectivity: 4 or 8
        total_alive: Alive-cell count if already known

    Returns:
        Number of communities, 0 for an empty grid
    """
    grid = np.asarray(grid, dtype=bool)
    rows, columns = grid.shape
    uf = build_union_find(grid, adjacency, connectivity)

    debug = logger.isEnabledFor(logging.DEBUG)
    roots = set()
    for i in range(rows):
        for j in range(columns):
            root = uf.find(i, j)
            if debug:
                logger.debug("cell (%d, %d) -> root %d", i, j, root)
            roots.add(root)

    if total_alive is None:
        total_alive = int(np.count_nonzero(grid))
    dead_cells = rows * columns - total_alive
    return len(roots) - dead_cells


def community_sizes(grid: np.ndarray,
                    adjacency: str = BOUNDED,
                    connectivity: int = 4) -> List[int]:
    """Return the size of each community, largest first."""
    grid = np.asarray(grid, dtype=bool)
    uf = build_union_find(grid, adjacency, connectivity)

    sizes = {}
    for i, j in zip(*np.nonzero(grid)):
        root = uf.find(int(i), int(j))
        sizes[root] = sizes.get(root, 0) + 1
    return sorted(sizes.values(), reverse=True)
