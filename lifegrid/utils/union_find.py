"""Weighted quick-union with path compression over grid cells."""
import numpy as np

from ..errors import InvalidArgument, OutOfBounds


def is_integer(value) -> bool:
    """Return True for int-like values, excluding bool."""
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


class WeightedQuickUnionUF:
    """
    Disjoint sets over the cells of a rows x columns grid.

    Cells are addressed by (row, col) and stored under the linear id
    ``row * columns + col``. Union is by size, find compresses the path.
    """

    def __init__(self, rows: int, columns: int):
        """
        Create rows * columns singleton sets.

        Args:
            rows: Number of grid rows
            columns: Number of grid columns

        Raises:
            InvalidArgument: If either dimension is not positive
        """
        if rows <= 0 or columns <= 0:
            raise InvalidArgument(f"Dimensions must be positive, got {rows}x{columns}")

        self._rows = rows
        self._columns = columns
        self._parent = np.arange(rows * columns, dtype=np.int64)
        self._size = np.ones(rows * columns, dtype=np.int64)
        self._count = rows * columns

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def count(self) -> int:
        """Number of disjoint sets."""
        return self._count

    def _index(self, row: int, col: int) -> int:
        if not (is_integer(row) and is_integer(col)):
            raise OutOfBounds(f"Cell coordinates must be integers, got ({row!r}, {col!r})")
        if not (0 <= row < self._rows and 0 <= col < self._columns):
            raise OutOfBounds(
                f"Cell ({row}, {col}) outside grid of size {self._rows}x{self._columns}"
            )
        return row * self._columns + col

    def _root(self, p: int) -> int:
        root = p
        while root != self._parent[root]:
            root = int(self._parent[root])

        # Re-point every node on the path straight at the root
        while p != root:
            next_p = int(self._parent[p])
            self._parent[p] = root
            p = next_p

        return root

    def find(self, row: int, col: int) -> int:
        """Return the root id of the set containing (row, col)."""
        return self._root(self._index(row, col))

    def connected(self, row1: int, col1: int, row2: int, col2: int) -> bool:
        """Return True if both cells are in the same set."""
        return self.find(row1, col1) == self.find(row2, col2)

    def component_size(self, row: int, col: int) -> int:
        """Return the number of cells in the set containing (row, col)."""
        return int(self._size[self.find(row, col)])

    def union(self, row1: int, col1: int, row2: int, col2: int) -> None:
        """Merge the sets containing the two cells, smaller tree under larger."""
        root_p = self.find(row1, col1)
        root_q = self.find(row2, col2)
        if root_p == root_q:
            return

        # Equal sizes: first root goes under the second
        if self._size[root_p] > self._size[root_q]:
            self._parent[root_q] = root_p
            self._size[root_p] += self._size[root_q]
        else:
            self._parent[root_p] = root_q
            self._size[root_q] += self._size[root_p]

        self._count -= 1
