"""
Text grid format.

A grid file holds the row count, the column count, then rows * columns
boolean tokens in row-major order. Tokens are separated by any whitespace;
booleans are ``true``/``false`` (any case) or ``1``/``0``::

    3 3
    false true false
    false true false
    false true false
"""
import logging
from pathlib import Path
from typing import Iterable, List

import numpy as np

from ..errors import DataFormatError, ResourceUnavailable

logger = logging.getLogger(__name__)


_TRUE_TOKENS = ('true', '1')
_FALSE_TOKENS = ('false', '0')


def parse_bool(token: str) -> bool:
    """Parse a single cell token."""
    lowered = token.lower()
    if lowered in _TRUE_TOKENS:
        return True
    if lowered in _FALSE_TOKENS:
        return False
    raise DataFormatError(f"Expected a boolean cell value, got '{token}'")


def _parse_dimension(token: str, name: str) -> int:
    try:
        value = int(token)
    except ValueError:
        raise DataFormatError(f"Expected an integer {name} count, got '{token}'") from None
    if value <= 0:
        raise DataFormatError(f"{name.capitalize()} count must be positive, got {value}")
    return value


def cells_to_grid(rows: int, columns: int, cells: Iterable[bool]) -> np.ndarray:
    """
    Build a grid from a row-major sequence of cell values.

    Args:
        rows: Number of rows
        columns: Number of columns
        cells: rows * columns booleans

    Returns:
        Boolean array of shape (rows, columns)

    Raises:
        DataFormatError: If the number of cells does not match rows * columns
    """
    values = [bool(cell) for cell in cells]
    expected = rows * columns
    if len(values) != expected:
        raise DataFormatError(
            f"Expected {expected} cell values for a {rows}x{columns} grid, got {len(values)}"
        )
    return np.array(values, dtype=bool).reshape(rows, columns)


def parse_grid(text: str) -> np.ndarray:
    """
    Parse a grid from its text form.

    Args:
        text: Grid text as described in the module docstring

    Returns:
        Boolean array of shape (rows, columns)

    Raises:
        DataFormatError: On missing or malformed dimensions or cell tokens
    """
    tokens = text.split()
    if len(tokens) < 2:
        raise DataFormatError("Grid data must start with a row count and a column count")

    rows = _parse_dimension(tokens[0], 'row')
    columns = _parse_dimension(tokens[1], 'column')
    cells: List[bool] = [parse_bool(token) for token in tokens[2:]]
    return cells_to_grid(rows, columns, cells)


def load_grid(path) -> np.ndarray:
    """
    Load a grid from a text file.

    Args:
        path: Path to the grid file

    Returns:
        Boolean array of shape (rows, columns)

    Raises:
        ResourceUnavailable: If the file cannot be read
        DataFormatError: If the contents are malformed or not valid text
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ResourceUnavailable(f"Cannot read grid file {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise DataFormatError(f"Grid file {path} is not valid text: {e}") from e

    grid = parse_grid(text)
    logger.debug("Loaded %dx%d grid from %s", grid.shape[0], grid.shape[1], path)
    return grid


def format_grid(grid: np.ndarray, alive: str = '#', dead: str = '.') -> str:
    """Render a grid as one line of characters per row."""
    return '\n'.join(
        ''.join(alive if cell else dead for cell in row)
        for row in grid
    )


def dump_grid(grid: np.ndarray) -> str:
    """Serialize a grid to the text format read by parse_grid."""
    rows, columns = grid.shape
    lines = [f"{rows} {columns}"]
    for row in grid:
        lines.append(' '.join('true' if cell else 'false' for cell in row))
    return '\n'.join(lines) + '\n'
