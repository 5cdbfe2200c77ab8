"""Error types raised by the simulator, union-find and grid loader."""


class LifeGridError(Exception):
    """Base class for all lifegrid errors."""


class InvalidArgument(LifeGridError, ValueError):
    """Bad dimensions, adjacency policy or iteration count."""


class OutOfBounds(LifeGridError, IndexError):
    """Coordinate outside the current grid dimensions."""


class DataFormatError(LifeGridError, ValueError):
    """Malformed grid data (wrong token count or token type)."""


class ResourceUnavailable(LifeGridError, OSError):
    """Grid data source could not be read."""
