"""Adjacency policies shared by neighbour counting and community detection."""
from ..errors import InvalidArgument


BOUNDED = 'bounded'
TOROIDAL = 'toroidal'
ADJACENCY_POLICIES = (BOUNDED, TOROIDAL)

# (d_row, d_col) offsets
MOORE_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)

VON_NEUMANN_OFFSETS = (
    (-1, 0),
    (0, -1), (0, 1),
    (1, 0),
)


def validate_adjacency(policy: str) -> str:
    """Return the policy unchanged, or raise InvalidArgument if unknown."""
    if policy not in ADJACENCY_POLICIES:
        raise InvalidArgument(
            f"Adjacency '{policy}' not supported. Available policies: {list(ADJACENCY_POLICIES)}"
        )
    return policy


def neighbor_offsets(connectivity: int = 4):
    """Return neighbour offsets for 4- or 8-connectivity."""
    if connectivity == 4:
        return VON_NEUMANN_OFFSETS
    if connectivity == 8:
        return MOORE_OFFSETS
    raise InvalidArgument(f"Connectivity must be 4 or 8, got {connectivity}")
