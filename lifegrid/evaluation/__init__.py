"""Community detection over Game of Life grids."""

from .communities import (
    build_union_find,
    count_communities,
    community_sizes
)

__all__ = [
    'build_union_find',
    'count_communities',
    'community_sizes'
]
