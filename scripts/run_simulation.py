"""
Run a Game of Life simulation and report alive cells and communities
"""
import argparse
import logging
import sys
from pathlib import Path
from tqdm import tqdm

sys.path.append(str(Path(__file__).parent.parent))

from lifegrid.errors import LifeGridError
from lifegrid.utils.adjacency import ADJACENCY_POLICIES, BOUNDED
from lifegrid.utils.game_of_life import GameOfLife, place_pattern
from lifegrid.utils.patterns import get_pattern


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Simulate Game of Life and count communities')
    source = parser.add_mutually_exclusive_group()
    source.add_argument('--file', type=str, default=None,
                        help='Grid file (rows, columns, then true/false cells); default 5x5 seed')
    source.add_argument('--pattern', type=str, default=None,
                        help='Named pattern (block, blinker, glider, ...) centered on an empty grid')
    parser.add_argument('--size', type=int, nargs=2, default=(16, 16), metavar=('ROWS', 'COLUMNS'),
                        help='Grid size used with --pattern')
    parser.add_argument('--generations', type=int, default=4,
                        help='Number of generations to advance')
    parser.add_argument('--adjacency', choices=ADJACENCY_POLICIES, default=BOUNDED,
                        help='Neighbour policy for generation advance')
    parser.add_argument('--community-adjacency', choices=ADJACENCY_POLICIES, default=BOUNDED,
                        help='Neighbour policy for community detection')
    parser.add_argument('--connectivity', type=int, choices=(4, 8), default=4,
                        help='Community connectivity: 4 (edges) or 8 (with diagonals)')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable debug logging')
    return parser.parse_args(argv)


def print_state(game, title, connectivity):
    print(f"\n{title}")
    print("-" * 60)
    print(game)
    print(f"  Alive cells: {game.get_total_alive_cells()}")
    print(f"  Communities: {game.num_of_communities(connectivity=connectivity)}")


def main(argv=None):
    """Load or seed a grid, advance it and print the results."""
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        if args.file:
            game = GameOfLife.from_file(args.file,
                                        adjacency=args.adjacency,
                                        community_adjacency=args.community_adjacency)
        elif args.pattern:
            grid = place_pattern(tuple(args.size), get_pattern(args.pattern))
            game = GameOfLife(grid,
                              adjacency=args.adjacency,
                              community_adjacency=args.community_adjacency)
        else:
            game = GameOfLife(adjacency=args.adjacency,
                              community_adjacency=args.community_adjacency)
    except LifeGridError as e:
        print(f"Error: {e}")
        return 1

    if args.generations < 0:
        print(f"Error: generations must be non-negative, got {args.generations}")
        return 1

    print("=" * 60)
    print("Game of Life")
    print("=" * 60)
    print(f"  Source: {args.file or args.pattern or 'default seed'}")
    print(f"  Grid size: {game.rows}x{game.columns}")
    print(f"  Adjacency: {game.adjacency}")
    print(f"  Community adjacency: {game.community_adjacency} ({args.connectivity}-connected)")

    print_state(game, "Generation 0", args.connectivity)

    for _ in tqdm(range(args.generations), desc="Advancing generations"):
        game.next_generation()

    print_state(game, f"Generation {args.generations}", args.connectivity)
    print(f"  Still alive: {game.is_alive()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
