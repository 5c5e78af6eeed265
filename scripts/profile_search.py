#!/usr/bin/env python
"""
Profile the minimax search to identify performance bottlenecks.

Usage:
    python scripts/profile_search.py
    python scripts/profile_search.py --positions 5 --depth 5 --mode minimax

After running, analyze with:
    python -c "import pstats; p = pstats.Stats('profile.out'); p.sort_stats('cumulative').print_stats(30)"
"""

import cProfile
import logging
import pstats
from argparse import ArgumentParser


def main():
    parser = ArgumentParser(description='Profile minimax search')
    parser.add_argument('--positions', type=int, default=3, help='Number of random positions to search')
    parser.add_argument('--tiles', type=int, default=6, help='Extra random tiles added to each position')
    parser.add_argument('--depth', type=int, default=5, help='Search depth in plies')
    parser.add_argument('--mode', type=str, default='alpha_beta', choices=['alpha_beta', 'minimax'])
    parser.add_argument('--output', type=str, default='profile.out', help='Output file for profile data')
    parser.add_argument('--top', type=int, default=30, help='Number of top functions to show')
    parser.add_argument('--verbose', action='store_true', help='Log every chosen move')
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(asctime)s %(name)s %(levelname)s %(message)s')

    # ##>: Import inside main to profile module loading separately.
    from game2048 import Board
    from minimax import MinimaxAgent

    agent = MinimaxAgent(depth=args.depth, mode=args.mode)
    boards = []
    for seed in range(args.positions):
        board = Board.new_game(seed=seed)
        for tile in range(args.tiles):
            board.add_random_tile(seed=seed * args.tiles + tile)
        boards.append(board)

    print(f'Profiling {args.mode} search: {args.positions} positions, depth {args.depth}')
    print(f'Output: {args.output}\n')

    # ##>: Run profiler.
    profiler = cProfile.Profile()
    profiler.enable()

    for board in boards:
        agent.choose_action(board)

    profiler.disable()
    profiler.dump_stats(args.output)

    # ##>: Print summary.
    print(f'\n{"=" * 60}')
    print(f'Top {args.top} functions by cumulative time:')
    print('=' * 60)

    stats = pstats.Stats(args.output)
    stats.strip_dirs()
    stats.sort_stats('cumulative')
    stats.print_stats(args.top)

    print('=' * 60)
    print(f'Top {args.top} functions by total time (self):')
    print('=' * 60)

    stats.sort_stats('tottime')
    stats.print_stats(args.top)

    print(f'\nProfile saved to: {args.output}')


if __name__ == '__main__':
    main()
