from __future__ import annotations

import argparse
import os
import sys
import time
from typing import Set, Tuple

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from game import (  # type: ignore
    apply_move,
    check_win,
    find_best_move,
    generate_level,
    level_shape,
    tubes_from_level,
)


def follow_hints(level_index: int, seed: int, max_moves: int) -> Tuple[str, int]:
    """Plays a deal by always taking the hint. Returns (outcome, moves) where outcome is
    'solved', 'deadlock', 'cycle' or 'limit'."""
    level = generate_level(level_index, seed=seed)
    tubes = tubes_from_level(level)
    seen: Set[Tuple[Tuple[str, ...], ...]] = set()
    for moves in range(max_moves + 1):
        if check_win(tubes, level.capacity):
            return 'solved', moves
        key = tuple(t.layers for t in tubes)
        if key in seen:
            return 'cycle', moves
        seen.add(key)
        hint = find_best_move(tubes, level.capacity)
        if hint is None:
            return 'deadlock', moves
        tubes, _ = apply_move(tubes, hint.from_index, hint.to_index, level.capacity)
    return 'limit', max_moves


def process(args: argparse.Namespace) -> None:
    start_time = time.time()
    totals = {'solved': 0, 'deadlock': 0, 'cycle': 0, 'limit': 0}
    for level_index in range(args.first, args.last + 1):
        colors, extra = level_shape(level_index)
        for k in range(args.deals):
            outcome, moves = follow_hints(level_index, args.seed + k, args.max_moves)
            totals[outcome] += 1
            if args.verbose:
                print(f"level={level_index} colors={colors} empty={extra} seed={args.seed + k} {outcome} after {moves} moves")
    elapsed = time.time() - start_time
    summary = ' '.join(f"{name}={count}" for name, count in totals.items())
    print(f"{summary} elapsed_sec={elapsed:.1f}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Report how far greedy hints get on generated levels")
    parser.add_argument('--first', type=int, default=1, help='First level index')
    parser.add_argument('--last', type=int, default=20, help='Last level index (inclusive)')
    parser.add_argument('--deals', type=int, default=10, help='Seeded deals per level')
    parser.add_argument('--seed', type=int, default=0, help='Base seed; deal k uses seed+k')
    parser.add_argument('--max-moves', type=int, default=200, help='Stop following hints after this many moves')
    parser.add_argument('--verbose', action='store_true', help='Print one line per deal')
    args = parser.parse_args()
    process(args)


if __name__ == '__main__':
    main()
