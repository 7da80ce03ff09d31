from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .moves import can_move
from .tube import Hint, Tube


def legal_moves(tubes: Sequence[Tube], capacity: int) -> List[Tuple[int, int]]:
    """All legal (from, to) pairs, source-major in ascending order."""
    moves: List[Tuple[int, int]] = []
    for i, src in enumerate(tubes):
        for j, dst in enumerate(tubes):
            if i != j and can_move(src, dst, capacity):
                moves.append((i, j))
    return moves


def is_deadlocked(tubes: Sequence[Tube], capacity: int) -> bool:
    return find_best_move(tubes, capacity) is None


def find_best_move(tubes: Sequence[Tube], capacity: int) -> Optional[Hint]:
    """
    Suggests a move with a greedy three-tier heuristic. Not a search: the hint
    may lead nowhere, and None means no legal move exists at all.
    Ties go to the lowest source index, then the lowest destination index.
    """
    n = len(tubes)

    # 1. Pour onto a matching color rather than into an empty tube.
    for i in range(n):
        for j in range(n):
            if i == j:
                continue
            if can_move(tubes[i], tubes[j], capacity):
                move_color = tubes[i].top()
                if tubes[j].layers and tubes[j].top() == move_color:
                    return Hint(from_index=i, to_index=j)

    # 2. Any move out of a tube holding two or more units.
    # The intent is to expose a different color underneath, but that is not
    # filtered for: a same-colored pair on top qualifies too.
    for i in range(n):
        if len(tubes[i].layers) < 2:
            continue
        for j in range(n):
            if i == j:
                continue
            if can_move(tubes[i], tubes[j], capacity):
                return Hint(from_index=i, to_index=j)

    # 3. Fallback: any legal move.
    for i in range(n):
        for j in range(n):
            if i == j:
                continue
            if can_move(tubes[i], tubes[j], capacity):
                return Hint(from_index=i, to_index=j)

    return None
