from __future__ import annotations

from typing import List, Sequence, Tuple

from .tube import MoveResult, Tube


def can_move(from_tube: Tube, to_tube: Tube, capacity: int) -> bool:
    """Pouring is legal when the source has something, the destination has room,
    and the destination is empty or shows the same top color."""
    if not from_tube.layers:
        return False
    if len(to_tube.layers) >= capacity:
        return False
    to_color = to_tube.top()
    return to_color is None or to_color == from_tube.top()


def execute_move(from_tube: Tube, to_tube: Tube, capacity: int) -> MoveResult:
    """Pours the contiguous top run of one color from from_tube into to_tube.

    Callers check can_move first; this does not re-validate.
    """
    new_from = list(from_tube.layers)
    new_to = list(to_tube.layers)
    move_color = new_from[-1]
    count = 0
    while new_from and new_from[-1] == move_color and len(new_to) < capacity:
        new_to.append(new_from.pop())
        count += 1
    return MoveResult(
        updated_from=from_tube.with_layers(new_from),
        updated_to=to_tube.with_layers(new_to),
        moved_count=count,
    )


def is_solved_tube(tube: Tube, capacity: int) -> bool:
    """Empty, or full and a single color."""
    if not tube.layers:
        return True
    if len(tube.layers) != capacity:
        return False
    first = tube.layers[0]
    return all(color == first for color in tube.layers)


def check_win(tubes: Sequence[Tube], capacity: int) -> bool:
    return all(is_solved_tube(tube, capacity) for tube in tubes)


def apply_move(tubes: Sequence[Tube], from_index: int, to_index: int, capacity: int) -> Tuple[Tuple[Tube, ...], int]:
    """Validates and applies a move to a whole board, returning (new_board, moved_count)."""
    n = len(tubes)
    if not (0 <= from_index < n and 0 <= to_index < n):
        raise ValueError(f'Tube index out of range: {from_index} -> {to_index} (board has {n} tubes)')
    if from_index == to_index:
        raise ValueError('Cannot pour a tube into itself')
    if not can_move(tubes[from_index], tubes[to_index], capacity):
        raise ValueError(f'Illegal move: {from_index} -> {to_index}')
    res = execute_move(tubes[from_index], tubes[to_index], capacity)
    board: List[Tube] = list(tubes)
    board[from_index] = res.updated_from
    board[to_index] = res.updated_to
    return tuple(board), res.moved_count
