from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

from .hints import find_best_move
from .moves import check_win, execute_move, can_move
from .palette import TOTAL_LEVELS
from .tube import Hint, LevelDefinition, MoveResult, Tube, tubes_from_level

HINTS_PER_LEVEL = 3
HINT_REWARD = 2


class Phase(Enum):
    IDLE = 'idle'
    TUBE_SELECTED = 'tube_selected'
    ANIMATING_MOVE = 'animating_move'
    LEVEL_COMPLETE = 'level_complete'


class GameSession:
    """Caller-side state around the pure engine: selection, undo history, hints and level completion.

    Every board stored here is an immutable tuple of Tubes, so history
    snapshots never alias the live board.
    """

    def __init__(self, level: LevelDefinition, total_levels: int = TOTAL_LEVELS) -> None:
        self.total_levels = total_levels
        self.level = level
        self.tubes: Tuple[Tube, ...] = ()
        self.history: List[Tuple[Tube, ...]] = []
        self.selected: Optional[int] = None
        self.current_hint: Optional[Hint] = None
        self.hints_remaining = HINTS_PER_LEVEL
        self.phase = Phase.IDLE
        self.start(level)

    @property
    def capacity(self) -> int:
        return self.level.capacity

    def start(self, level: LevelDefinition) -> None:
        self.level = level
        self.tubes = tubes_from_level(level)
        self.history = []
        self.selected = None
        self.current_hint = None
        self.hints_remaining = HINTS_PER_LEVEL
        self.phase = Phase.IDLE

    def _accepting_input(self) -> bool:
        return self.phase in (Phase.IDLE, Phase.TUBE_SELECTED)

    def _select(self, index: Optional[int]) -> None:
        self.selected = index
        self.phase = Phase.IDLE if index is None else Phase.TUBE_SELECTED

    def tap(self, index: int) -> Optional[MoveResult]:
        """Handles a tap on tube `index`; returns the MoveResult when the tap pours."""
        if not self._accepting_input():
            return None
        if not 0 <= index < len(self.tubes):
            raise ValueError(f'Tube index out of range: {index}')
        self.current_hint = None

        if self.selected is None:
            if self.tubes[index].layers:
                self._select(index)
            return None
        if self.selected == index:
            self._select(None)
            return None

        src = self.selected
        if not can_move(self.tubes[src], self.tubes[index], self.capacity):
            self._select(index if self.tubes[index].layers else None)
            return None

        self.history.append(self.tubes)
        res = execute_move(self.tubes[src], self.tubes[index], self.capacity)
        board = list(self.tubes)
        board[src] = res.updated_from
        board[index] = res.updated_to
        self.tubes = tuple(board)
        self.selected = None
        self.phase = Phase.ANIMATING_MOVE
        return res

    def move(self, from_index: int, to_index: int) -> Optional[MoveResult]:
        """Selects and pours in one step, then settles the animation phase."""
        if not self._accepting_input():
            return None
        self._select(None)
        self.tap(from_index)
        if self.selected != from_index:
            return None
        res = self.tap(to_index)
        if res is None:
            self._select(None)
            return None
        self.finish_animation()
        return res

    def finish_animation(self) -> bool:
        """Ends the pour; returns True when it solved the level."""
        if self.phase is not Phase.ANIMATING_MOVE:
            return False
        if check_win(self.tubes, self.capacity):
            self.phase = Phase.LEVEL_COMPLETE
            return True
        self.phase = Phase.IDLE
        return False

    def undo(self) -> bool:
        if not self.history or not self._accepting_input():
            return False
        self.tubes = self.history.pop()
        self.selected = None
        self.current_hint = None
        self.phase = Phase.IDLE
        return True

    def restart(self) -> bool:
        if self.phase is Phase.ANIMATING_MOVE:
            return False
        self.start(self.level)
        return True

    def request_hint(self) -> Optional[Hint]:
        if not self._accepting_input() or self.hints_remaining <= 0:
            return None
        hint = find_best_move(self.tubes, self.capacity)
        if hint is None:
            return None
        self.hints_remaining -= 1
        self.current_hint = hint
        return hint

    def grant_hints(self, count: int = HINT_REWARD) -> int:
        self.hints_remaining += count
        return self.hints_remaining

    def is_deadlocked(self) -> bool:
        return find_best_move(self.tubes, self.capacity) is None

    def advance(self) -> Optional[int]:
        """Next level index after a completed level, or None past the last level."""
        if self.phase is not Phase.LEVEL_COMPLETE:
            return None
        next_level = self.level.id + 1
        return next_level if next_level <= self.total_levels else None
