"""
PrismFlow core Python package.

Pure puzzle logic for the tube-sorting game plus the small amount of
state the front ends need around it.
Modules:
- palette.py: color names, themes, CAPACITY
- tube.py: Tube, LevelDefinition, MoveResult, Hint
- levels.py: level generator
- moves.py: can_move, execute_move, check_win
- hints.py: find_best_move
- session.py: GameSession state machine (selection, undo, hints)
- db.py: SQLite progress/settings store
"""
