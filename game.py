from __future__ import annotations

# Facade module that re-exports PrismFlow core functionality for the Flask
# app, the tests and the tools. Single-responsibility modules live under prismflow_core/*.

from prismflow_core.palette import (
    CAPACITY,
    COLOR_NAMES,
    DEFAULT_THEME,
    THEMES,
    TOTAL_LEVELS,
    Color,
    color_symbol,
    theme_colors,
)
from prismflow_core.tube import (
    Hint,
    LevelDefinition,
    MoveResult,
    Tube,
    pretty_tubes,
    tubes_from_level,
)
from prismflow_core.levels import generate_level, generate_levels, level_shape
from prismflow_core.moves import (
    apply_move,
    can_move,
    check_win,
    execute_move,
    is_solved_tube,
)
from prismflow_core.hints import find_best_move, is_deadlocked, legal_moves
from prismflow_core.session import HINT_REWARD, HINTS_PER_LEVEL, GameSession, Phase
from prismflow_core.db import (
    Settings,
    default_db_path,
    load_progress,
    save_progress,
)


def main() -> None:
    # CLI driver delegated to prismflow_core.cli
    from prismflow_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
