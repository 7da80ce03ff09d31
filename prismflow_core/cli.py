from __future__ import annotations

import argparse
from typing import Optional, Tuple

from .db import default_db_path, load_progress, save_progress
from .hints import find_best_move
from .levels import generate_level
from .palette import TOTAL_LEVELS
from .session import GameSession, Phase
from .tube import pretty_tubes, tubes_from_level


def _parse_move(text: str) -> Optional[Tuple[int, int]]:
    sep = ',' if ',' in text else ' '
    try:
        a_s, b_s = [t for t in text.split(sep) if t != '']
        return int(a_s), int(b_s)
    except ValueError:
        return None


def main() -> None:
    parser = argparse.ArgumentParser(description='PrismFlow tube-sorting puzzle')
    parser.add_argument('--level', type=int, default=None, help='Level index (default: last saved level)')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the deal')
    parser.add_argument('--db', default=default_db_path(), help='SQLite progress file path')
    parser.add_argument('--play', action='store_true', help='Play interactively')
    parser.add_argument('--hint', action='store_true', help='Print the suggested move for the starting board')
    args = parser.parse_args()

    saved_level, settings = load_progress(args.db)
    level_index = args.level if args.level is not None else saved_level
    if level_index < 1:
        parser.error('--level must be >= 1')

    if not args.play:
        level = generate_level(level_index, seed=args.seed)
        tubes = tubes_from_level(level)
        print(f'Level {level.id}:')
        print(pretty_tubes(tubes, level.capacity))
        if args.hint:
            hint = find_best_move(tubes, level.capacity)
            print('Suggested pour:', (hint.from_index, hint.to_index) if hint else None)
        return

    session = GameSession(generate_level(level_index, seed=args.seed))
    print(f'Level {session.level.id}:')
    print(pretty_tubes(session.tubes, session.capacity))
    print("Enter a pour as from,to. Commands: h hint, u undo, r restart, q quit.")

    while True:
        text = input('> ').strip().lower()
        if text in ('q', 'quit'):
            save_progress(args.db, session.level.id, settings)
            return
        if text == 'h':
            hint = session.request_hint()
            if hint is None:
                print('No hint available.' if session.hints_remaining > 0 else 'No hints left.')
            else:
                print(f'Suggested pour: {hint.from_index} -> {hint.to_index} ({session.hints_remaining} hints left)')
            continue
        if text == 'u':
            if not session.undo():
                print('Nothing to undo.')
        elif text == 'r':
            session.restart()
        else:
            move = _parse_move(text)
            if move is None:
                print('Could not parse. Try again.')
                continue
            if not all(0 <= m < len(session.tubes) for m in move):
                print('No such tube. Try again.')
                continue
            if session.move(*move) is None:
                print('Illegal move. Try again.')
                continue
        print(pretty_tubes(session.tubes, session.capacity))

        if session.phase is Phase.LEVEL_COMPLETE:
            print(f'Level {session.level.id} complete!')
            next_level = session.advance()
            if next_level is None:
                print(f'All {TOTAL_LEVELS} levels solved.')
                save_progress(args.db, session.level.id, settings)
                return
            save_progress(args.db, next_level, settings)
            session.start(generate_level(next_level, seed=args.seed))
            print(f'Level {session.level.id}:')
            print(pretty_tubes(session.tubes, session.capacity))
        elif session.is_deadlocked():
            print('No legal moves left. Undo (u) or restart (r).')


if __name__ == '__main__':
    main()
