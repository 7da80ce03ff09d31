from __future__ import annotations

import json
import os
import sqlite3
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from .palette import DEFAULT_THEME, THEMES


def _debug_enabled() -> bool:
    return os.getenv('PRISMFLOW_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class Settings:
    """Player preferences the front ends persist alongside the current level."""
    sound: bool = True
    vibration: bool = True
    theme: str = DEFAULT_THEME

    def __post_init__(self) -> None:
        if self.theme not in THEMES:
            raise ValueError(f'Unknown theme: {self.theme!r}')

    @classmethod
    def from_json(cls, obj: Optional[Dict[str, Any]]) -> 'Settings':
        if obj is None:
            obj = {}
        if not isinstance(obj, dict):
            raise ValueError('settings must be an object')
        for flag in ('sound', 'vibration'):
            if not isinstance(obj.get(flag, True), bool):
                raise ValueError(f'{flag} must be true or false')
        return cls(
            sound=obj.get('sound', True),
            vibration=obj.get('vibration', True),
            theme=str(obj.get('theme', DEFAULT_THEME)),
        )

    def to_json(self) -> Dict[str, Any]:
        return asdict(self)


def default_db_path() -> str:
    return os.getenv('PRISMFLOW_DB', os.path.join('data', 'prismflow.db'))


def _ensure_db_dir(db_path: str) -> None:
    """Ensures the directory for the SQLite DB exists before connecting."""
    directory = os.path.dirname(db_path)
    if directory and not os.path.exists(directory):
        os.makedirs(directory, exist_ok=True)


def _resolve_db_path(db_path: str) -> str:
    """Resolves a potentially unwritable DB path to a writable one, creating the directory if needed."""
    try:
        _ensure_db_dir(db_path)
        return db_path
    except PermissionError:
        if _debug_enabled():
            print(f"[db] cannot create directory for {db_path}; trying fallbacks")
    candidates = [
        os.getenv('PRISMFLOW_DB_DIR'),
        os.path.join(os.getcwd(), 'data'),
        '/tmp',
    ]
    base = os.path.basename(db_path) or 'prismflow.db'
    for d in candidates:
        if not d:
            continue
        try:
            os.makedirs(d, exist_ok=True)
        except OSError:
            continue
        return os.path.join(d, base)
    # Last resort: current working directory
    return base


def _ensure_db(conn: sqlite3.Connection) -> None:
    """Ensures the single-row progress table exists."""
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS progress (
            slot INTEGER PRIMARY KEY CHECK (slot = 0),
            level INTEGER NOT NULL,
            settings TEXT NOT NULL,
            saved_at TEXT NOT NULL
        )
        """
    )
    conn.commit()


def load_progress(db_path: str) -> Tuple[int, Settings]:
    """Loads (last_level, settings); level 1 and default settings when nothing was saved."""
    resolved = _resolve_db_path(db_path)
    conn = sqlite3.connect(resolved)
    try:
        _ensure_db(conn)
        row = conn.execute("SELECT level, settings FROM progress WHERE slot = 0").fetchone()
        if not row:
            return 1, Settings()
        level_val, settings_str = row
        return max(1, int(level_val)), Settings.from_json(json.loads(settings_str))
    finally:
        conn.close()


def save_progress(db_path: str, level: int, settings: Settings) -> None:
    if level < 1:
        raise ValueError(f'Level must be >= 1, got {level}')
    resolved = _resolve_db_path(db_path)
    conn = sqlite3.connect(resolved)
    try:
        _ensure_db(conn)
        conn.execute(
            """
            INSERT OR REPLACE INTO progress (slot, level, settings, saved_at)
            VALUES (0, ?, ?, ?)
            """,
            (
                int(level),
                json.dumps(settings.to_json(), sort_keys=True),
                datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
            ),
        )
        conn.commit()
        if _debug_enabled():
            print(f"[db] saved level {level} to {resolved}")
    finally:
        conn.close()
