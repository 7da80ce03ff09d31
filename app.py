from __future__ import annotations

import os
import sys
from typing import Any, Dict, List, Sequence, Tuple

from flask import Flask, jsonify, request

# Ensure the root modules import when executed directly from another directory
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from game import (  # noqa: E402
    CAPACITY,
    TOTAL_LEVELS,
    Settings,
    Tube,
    apply_move,
    check_win,
    default_db_path,
    find_best_move,
    generate_level,
    legal_moves,
    load_progress,
    save_progress,
    theme_colors,
    tubes_from_level,
)

DEFAULT_DB = default_db_path()
DEBUG = os.getenv("PRISMFLOW_DEBUG", "0").lower() in ("1", "true", "yes", "on")

app = Flask(__name__)


class BadPayload(ValueError):
    """Request body could not be decoded into engine values."""


def tube_to_json(t: Tube) -> Dict[str, Any]:
    return {"id": int(t.id), "layers": list(t.layers)}


def tubes_to_json(tubes: Sequence[Tube]) -> List[Dict[str, Any]]:
    return [tube_to_json(t) for t in tubes]


def json_to_tubes(obj: Any, capacity: int = CAPACITY) -> Tuple[Tube, ...]:
    if not isinstance(obj, list):
        raise BadPayload("tubes must be a list")
    tubes: List[Tube] = []
    for index, item in enumerate(obj):
        if isinstance(item, dict):
            try:
                tube_id = int(item.get("id", index))
            except (TypeError, ValueError):
                raise BadPayload(f"tube {index}: id must be an integer")
            layers = item.get("layers", [])
        else:
            tube_id, layers = index, item
        if not isinstance(layers, list):
            raise BadPayload(f"tube {index}: layers must be a list")
        if len(layers) > capacity:
            raise BadPayload(f"tube {index} holds {len(layers)} units; capacity is {capacity}")
        if not all(isinstance(x, str) for x in layers):
            raise BadPayload(f"tube {index}: layers must be color names")
        tubes.append(Tube(id=tube_id, layers=tuple(layers)))
    return tuple(tubes)


def _body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict):
        raise BadPayload("JSON object body required")
    return body


@app.errorhandler(BadPayload)
def _bad_request(e: BadPayload) -> Any:
    return jsonify({"ok": False, "error": str(e)}), 400


# ---------- Game API ----------

@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict):
        body = {}
    try:
        level_index = int(body.get("level", 1))
        seed = body.get("seed", None)
        if seed is not None:
            seed = int(seed)
        level = generate_level(level_index, seed=seed)
    except (TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad level: {e}"}), 400
    if DEBUG:
        print(f"[api] new level {level.id} seed={seed}")
    tubes = tubes_from_level(level)
    return jsonify({
        "ok": True,
        "level": level.id,
        "capacity": level.capacity,
        "tubes": tubes_to_json(tubes),
        "totalLevels": TOTAL_LEVELS,
    })


@app.post("/api/legal")
def api_legal() -> Any:
    tubes = json_to_tubes(_body().get("tubes"))
    return jsonify({"ok": True, "legalMoves": [list(m) for m in legal_moves(tubes, CAPACITY)]})


@app.post("/api/move")
def api_move() -> Any:
    body = _body()
    tubes = json_to_tubes(body.get("tubes"))
    try:
        src = int(body["from"])
        dst = int(body["to"])
    except (KeyError, TypeError, ValueError):
        raise BadPayload("from and to tube indices required")
    try:
        next_tubes, moved = apply_move(tubes, src, dst, CAPACITY)
    except ValueError:
        return jsonify({
            "ok": False,
            "error": "Illegal move",
            "legalMoves": [list(m) for m in legal_moves(tubes, CAPACITY)],
        }), 400
    return jsonify({
        "ok": True,
        "tubes": tubes_to_json(next_tubes),
        "movedCount": moved,
        "won": check_win(next_tubes, CAPACITY),
    })


@app.post("/api/hint")
def api_hint() -> Any:
    tubes = json_to_tubes(_body().get("tubes"))
    hint = find_best_move(tubes, CAPACITY)
    return jsonify({
        "ok": True,
        "hint": {"fromIndex": hint.from_index, "toIndex": hint.to_index} if hint else None,
        "deadlock": hint is None,
    })


@app.post("/api/check")
def api_check() -> Any:
    tubes = json_to_tubes(_body().get("tubes"))
    return jsonify({
        "ok": True,
        "won": check_win(tubes, CAPACITY),
        "deadlock": find_best_move(tubes, CAPACITY) is None,
    })


@app.get("/api/palette")
def api_palette() -> Any:
    theme = request.args.get("theme", "vibrant")
    try:
        colors = theme_colors(theme)
    except ValueError as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    return jsonify({"ok": True, "theme": theme, "colors": colors})


# ---------- Progress ----------

@app.get("/api/progress")
def api_progress_get() -> Any:
    level, settings = load_progress(DEFAULT_DB)
    return jsonify({"ok": True, "level": level, "settings": settings.to_json()})


@app.post("/api/progress")
def api_progress_post() -> Any:
    body = _body()
    try:
        level = int(body.get("level", 1))
        settings = Settings.from_json(body.get("settings"))
        save_progress(DEFAULT_DB, level, settings)
    except (TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    return jsonify({"ok": True, "level": level, "settings": settings.to_json()})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
