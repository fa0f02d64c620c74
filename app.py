from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request

from game import GameController, InvariantViolation, Model, Side, Tile

DEFAULT_SIZE = int(os.getenv("GAME2048_SIZE", "4"))
# Board sizes a client may ask for.
MIN_SIZE = 2
MAX_SIZE = 16

logger = logging.getLogger(__name__)

app = Flask(__name__)


# ---------- JSON helpers ----------

def model_to_json(m: Model) -> Dict[str, Any]:
    # game_over() first: it may raise max_score.
    over = m.game_over()
    return {
        "size": int(m.size()),
        "values": m.values(),
        "score": int(m.score()),
        "maxScore": int(m.max_score()),
        "gameOver": bool(over),
    }


def json_to_model(obj: Dict[str, Any]) -> Model:
    values = [[int(v) for v in row] for row in obj["values"]]
    _check_size(len(values))
    return Model.from_values(
        values,
        score=int(obj.get("score", 0)),
        max_score=int(obj.get("maxScore", 0)),
        game_over=bool(obj.get("gameOver", False)),
    )


def _check_size(size: int) -> int:
    if not MIN_SIZE <= size <= MAX_SIZE:
        raise ValueError(f"size must be between {MIN_SIZE} and {MAX_SIZE}, got {size}")
    return size


def _json_body() -> Optional[Dict[str, Any]]:
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    return body if isinstance(body, dict) else None


def _seed_from(body: Dict[str, Any]) -> Optional[int]:
    seed = body.get("seed", None)
    return None if seed is None else int(seed)


def _bad_request(error: str):
    return jsonify({"ok": False, "error": error}), 400


# ---------- Game API ----------

@app.get("/api/health")
def api_health() -> Any:
    return jsonify({"ok": True})


@app.post("/api/new")
def api_new() -> Any:
    body = _json_body()
    if body is None:
        return _bad_request("body must be a JSON object")
    try:
        size = _check_size(int(body.get("size", DEFAULT_SIZE)))
        controller = GameController(size=size, seed=_seed_from(body))
    except (TypeError, ValueError) as e:
        return _bad_request(f"bad size or seed: {e}")
    model = controller.new_game()
    return jsonify({"ok": True, "state": model_to_json(model)})


@app.post("/api/move")
def api_move() -> Any:
    body = _json_body()
    if body is None:
        return _bad_request("body must be a JSON object")
    try:
        side = Side.parse(body["side"])
    except (KeyError, ValueError) as e:
        return _bad_request(f"bad side: {e}")
    try:
        model = json_to_model(body["state"])
        seed = _seed_from(body)
    except (InvariantViolation, KeyError, TypeError, ValueError) as e:
        return _bad_request(f"bad state: {e}")
    controller = GameController(model=model, seed=seed)
    moved = controller.play(side)
    logger.info("move %s moved=%s score=%d", side.name, moved, model.score())
    return jsonify({"ok": True, "moved": moved, "state": model_to_json(model)})


@app.post("/api/add")
def api_add() -> Any:
    body = _json_body()
    if body is None:
        return _bad_request("body must be a JSON object")
    try:
        model = json_to_model(body["state"])
        t = body["tile"]
        tile = Tile.create(int(t["value"]), int(t["col"]), int(t["row"]))
    except (InvariantViolation, KeyError, TypeError, ValueError) as e:
        return _bad_request(f"bad request: {e}")
    try:
        model.add_tile(tile)
    except InvariantViolation as e:
        return _bad_request(str(e))
    return jsonify({"ok": True, "state": model_to_json(model)})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    from game2048_core.cli import configure_logging

    configure_logging()
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
