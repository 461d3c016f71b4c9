from __future__ import annotations

import os
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request

from game import (
    BATTERY,
    BULB,
    COLS,
    COMPLETION_THRESHOLD,
    MODES,
    REQUIRED_TILES,
    ROWS,
    PuzzleSession,
    json_to_state,
    state_to_json,
)
from lightup_core.settings import debug, default_mode, default_quantize

app = Flask(__name__)


def _seed_from(body: Dict[str, Any]) -> Optional[int]:
    seed = body.get("seed")
    if seed is None:
        return None
    if isinstance(seed, bool):
        raise ValueError("seed must be an integer")
    return int(seed)


def _load_state(body: Dict[str, Any]) -> PuzzleSession:
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        raise ValueError("state required")
    return json_to_state(s_in, seed=_seed_from(body))


def _bad_request(message: str) -> Any:
    debug("api", message)
    return jsonify({"ok": False, "error": message}), 400


@app.get("/api/config")
def api_config() -> Any:
    return jsonify({
        "ok": True,
        "rows": ROWS,
        "cols": COLS,
        "threshold": COMPLETION_THRESHOLD,
        "required": [{"row": r, "col": c, "rotation": angle} for (r, c), angle in REQUIRED_TILES.items()],
        "battery": {"row": BATTERY[0][0], "col": BATTERY[0][1], "side": BATTERY[1]},
        "bulb": {"row": BULB[0][0], "col": BULB[0][1], "side": BULB[1]},
        "modes": list(MODES),
        "defaults": {"quantize": default_quantize(), "mode": default_mode()},
    })


@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        seed = _seed_from(body)
        quantize = body.get("quantize", default_quantize())
        if not isinstance(quantize, bool):
            raise ValueError(f"quantize must be true or false, got {quantize!r}")
        mode = str(body.get("mode", default_mode()))
        session = PuzzleSession(seed=seed, quantize=quantize, mode=mode)
    except (TypeError, ValueError) as e:
        return _bad_request(f"bad request: {e}")
    return jsonify({"ok": True, "state": state_to_json(session)})


@app.post("/api/rotate")
def api_rotate() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        session = _load_state(body)
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(f"bad state: {e}")
    tile_id = body.get("tileId")
    if isinstance(tile_id, bool) or not isinstance(tile_id, int):
        return _bad_request("tileId must be an integer")
    status = session.rotate(tile_id)
    return jsonify({
        "ok": True,
        "state": state_to_json(session),
        "status": status.value,
        "justCompleted": session.just_completed,
    })


@app.post("/api/reset")
def api_reset() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        session = _load_state(body)
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(f"bad state: {e}")
    # Without a seed the client state carries no generator, so draw a fresh one.
    session.reset(seed=_seed_from(body))
    return jsonify({"ok": True, "state": state_to_json(session)})


@app.post("/api/check")
def api_check() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        session = _load_state(body)
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(f"bad state: {e}")
    snap = session.snapshot()
    return jsonify({
        "ok": True,
        "complete": session.is_complete(),
        "correctCount": snap.correct_count,
        "threshold": snap.threshold,
        "verdicts": {str(k): v for k, v in snap.verdicts().items()},
    })


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug_mode = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    port = int(os.getenv("PORT", "5000"))
    app.run(host="0.0.0.0", port=port, debug=debug_mode)
