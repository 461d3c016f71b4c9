from __future__ import annotations

import math
from typing import Any, Dict, List, Optional

from .completion import THRESHOLD_MODE
from .session import Phase, PuzzleSession, SessionSnapshot
from .targets import COLS, ROWS
from .tile import Tile, WireType


def _rotation_to_json(rotation: float) -> Any:
    # Whole angles travel as ints so clients can compare them to targets.
    if float(rotation).is_integer():
        return int(rotation)
    return float(rotation)


def tile_to_json(t: Tile, correct: Optional[bool] = None) -> Dict[str, Any]:
    return {
        "id": int(t.id),
        "row": int(t.row),
        "col": int(t.col),
        "wireType": t.wire_type.value,
        "rotation": _rotation_to_json(t.rotation),
        "selected": bool(t.selected),
        "correct": correct,
    }


def _int_field(obj: Dict[str, Any], name: str, default: Optional[int] = None) -> int:
    value = obj.get(name, default) if default is not None else obj[name]
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return value


def _bool_field(obj: Dict[str, Any], name: str, default: bool) -> bool:
    value = obj.get(name, default)
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be true or false, got {value!r}")
    return value


def tile_from_json(obj: Dict[str, Any]) -> Tile:
    rotation = obj["rotation"]
    if isinstance(rotation, bool) or not isinstance(rotation, (int, float)):
        raise ValueError(f"rotation must be a number, got {rotation!r}")
    if not math.isfinite(rotation):
        raise ValueError(f"rotation must be finite, got {rotation!r}")
    return Tile(
        id=_int_field(obj, "id"),
        row=_int_field(obj, "row"),
        col=_int_field(obj, "col"),
        wire_type=WireType(str(obj["wireType"])),
        rotation=rotation,
        selected=_bool_field(obj, "selected", False),
    )


def snapshot_to_json(s: SessionSnapshot) -> Dict[str, Any]:
    verdicts = s.verdicts()
    return {
        "rows": int(s.rows),
        "cols": int(s.cols),
        "attempts": int(s.attempts),
        "status": s.status.value,
        "phase": s.phase.value,
        "quantize": bool(s.quantize),
        "mode": s.mode,
        "correctCount": int(s.correct_count),
        "threshold": int(s.threshold),
        "tiles": [tile_to_json(t, verdicts[t.id]) for t in s.tiles],
    }


def state_to_json(session: PuzzleSession) -> Dict[str, Any]:
    return snapshot_to_json(session.snapshot())


def json_to_state(obj: Dict[str, Any], seed: Optional[int] = None) -> PuzzleSession:
    """
    Rebuilds a session from JSON state.

    Status and correctness fields are ignored on input and re-derived.
    Raises ValueError (or KeyError/TypeError for missing or mistyped fields).
    """
    if not isinstance(obj, dict):
        raise ValueError("state must be an object")
    rows = int(obj.get("rows", ROWS))
    cols = int(obj.get("cols", COLS))
    if (rows, cols) != (ROWS, COLS):
        raise ValueError(f"grid must be {ROWS}x{COLS}, got {rows}x{cols}")
    tiles_in = obj["tiles"]
    if not isinstance(tiles_in, list):
        raise ValueError("tiles must be a list")
    tiles: List[Tile] = [tile_from_json(t) for t in tiles_in]
    phase_in = obj.get("phase")
    phase = Phase(phase_in) if phase_in is not None else None
    return PuzzleSession.from_tiles(
        tiles,
        attempts=_int_field(obj, "attempts", 0),
        phase=phase,
        quantize=_bool_field(obj, "quantize", False),
        mode=str(obj.get("mode", THRESHOLD_MODE)),
        seed=seed,
    )
