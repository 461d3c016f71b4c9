from __future__ import annotations

from typing import Iterable, Mapping

from .connectors import find_circuit_path
from .oracle import correct_count
from .targets import COLS, COMPLETION_THRESHOLD, REQUIRED_TILES, ROWS
from .tile import Coord, Tile

THRESHOLD_MODE = 'threshold'
PATH_MODE = 'path'
MODES = (THRESHOLD_MODE, PATH_MODE)


def check_mode(mode: str) -> str:
    if mode not in MODES:
        raise ValueError(f"unknown completion mode {mode!r}; expected one of {', '.join(MODES)}")
    return mode


def check_threshold(threshold: int, table: Mapping[Coord, int] = REQUIRED_TILES) -> int:
    """A threshold of zero would count every grid as solved."""
    if isinstance(threshold, bool) or not isinstance(threshold, int) or not 1 <= threshold <= len(table):
        raise ValueError(f"threshold must be an integer in 1..{len(table)}, got {threshold!r}")
    return threshold


def is_complete(
    tiles: Iterable[Tile],
    threshold: int = COMPLETION_THRESHOLD,
    mode: str = THRESHOLD_MODE,
    table: Mapping[Coord, int] = REQUIRED_TILES,
    rows: int = ROWS,
    cols: int = COLS,
) -> bool:
    """
    Whether the circuit counts as closed.

    Threshold mode counts required tiles at their exact target angle and
    accepts the grid once ``threshold`` of them are in place, so two required
    tiles may still be wrong, and any other working layout is rejected.
    Path mode ignores the table and searches for an actual wire path from the
    battery to the bulb.
    """
    check_mode(mode)
    if mode == PATH_MODE:
        return find_circuit_path(tiles, rows, cols) is not None
    return correct_count(tiles, table) >= threshold
