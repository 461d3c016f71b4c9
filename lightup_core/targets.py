from __future__ import annotations

from typing import Dict, Tuple

from .tile import Coord

ROWS = 4
COLS = 4

# Rotation that puts each tile of the intended loop into place.
REQUIRED_TILES: Dict[Coord, int] = {
    (0, 1): 0,    # horizontal
    (0, 2): 0,    # horizontal
    (0, 3): 90,   # corner down
    (1, 3): 0,    # vertical
    (2, 3): 180,  # corner left
    (2, 2): 0,    # horizontal
    (2, 1): 0,    # horizontal
    (2, 0): 90,   # corner up
    (1, 0): 0,    # vertical
    (1, 1): 0,    # corner right
}

# 8 of the 10 required tiles is enough to light the bulb.
COMPLETION_THRESHOLD = 8

# Battery sits left of the top-left cell, bulb right of the top-right cell.
# Each entry is (cell, side of that cell facing the terminal).
BATTERY: Tuple[Coord, str] = ((0, 0), 'W')
BULB: Tuple[Coord, str] = ((0, COLS - 1), 'E')

CARDINAL_ANGLES = (0, 90, 180, 270)
