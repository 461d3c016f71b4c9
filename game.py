from __future__ import annotations

# Facade module that re-exports the Village Light-Up core.
# The Flask app and the tests import from here; single-responsibility
# modules live under lightup_core/*.

from lightup_core.tile import Angle, Coord, Tile, WireType
from lightup_core.targets import (
    BATTERY,
    BULB,
    CARDINAL_ANGLES,
    COLS,
    COMPLETION_THRESHOLD,
    REQUIRED_TILES,
    ROWS,
)
from lightup_core.deal import deal_tiles, make_rng, random_rotation
from lightup_core.grid import TileGrid, TileNotFound
from lightup_core.oracle import correct_count, is_correct, target_rotation, verdicts
from lightup_core.connectors import (
    BASE_CONNECTORS,
    find_circuit_path,
    neighbors,
    open_connectors,
    powered_cells,
    turn_clockwise,
)
from lightup_core.completion import MODES, PATH_MODE, THRESHOLD_MODE, check_mode, is_complete
from lightup_core.rotation import rotate
from lightup_core.session import Phase, PuzzleSession, SessionSnapshot, SessionStatus
from lightup_core.codec import json_to_state, snapshot_to_json, state_to_json, tile_from_json, tile_to_json


def main() -> None:
    # CLI driver delegated to lightup_core.cli
    from lightup_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
