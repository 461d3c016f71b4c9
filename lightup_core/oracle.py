from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional

from .targets import REQUIRED_TILES
from .tile import Coord, Tile


def target_rotation(tile: Tile, table: Mapping[Coord, int] = REQUIRED_TILES) -> Optional[int]:
    return table.get(tile.position)


def is_correct(tile: Tile, table: Mapping[Coord, int] = REQUIRED_TILES) -> Optional[bool]:
    """
    Verdict for one tile.

    Returns None when the tile's position is not part of the circuit (not
    applicable), otherwise whether its rotation equals the target exactly.
    """
    target = target_rotation(tile, table)
    if target is None:
        return None
    return tile.rotation == target


def correct_count(tiles: Iterable[Tile], table: Mapping[Coord, int] = REQUIRED_TILES) -> int:
    return sum(1 for tile in tiles if is_correct(tile, table) is True)


def verdicts(tiles: Iterable[Tile], table: Mapping[Coord, int] = REQUIRED_TILES) -> Dict[int, Optional[bool]]:
    """Maps tile id to its verdict, for renderers that highlight correct tiles."""
    return {tile.id: is_correct(tile, table) for tile in tiles}
