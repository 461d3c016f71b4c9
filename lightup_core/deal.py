from __future__ import annotations

import random
from typing import Optional, Tuple

from .targets import CARDINAL_ANGLES, COLS, ROWS
from .tile import Angle, Tile, WireType


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Creates the generator threaded through dealing and reset."""
    return random.Random(seed)


def random_rotation(rng: random.Random, quantize: bool = False) -> Angle:
    """
    Draws a starting angle.

    Unquantized angles come from the continuous range [0, 360), so a tile only
    lines up with a target after rotating if it happened to start on a multiple
    of 90. Quantized angles are one of the four cardinal directions.
    """
    if quantize:
        return rng.choice(CARDINAL_ANGLES)
    return rng.random() * 360


def deal_tiles(
    rng: random.Random,
    rows: int = ROWS,
    cols: int = COLS,
    quantize: bool = False,
) -> Tuple[Tile, ...]:
    """Deals a full grid of random tiles in row-major order."""
    tiles = []
    for i in range(rows * cols):
        wire_type = WireType.STRAIGHT if rng.random() > 0.5 else WireType.CORNER
        tiles.append(Tile(
            id=i,
            row=i // cols,
            col=i % cols,
            wire_type=wire_type,
            rotation=random_rotation(rng, quantize),
        ))
    return tuple(tiles)
