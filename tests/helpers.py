from game import COLS, REQUIRED_TILES, ROWS, Tile, WireType


def make_tiles(rotations=None, wire_types=None, default_rotation=45.0, default_type=WireType.STRAIGHT, selected=None):
    """Builds a full grid; cells not listed get an off-axis rotation that matches nothing."""
    rotations = rotations or {}
    wire_types = wire_types or {}
    tiles = []
    for r in range(ROWS):
        for c in range(COLS):
            tiles.append(Tile(
                id=r * COLS + c,
                row=r,
                col=c,
                wire_type=wire_types.get((r, c), default_type),
                rotation=rotations.get((r, c), default_rotation),
                selected=(selected == (r, c)),
            ))
    return tuple(tiles)


def first_required(n):
    """The first ``n`` entries of the required table, set to their targets."""
    return dict(list(REQUIRED_TILES.items())[:n])
