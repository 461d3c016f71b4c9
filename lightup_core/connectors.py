from __future__ import annotations

from collections import deque
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

from .targets import BATTERY, BULB, COLS, ROWS
from .tile import Coord, Tile, WireType

Direction = str  # 'N', 'E', 'S', 'W'

DIRECTIONS: Tuple[Direction, ...] = ('N', 'E', 'S', 'W')
OFFSETS: Dict[Direction, Coord] = {'N': (-1, 0), 'E': (0, 1), 'S': (1, 0), 'W': (0, -1)}
OPPOSITE: Dict[Direction, Direction] = {'N': 'S', 'E': 'W', 'S': 'N', 'W': 'E'}

# Connector pairs at rotation 0.
BASE_CONNECTORS: Dict[WireType, Tuple[Direction, Direction]] = {
    WireType.STRAIGHT: ('W', 'E'),
    WireType.CORNER: ('W', 'N'),
}


def turn_clockwise(direction: Direction, quarter_turns: int) -> Direction:
    return DIRECTIONS[(DIRECTIONS.index(direction) + quarter_turns) % 4]


def open_connectors(tile: Tile) -> FrozenSet[Direction]:
    """
    Sides of the tile its wire reaches.

    A tile resting at an angle that is not a whole quarter turn touches no side.
    """
    if tile.rotation % 90 != 0:
        return frozenset()
    quarter_turns = int(tile.rotation // 90)
    return frozenset(turn_clockwise(d, quarter_turns) for d in BASE_CONNECTORS[tile.wire_type])


def neighbors(coord: Coord, rows: int = ROWS, cols: int = COLS) -> List[Tuple[Direction, Coord]]:
    """Orthogonal in-bounds neighbours of a cell, with the side they lie on."""
    r, c = coord
    out: List[Tuple[Direction, Coord]] = []
    for d in DIRECTIONS:
        dr, dc = OFFSETS[d]
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            out.append((d, (nr, nc)))
    return out


def find_circuit_path(
    tiles: Iterable[Tile],
    rows: int = ROWS,
    cols: int = COLS,
    source: Tuple[Coord, Direction] = BATTERY,
    sink: Tuple[Coord, Direction] = BULB,
) -> Optional[List[Coord]]:
    """
    Breadth-first search for a wire path from the battery to the bulb.

    The source cell must open towards the battery, every step must join two
    connectors facing each other, and the sink cell must open towards the bulb.
    Returns the cells along the path, or None when the circuit is broken.
    """
    by_pos: Dict[Coord, FrozenSet[Direction]] = {t.position: open_connectors(t) for t in tiles}
    start, entry = source
    end, exit_side = sink
    if entry not in by_pos.get(start, frozenset()):
        return None

    parent: Dict[Coord, Optional[Coord]] = {start: None}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        if current == end and exit_side in by_pos[current]:
            path: List[Coord] = []
            node: Optional[Coord] = current
            while node is not None:
                path.append(node)
                node = parent[node]
            return list(reversed(path))
        for d, nxt in neighbors(current, rows, cols):
            if nxt in parent:
                continue
            if d in by_pos[current] and OPPOSITE[d] in by_pos.get(nxt, frozenset()):
                parent[nxt] = current
                queue.append(nxt)
    return None


def powered_cells(
    tiles: Iterable[Tile],
    rows: int = ROWS,
    cols: int = COLS,
    source: Tuple[Coord, Direction] = BATTERY,
) -> Set[Coord]:
    """Cells reachable from the battery through joined connectors."""
    by_pos = {t.position: open_connectors(t) for t in tiles}
    start, entry = source
    if entry not in by_pos.get(start, frozenset()):
        return set()
    seen: Set[Coord] = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for d, nxt in neighbors(current, rows, cols):
            if nxt not in seen and d in by_pos[current] and OPPOSITE[d] in by_pos.get(nxt, frozenset()):
                seen.add(nxt)
                queue.append(nxt)
    return seen
