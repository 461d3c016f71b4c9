from __future__ import annotations

import random
from typing import Iterable, Iterator, List, Optional, Tuple

from .deal import deal_tiles
from .targets import COLS, ROWS
from .tile import Coord, Tile, WireType


class TileNotFound(LookupError):
    """Raised when a tile id falls outside the grid's id range."""


# Glyphs by (wire type, quarter turns); index 4 is used for off-axis angles.
_GLYPHS = {
    WireType.STRAIGHT: ('─', '│', '─', '│', '~'),
    WireType.CORNER: ('┘', '└', '┌', '┐', '~'),
}


class TileGrid:
    """Authoritative store of tile state for one puzzle grid."""

    def __init__(self, tiles: Tuple[Tile, ...], rows: int = ROWS, cols: int = COLS) -> None:
        self.rows = rows
        self.cols = cols
        self._tiles = tiles

    @classmethod
    def initialize(
        cls,
        rng: random.Random,
        rows: int = ROWS,
        cols: int = COLS,
        quantize: bool = False,
    ) -> 'TileGrid':
        """Deals a fresh grid from ``rng``."""
        return cls(deal_tiles(rng, rows, cols, quantize), rows, cols)

    @classmethod
    def from_tiles(cls, tiles: Iterable[Tile], rows: int = ROWS, cols: int = COLS) -> 'TileGrid':
        """Builds a grid from existing tiles, checking they cover every cell exactly once."""
        ordered = tuple(sorted(tiles, key=lambda t: t.id))
        if len(ordered) != rows * cols:
            raise ValueError(f'expected {rows * cols} tiles, got {len(ordered)}')
        for i, tile in enumerate(ordered):
            if tile.id != i:
                raise ValueError(f'tile ids must be 0..{rows * cols - 1}, found {tile.id}')
            if tile.position != (i // cols, i % cols):
                raise ValueError(f'tile {tile.id} is at {tile.position}, expected {(i // cols, i % cols)}')
            if not 0 <= tile.rotation < 360:
                raise ValueError(f'tile {tile.id} rotation {tile.rotation} outside [0, 360)')
        return cls(ordered, rows, cols)

    @property
    def tiles(self) -> Tuple[Tile, ...]:
        return self._tiles

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    def coords(self) -> Iterable[Coord]:
        for r in range(self.rows):
            for c in range(self.cols):
                yield (r, c)

    def get_tile(self, tile_id: int) -> Tile:
        if not 0 <= tile_id < len(self._tiles):
            raise TileNotFound(f'no tile with id {tile_id}')
        return self._tiles[tile_id]

    def at(self, r: int, c: int) -> Tile:
        return self.get_tile(r * self.cols + c)

    def find(self, tile_id: int) -> Optional[Tile]:
        """Equality lookup; ``None`` when no tile carries ``tile_id``."""
        for tile in self._tiles:
            if tile.id == tile_id:
                return tile
        return None

    def replace_all(self, tiles: Tuple[Tile, ...]) -> None:
        # Single assignment so readers see either the old or the new tuple.
        self._tiles = tiles

    def pretty(self) -> str:
        """Renders the grid with box-drawing glyphs; the selected tile is bracketed."""
        lines: List[str] = []
        for r in range(self.rows):
            row: List[str] = []
            for c in range(self.cols):
                tile = self.at(r, c)
                if tile.rotation % 90 == 0:
                    glyph = _GLYPHS[tile.wire_type][int(tile.rotation // 90)]
                else:
                    glyph = _GLYPHS[tile.wire_type][4]
                row.append(f'[{glyph}]' if tile.selected else f' {glyph} ')
            lines.append(''.join(row))
        return '\n'.join(lines)
