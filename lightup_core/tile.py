from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple, Union

Coord = Tuple[int, int]
Angle = Union[int, float]


class WireType(Enum):
    """Connector geometry of a tile."""
    STRAIGHT = "straight"  # opposite sides, West-East at 0 degrees
    CORNER = "corner"      # adjacent sides, West-North at 0 degrees


@dataclass(frozen=True)
class Tile:
    """A single grid cell holding a rotatable wire segment."""
    id: int
    row: int
    col: int
    wire_type: WireType
    rotation: Angle  # degrees, [0, 360)
    selected: bool = False

    @property
    def position(self) -> Coord:
        return (self.row, self.col)

    def rotated(self, step: int = 90) -> 'Tile':
        """Returns a copy turned clockwise by ``step`` degrees."""
        return replace(self, rotation=(self.rotation + step) % 360)

    def with_selected(self, selected: bool) -> 'Tile':
        if self.selected == selected:
            return self
        return replace(self, selected=selected)
