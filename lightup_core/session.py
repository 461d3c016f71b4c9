from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Optional, Tuple

from .completion import THRESHOLD_MODE, check_mode, check_threshold, is_complete
from .deal import make_rng
from .grid import TileGrid
from .oracle import correct_count, verdicts
from .rotation import rotate as rotate_tile
from .settings import debug
from .targets import COLS, COMPLETION_THRESHOLD, ROWS
from .tile import Tile


class SessionStatus(Enum):
    IN_PROGRESS = 'in_progress'
    COMPLETE = 'complete'


class Phase(Enum):
    """Display state of a session; COMPLETE stays until reset."""
    SETUP = 'setup'
    PLAYING = 'playing'
    COMPLETE = 'complete'


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of a session handed to renderers."""
    tiles: Tuple[Tile, ...]
    attempts: int
    status: SessionStatus
    phase: Phase
    correct_count: int
    threshold: int
    quantize: bool
    mode: str
    rows: int = ROWS
    cols: int = COLS

    def verdicts(self) -> Dict[int, Optional[bool]]:
        return verdicts(self.tiles)


class PuzzleSession:
    """One playable grid, from randomization through completion and reset."""

    def __init__(
        self,
        seed: Optional[int] = None,
        quantize: bool = False,
        mode: str = THRESHOLD_MODE,
        threshold: int = COMPLETION_THRESHOLD,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.quantize = quantize
        self.mode = check_mode(mode)
        self.threshold = check_threshold(threshold)
        self.rng = rng if rng is not None else make_rng(seed)
        self.attempts = 0
        self.just_completed = False
        self.phase = Phase.SETUP
        self.grid = self._deal()
        self.phase = Phase.PLAYING
        debug('session', f"new session quantize={quantize} mode={mode}")

    @classmethod
    def from_tiles(
        cls,
        tiles: Iterable[Tile],
        attempts: int = 0,
        phase: Optional[Phase] = None,
        quantize: bool = False,
        mode: str = THRESHOLD_MODE,
        threshold: int = COMPLETION_THRESHOLD,
        seed: Optional[int] = None,
    ) -> 'PuzzleSession':
        """Rebuilds a session from existing tiles (e.g. state sent back by a client)."""
        if attempts < 0:
            raise ValueError(f'attempts must be non-negative, got {attempts}')
        if phase is Phase.SETUP:
            raise ValueError('cannot resume a session that is still being set up')
        obj = object.__new__(cls)
        obj.quantize = quantize
        obj.mode = check_mode(mode)
        obj.threshold = check_threshold(threshold)
        obj.rng = make_rng(seed)
        obj.attempts = attempts
        obj.just_completed = False
        obj.grid = TileGrid.from_tiles(tiles, ROWS, COLS)
        if phase is None:
            phase = Phase.COMPLETE if obj.is_complete() else Phase.PLAYING
        obj.phase = phase
        return obj

    # -- queries --------------------------------------------------------------

    @property
    def tiles(self) -> Tuple[Tile, ...]:
        return self.grid.tiles

    def get_tile(self, tile_id: int) -> Tile:
        return self.grid.get_tile(tile_id)

    def is_complete(self) -> bool:
        return is_complete(self.grid.tiles, self.threshold, self.mode)

    @property
    def status(self) -> SessionStatus:
        return SessionStatus.COMPLETE if self.is_complete() else SessionStatus.IN_PROGRESS

    def correct_count(self) -> int:
        return correct_count(self.grid.tiles)

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            tiles=self.grid.tiles,
            attempts=self.attempts,
            status=self.status,
            phase=self.phase,
            correct_count=self.correct_count(),
            threshold=self.threshold,
            quantize=self.quantize,
            mode=self.mode,
        )

    # -- commands -------------------------------------------------------------

    def rotate(self, tile_id: int) -> SessionStatus:
        return rotate_tile(self, tile_id)

    def reset(self, seed: Optional[int] = None) -> SessionStatus:
        """Re-deals the grid and starts over with zero attempts."""
        if seed is not None:
            self.rng = make_rng(seed)
        self.phase = Phase.SETUP
        self.grid = self._deal()
        self.attempts = 0
        self.just_completed = False
        self.phase = Phase.PLAYING
        debug('session', 'reset')
        return self.status

    def refresh(self) -> SessionStatus:
        """Re-derives status after a mutation and advances the phase on completion."""
        status = self.status
        if status is SessionStatus.COMPLETE and self.phase is Phase.PLAYING:
            self.phase = Phase.COMPLETE
            self.just_completed = True
            debug('session', f"circuit complete after {self.attempts} rotations")
        return status

    # -- helpers --------------------------------------------------------------

    def _deal(self) -> TileGrid:
        # A fresh deal never starts out solved.
        while True:
            grid = TileGrid.initialize(self.rng, ROWS, COLS, self.quantize)
            if not is_complete(grid.tiles, self.threshold, self.mode):
                return grid
