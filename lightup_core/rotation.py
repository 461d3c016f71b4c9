from __future__ import annotations

from typing import TYPE_CHECKING

from .settings import debug, debug_enabled

if TYPE_CHECKING:
    from .session import PuzzleSession, SessionStatus

QUARTER_TURN = 90


def rotate(session: 'PuzzleSession', tile_id: int) -> 'SessionStatus':
    """
    Turns one tile a quarter turn clockwise and returns the new status.

    An id that matches no tile leaves the session untouched, attempts included.
    """
    session.just_completed = False
    target = session.grid.find(tile_id)
    if target is None:
        debug('rotate', f"ignored unknown tile id {tile_id}")
        return session.status

    turned = target.rotated(QUARTER_TURN).with_selected(True)
    new_tiles = tuple(
        turned if tile.id == target.id else tile.with_selected(False)
        for tile in session.grid
    )
    session.grid.replace_all(new_tiles)
    session.attempts += 1
    status = session.refresh()
    if debug_enabled():
        debug('rotate', f"tile {target.id} -> {turned.rotation}, attempts={session.attempts}, status={status.value}")
    return status
