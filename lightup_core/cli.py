from __future__ import annotations

import argparse

from .completion import MODES
from .session import PuzzleSession, SessionStatus
from .settings import default_mode, default_quantize
from .targets import COMPLETION_THRESHOLD, REQUIRED_TILES


def _print_state(session: PuzzleSession) -> None:
    print(session.grid.pretty())
    print(f"Rotations: {session.attempts}   Correct tiles: {session.correct_count()}/{len(REQUIRED_TILES)}")


def main() -> None:
    parser = argparse.ArgumentParser(description='Village Light-Up circuit puzzle')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the deal')
    parser.add_argument('--quantize', action='store_true', default=default_quantize(),
                        help='Start every tile on a multiple of 90 degrees')
    parser.add_argument('--mode', choices=MODES, default=default_mode(),
                        help=f'threshold: {COMPLETION_THRESHOLD} required tiles in place; path: battery wired to bulb')
    parser.add_argument('--play', action='store_true', help='Rotate tiles interactively')
    args = parser.parse_args()

    session = PuzzleSession(seed=args.seed, quantize=args.quantize, mode=args.mode)
    print('Initial grid:')
    _print_state(session)
    if not args.play:
        print('\nCircuit complete.' if session.status is SessionStatus.COMPLETE else '\nCircuit broken.')
        return

    tile_count = len(session.tiles)
    while True:
        text = input(f'Tile id to rotate (0-{tile_count - 1}), r to reset, q to quit: ').strip().lower()
        if text == 'q':
            return
        if text == 'r':
            session.reset()
            print('New grid:')
            _print_state(session)
            continue
        try:
            tile_id = int(text)
        except ValueError:
            print('Could not parse. Try again.')
            continue
        if not 0 <= tile_id < tile_count:
            print('No such tile. Try again.')
            continue
        session.rotate(tile_id)
        _print_state(session)
        if session.just_completed:
            print(f'Circuit complete! The village lights up after {session.attempts} rotations.')
