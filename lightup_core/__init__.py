"""
Village Light-Up core Python package.

Pure-logic pieces of the circuit puzzle, kept apart from the Flask app and
the CLI so they can be tested on their own.
Modules:
- tile.py: Tile, WireType, Coord
- targets.py: grid constants and the required tile table
- grid.py: TileGrid
- oracle.py / completion.py / connectors.py: correctness and completion rules
- rotation.py / session.py: rotation actions and PuzzleSession
- codec.py / cli.py / settings.py: JSON state, terminal driver, env defaults
"""
