"""
Memory game core Python package.

Rules engine for a two-player tile-matching game on a 10x10 board of 50 pairs.
Modules:
- board.py: Board, Coord, Tile, OutOfRangeError
- deal.py: canonical layout and shuffling
- state.py: Player, Status
- moves.py: MoveKind, MoveResult, classify_move
- engine.py: Game, new_game
- serialize.py: JSON-ready snapshots
- config.py: environment settings and logging setup
"""
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
