from __future__ import annotations

# Facade module that re-exports the memory game core.
# Single-responsibility modules live under memory_core/*.

from memory_core.board import Board, Coord, Tile, OutOfRangeError, ROWS, COLS, PAIRS
from memory_core.state import Player, Status, to_play, wins
from memory_core.deal import canonical_grid, canonical_board, make_rng, shuffle_board, deal_board
from memory_core.moves import MoveKind, MoveResult, classify_move
from memory_core.engine import Game, new_game
from memory_core.serialize import board_to_json, board_from_json, game_to_json, json_to_game
from memory_core.config import configure_logging, default_seed, debug_enabled, log_level

__all__ = [
    'Board', 'Coord', 'Tile', 'OutOfRangeError', 'ROWS', 'COLS', 'PAIRS',
    'Player', 'Status', 'to_play', 'wins',
    'canonical_grid', 'canonical_board', 'make_rng', 'shuffle_board', 'deal_board',
    'MoveKind', 'MoveResult', 'classify_move',
    'Game', 'new_game',
    'board_to_json', 'board_from_json', 'game_to_json', 'json_to_game',
    'configure_logging', 'default_seed', 'debug_enabled', 'log_level',
]
