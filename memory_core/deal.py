from __future__ import annotations

import random
from typing import Optional, Tuple

from .board import Board, Tile, ROWS, COLS, PAIRS
from .config import default_seed


def canonical_grid() -> Tuple[Tile, ...]:
    """Rows 0-4 hold 0..49 in order and rows 5-9 repeat them, so (r, c) pairs with (r + 5, c)."""
    half = PAIRS // COLS
    return tuple((i // COLS % half) * COLS + (i % COLS) for i in range(ROWS * COLS))


def canonical_board() -> Board:
    return Board(width=COLS, height=ROWS, grid=canonical_grid())


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Creates the RNG used for shuffling, falling back to MEMORY_SEED when no seed is given."""
    if seed is None:
        seed = default_seed()
    return random.Random(seed)


def shuffle_board(board: Board, rng: random.Random) -> Board:
    """Returns a board with the same tiles in a uniformly random order."""
    tiles = list(board.grid)
    rng.shuffle(tiles)
    return Board(width=board.width, height=board.height, grid=tuple(tiles))


def deal_board(seed: Optional[int] = None) -> Board:
    """Creates a shuffled 10x10 board with 50 pairs."""
    return shuffle_board(canonical_board(), make_rng(seed))
