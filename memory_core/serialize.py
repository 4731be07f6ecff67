from __future__ import annotations

import random
from typing import Any, Dict, Optional

from .board import Board, ROWS, COLS
from .engine import Game
from .state import Player, Status


def board_to_json(b: Board) -> Dict[str, Any]:
    return {"width": int(b.width), "height": int(b.height), "grid": [int(t) for t in b.grid]}


def board_from_json(obj: Dict[str, Any]) -> Board:
    try:
        board = Board(width=int(obj["width"]), height=int(obj["height"]), grid=tuple(int(x) for x in obj["grid"]))
    except (KeyError, TypeError) as exc:
        raise ValueError(f"malformed board: {exc}") from exc
    if (board.height, board.width) != (ROWS, COLS):
        raise ValueError(f"board must be {ROWS}x{COLS}, got {board.height}x{board.width}")
    if not board.is_well_formed():
        raise ValueError("board must hold every tile value exactly twice")
    return board


def game_to_json(game: Game) -> Dict[str, Any]:
    """JSON-ready snapshot of a match, for a UI or transport layer to poll."""
    return {
        "board": board_to_json(game.board),
        "discovered": [[int(r), int(c)] for (r, c) in game.discovered_coords()],
        "status": game.status.value,
        "turn": game.turn.value,
        "undiscovered": game.undiscovered(),
        "movesPlayed": game.moves_played,
    }


def json_to_game(obj: Dict[str, Any], rng: Optional[random.Random] = None) -> Game:
    """Rebuilds a Game from game_to_json output. Raises ValueError on inconsistent input."""
    board = board_from_json(obj.get("board") or {})
    try:
        discovered = [(int(r), int(c)) for r, c in obj.get("discovered", [])]
        status = Status(obj["status"])
        turn = Player(obj["turn"])
        moves_played = obj.get("movesPlayed")
        if moves_played is not None:
            moves_played = int(moves_played)
        undiscovered = int(obj["undiscovered"]) if "undiscovered" in obj else None
    except (KeyError, TypeError) as exc:
        raise ValueError(f"malformed game snapshot: {exc}") from exc
    game = Game.from_snapshot(
        board,
        discovered,
        turn=turn,
        status=status,
        moves_played=moves_played,
        rng=rng,
    )
    if undiscovered is not None and undiscovered != game.undiscovered():
        raise ValueError(f"undiscovered count {undiscovered} does not match the discovered tiles")
    return game
