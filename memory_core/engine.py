from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional

from .board import Board, Coord, Tile, ROWS, COLS
from .deal import canonical_board, make_rng, shuffle_board
from .moves import MoveKind, MoveResult, classify_move
from .state import Player, Status, to_play, wins

logger = logging.getLogger(__name__)


class Game:
    """
    One match of the memory game.

    The board starts in its canonical mirrored layout so tests can predict every pair;
    call shuffle() once before the first move for a real match. Moves are applied with
    play(), which returns a MoveResult and keeps `status` current for callers that poll.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else make_rng()
        self._board = canonical_board()
        self._discovered: List[bool] = [False] * len(self._board.grid)
        self._undiscovered = len(self._board.grid)
        self._turn = Player.LEFT
        self._status = Status.LEFT_TO_PLAY
        self._moves_played = 0

    @classmethod
    def from_snapshot(
        cls,
        board: Board,
        discovered: Iterable[Coord],
        turn: Player,
        status: Status,
        moves_played: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> 'Game':
        """Rebuilds a match mid-play. Raises ValueError if the parts cannot belong to one game."""
        if (board.height, board.width) != (ROWS, COLS):
            raise ValueError(f'board must be {ROWS}x{COLS}, got {board.height}x{board.width}')
        if not board.is_well_formed():
            raise ValueError('board must hold every tile value exactly twice')
        game = cls(rng=rng)
        game._board = board
        game._discovered = [False] * len(board.grid)
        game._undiscovered = len(board.grid)
        for coord in set(discovered):
            if not board.in_bounds(*coord):
                raise ValueError(f'discovered position {coord} is off the board')
            game._reveal(coord)
        for coord in game.discovered_coords():
            if not game._discovered[board.index(*board.pair_of(*coord))]:
                raise ValueError(f'discovered position {coord} is missing its pair')
        if status.is_terminal != (game._undiscovered == 0):
            raise ValueError(f'status {status.value} does not fit {game._undiscovered} undiscovered tiles')
        if status.is_terminal and status is not wins(turn):
            raise ValueError(f'status {status.value} does not name {turn.value} as winner')
        if status in (Status.LEFT_TO_PLAY, Status.RIGHT_TO_PLAY) and status is not to_play(turn):
            raise ValueError(f'status {status.value} disagrees with turn {turn.value}')
        game._turn = turn
        game._status = status
        pairs_found = (len(board.grid) - game._undiscovered) // 2
        if moves_played is None:
            moves_played = pairs_found
        try:
            moves_played = int(moves_played)
        except TypeError as exc:
            raise ValueError(f'moves played must be an integer: {exc}') from exc
        if moves_played < pairs_found:
            raise ValueError(f'{moves_played} moves cannot have found {pairs_found} pairs')
        game._moves_played = moves_played
        return game

    @property
    def board(self) -> Board:
        return self._board

    @property
    def status(self) -> Status:
        return self._status

    @property
    def turn(self) -> Player:
        """The player entitled to move next (kept through an ILLEGAL_MOVE status)."""
        return self._turn

    @property
    def is_over(self) -> bool:
        return self._status.is_terminal

    @property
    def winner(self) -> Optional[Player]:
        if self._status is Status.LEFT_WINS:
            return Player.LEFT
        if self._status is Status.RIGHT_WINS:
            return Player.RIGHT
        return None

    @property
    def moves_played(self) -> int:
        return self._moves_played

    def shuffle(self) -> None:
        """Randomly permutes the tiles. Only meaningful before the first move."""
        if self._moves_played:
            logger.warning('shuffling after %d move(s) have been played', self._moves_played)
        self._board = shuffle_board(self._board, self._rng)

    def tile_at(self, row: int, col: int) -> Tile:
        return self._board.at(row, col)

    def is_discovered(self, row: int, col: int) -> bool:
        return self._discovered[self._board.index(row, col)]

    def undiscovered(self) -> int:
        return self._undiscovered

    def discovered_coords(self) -> List[Coord]:
        return [coord for coord in self._board.coords() if self._discovered[self._board.index(*coord)]]

    def undiscovered_coords(self) -> List[Coord]:
        return [coord for coord in self._board.coords() if not self._discovered[self._board.index(*coord)]]

    def play(self, row0: int, col0: int, row1: int, col1: int) -> MoveResult:
        """
        Turns over (row0, col0) and (row1, col1) for the current player.

        A match removes both tiles and the same player keeps the turn; the match that
        clears the board wins the game for that player. A miss passes the turn.
        Rejected moves leave the board, mask and turn untouched and set ILLEGAL_MOVE.
        """
        first, second = (row0, col0), (row1, col1)
        player = self._turn
        if self._status.is_terminal:
            logger.warning('move %s-%s rejected: game already won by %s', first, second, player.value)
            return MoveResult(MoveKind.GAME_OVER, first, second, player, winner=self.winner)

        kind = classify_move(self._board, self._discovered, first, second)
        if kind not in (MoveKind.MATCHED, MoveKind.MISSED):
            logger.warning('move %s-%s by %s rejected: %s', first, second, player.value, kind.value)
            self._status = Status.ILLEGAL_MOVE
            return MoveResult(kind, first, second, player)

        self._moves_played += 1
        if kind is MoveKind.MISSED:
            self._turn = player.other()
            self._status = to_play(self._turn)
            logger.debug('%s missed %s-%s', player.value, first, second)
            return MoveResult(kind, first, second, player)

        self._reveal(first)
        self._reveal(second)
        logger.debug('%s matched tile %d at %s-%s, %d left',
                     player.value, self._board.at(*first), first, second, self._undiscovered)
        if self._undiscovered == 0:
            self._status = wins(player)
            logger.info('%s wins after %d moves', player.value, self._moves_played)
            return MoveResult(kind, first, second, player, winner=player)
        self._status = to_play(player)
        return MoveResult(kind, first, second, player)

    def check_invariants(self) -> None:
        """Raises RuntimeError if the cached counter or status has drifted from the mask."""
        if not self._board.is_well_formed():
            raise RuntimeError('board no longer holds every tile exactly twice')
        expected = len(self._discovered) - sum(self._discovered)
        if self._undiscovered != expected:
            raise RuntimeError(f'undiscovered counter {self._undiscovered} != {expected} from mask')
        if self._undiscovered % 2:
            raise RuntimeError(f'undiscovered counter {self._undiscovered} is odd')
        if self._status.is_terminal != (self._undiscovered == 0):
            raise RuntimeError(f'status {self._status.value} with {self._undiscovered} undiscovered')

    def _reveal(self, coord: Coord) -> None:
        idx = self._board.index(*coord)
        if not self._discovered[idx]:
            self._discovered[idx] = True
            self._undiscovered -= 1


def new_game(seed: Optional[int] = None, shuffle: bool = True) -> Game:
    """Creates a match ready to play, shuffled unless shuffle=False."""
    game = Game(rng=make_rng(seed))
    if shuffle:
        game.shuffle()
    return game
