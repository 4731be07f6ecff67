from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .board import Board, Coord
from .state import Player


class MoveKind(Enum):
    MATCHED = 'matched'
    MISSED = 'missed'
    ALREADY_DISCOVERED = 'already_discovered'
    SAME_POSITION = 'same_position'
    OUT_OF_RANGE = 'out_of_range'
    GAME_OVER = 'game_over'


@dataclass(frozen=True)
class MoveResult:
    """What happened to a single play() call."""
    kind: MoveKind
    first: Coord
    second: Coord
    player: Player  # the player who attempted the move
    winner: Optional[Player] = None

    @property
    def accepted(self) -> bool:
        return self.kind in (MoveKind.MATCHED, MoveKind.MISSED)

    @property
    def matched(self) -> bool:
        return self.kind is MoveKind.MATCHED


def classify_move(board: Board, discovered: Sequence[bool], first: Coord, second: Coord) -> MoveKind:
    """
    Decides how a pair of picks resolves without touching any state.
    Checks run in order: bounds, identical picks, already-discovered tiles, tile comparison.
    """
    if not board.in_bounds(*first) or not board.in_bounds(*second):
        return MoveKind.OUT_OF_RANGE
    if first == second:
        return MoveKind.SAME_POSITION
    if discovered[board.index(*first)] or discovered[board.index(*second)]:
        return MoveKind.ALREADY_DISCOVERED
    if board.at(*first) == board.at(*second):
        return MoveKind.MATCHED
    return MoveKind.MISSED
