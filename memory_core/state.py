from __future__ import annotations

from enum import Enum


class Player(Enum):
    LEFT = 'left'
    RIGHT = 'right'

    def other(self) -> 'Player':
        return Player.RIGHT if self is Player.LEFT else Player.LEFT


class Status(Enum):
    """Outward-facing summary of whose turn it is or how the match ended."""
    LEFT_TO_PLAY = 'left_to_play'
    RIGHT_TO_PLAY = 'right_to_play'
    ILLEGAL_MOVE = 'illegal_move'
    LEFT_WINS = 'left_wins'
    RIGHT_WINS = 'right_wins'

    @property
    def is_terminal(self) -> bool:
        return self in (Status.LEFT_WINS, Status.RIGHT_WINS)


def to_play(player: Player) -> Status:
    return Status.LEFT_TO_PLAY if player is Player.LEFT else Status.RIGHT_TO_PLAY


def wins(player: Player) -> Status:
    return Status.LEFT_WINS if player is Player.LEFT else Status.RIGHT_WINS
