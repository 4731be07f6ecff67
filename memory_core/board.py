from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

Tile = int  # 0..49
Coord = Tuple[int, int]

ROWS = 10
COLS = 10
PAIRS = 50


class OutOfRangeError(ValueError):
    """Raised when a coordinate lies outside the board."""


@dataclass(frozen=True)
class Board:
    """The static tile layout of a match. Each tile value appears exactly twice."""
    width: int
    height: int
    grid: Tuple[Tile, ...]  # row-major, length == width * height

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.height and 0 <= c < self.width

    def index(self, r: int, c: int) -> int:
        """Calculates the 1D index for a given row and column."""
        if not self.in_bounds(r, c):
            raise OutOfRangeError(f'({r}, {c}) is outside a {self.height}x{self.width} board')
        return r * self.width + c

    def at(self, r: int, c: int) -> Tile:
        """Gets the tile value at a given row and column."""
        return self.grid[self.index(r, c)]

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates on the board in row-major order."""
        for r in range(self.height):
            for c in range(self.width):
                yield (r, c)

    def value_counts(self) -> Dict[Tile, int]:
        return dict(Counter(self.grid))

    def is_well_formed(self) -> bool:
        """True when the grid fills the board and holds every value 0..n-1 exactly twice."""
        if len(self.grid) != self.width * self.height or len(self.grid) % 2:
            return False
        pairs = len(self.grid) // 2
        counts = self.value_counts()
        return set(counts) == set(range(pairs)) and all(n == 2 for n in counts.values())

    def pair_of(self, r: int, c: int) -> Coord:
        """Returns the other position holding the same tile as (r, c)."""
        value = self.at(r, c)
        for coord in self.coords():
            if coord != (r, c) and self.at(*coord) == value:
                return coord
        raise ValueError(f'tile {value} at ({r}, {c}) has no partner')
