from __future__ import annotations

import random
from typing import Iterator

from .errors import InvalidConfiguration

Cell = tuple[int, int]


def shift(cell: Cell, delta: Cell) -> Cell:
    return (cell[0] + delta[0], cell[1] + delta[1])


class Grid:
    """Fixed playfield of width x height cells; (0, 0) is the top-left cell."""

    __slots__ = ("width", "height")

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise InvalidConfiguration(f"grid must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def center(self) -> Cell:
        return (self.width // 2, self.height // 2)

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def random_cell(self, rng: random.Random) -> Cell:
        return (rng.randrange(self.width), rng.randrange(self.height))

    def cells(self) -> Iterator[Cell]:
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def __repr__(self):
        return f"Grid({self.width}, {self.height})"
