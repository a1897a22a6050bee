from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Iterable

from .errors import InvalidConfiguration
from .grid import Cell, Grid, shift


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))


class StepResult(Enum):
    MOVED = "moved"
    ATE = "ate"
    COLLISION = "collision"


class Snake:
    """Body cells head first, plus the heading applied on the next step."""

    def __init__(self, grid: Grid, cells: Iterable[Cell], heading: Direction = Direction.RIGHT):
        self.grid = grid
        self.body: deque[Cell] = deque(cells)
        self._occupied = set(self.body)
        if not self.body:
            raise ValueError("snake needs at least one cell")
        if len(self._occupied) != len(self.body):
            raise ValueError("snake body overlaps itself")
        if not all(grid.in_bounds(c) for c in self.body):
            raise ValueError("snake body leaves the grid")
        self.heading = heading
        self.pending = heading

    @classmethod
    def spawn(cls, grid: Grid, length: int = 1, heading: Direction = Direction.RIGHT) -> Snake:
        head = grid.center
        back = heading.opposite.value
        cells = [head]
        for _ in range(length - 1):
            cells.append(shift(cells[-1], back))
        if length < 1 or not all(grid.in_bounds(c) for c in cells):
            raise InvalidConfiguration(f"a snake of length {length} does not fit in {grid!r}")
        return cls(grid, cells, heading)

    @property
    def head(self) -> Cell:
        return self.body[0]

    @property
    def tail(self) -> Cell:
        return self.body[-1]

    def cells(self) -> tuple[Cell, ...]:
        return tuple(self.body)

    def occupies(self, cell: Cell) -> bool:
        return cell in self._occupied

    def __len__(self) -> int:
        return len(self.body)

    def __repr__(self):
        return f"Snake({list(self.body)!r}, heading={self.heading.name})"

    def set_heading(self, direction: Direction) -> bool:
        # Compared against the heading actually travelled, not the pending one.
        if direction is self.heading.opposite:
            return False
        self.pending = direction
        return True

    def step(self, food: Cell | None) -> StepResult:
        self.heading = self.pending
        new_head = shift(self.head, self.heading.value)
        if not self.grid.in_bounds(new_head):
            return StepResult.COLLISION

        grows = new_head == food
        if self.occupies(new_head) and (grows or new_head != self.tail):
            return StepResult.COLLISION

        if not grows:
            self._occupied.discard(self.body.pop())
        self.body.appendleft(new_head)
        self._occupied.add(new_head)
        return StepResult.ATE if grows else StepResult.MOVED
