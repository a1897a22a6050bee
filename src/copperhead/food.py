from __future__ import annotations

import random

from .errors import BoardFull
from .grid import Cell, Grid
from .snake import Snake

# Rejection sampling is only worth it while most of the board is free.
SAMPLE_ATTEMPTS = 32
ENUMERATE_BELOW = 0.25


def free_cells(snake: Snake, grid: Grid) -> list[Cell]:
    return [c for c in grid.cells() if not snake.occupies(c)]


def respawn(snake: Snake, grid: Grid, rng: random.Random) -> Cell:
    free = grid.size - len(snake)
    if free <= 0:
        raise BoardFull(f"snake of length {len(snake)} fills {grid!r}")

    if free > grid.size * ENUMERATE_BELOW:
        for _ in range(SAMPLE_ATTEMPTS):
            cell = grid.random_cell(rng)
            if not snake.occupies(cell):
                return cell

    return rng.choice(free_cells(snake, grid))
