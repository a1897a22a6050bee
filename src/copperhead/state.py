from __future__ import annotations

import random
from collections import namedtuple
from enum import Enum, auto

from .config import Settings
from .grid import Grid
from .snake import Snake


class Phase(Enum):
    IDLE = auto()
    RUNNING = auto()
    GAME_OVER = auto()


class Key(Enum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    SPACE = auto()
    ESCAPE = auto()


State = namedtuple(
    "State",
    ["settings", "grid", "rng", "phase", "snake", "food", "score", "high_score", "cleared", "last_result", "quit"],
)
# snake: Snake, replaced on every round start.
# food: (x, y), or None once the board is full.
# cleared: the last round ended because the snake filled the board.
# last_result: StepResult of the most recent tick, None before the first.
# quit: escape was pressed; the loop should exit.

Frame = namedtuple(
    "Frame",
    ["width", "height", "snake", "heading", "food", "score", "high_score", "phase", "cleared"],
)
# What the window draws. snake is a tuple of cells, head first.


def new_state(settings: Settings, rng: random.Random | None = None) -> State:
    settings = settings.validate()
    grid = Grid(settings.width, settings.height)
    return State(
        settings=settings,
        grid=grid,
        rng=rng if rng is not None else random.Random(settings.seed),
        phase=Phase.IDLE,
        snake=Snake.spawn(grid, settings.start_length),
        food=None,
        score=0,
        high_score=0,
        cleared=False,
        last_result=None,
        quit=False,
    )


def view(state: State) -> Frame:
    return Frame(
        width=state.grid.width,
        height=state.grid.height,
        snake=state.snake.cells(),
        heading=state.snake.heading,
        food=state.food,
        score=state.score,
        high_score=state.high_score,
        phase=state.phase,
        cleared=state.cleared,
    )
