from __future__ import annotations

import logging

from . import food
from .errors import BoardFull
from .snake import Direction, Snake, StepResult
from .state import Key, Phase, State

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


def end_round(state: State, cleared: bool = False) -> State:
    high_score = max(state.high_score, state.score)
    if cleared:
        logger.info("board cleared with score %d", state.score)
    else:
        logger.info("game over: score %d, highest %d", state.score, high_score)
    return state._replace(phase=Phase.GAME_OVER, high_score=high_score, cleared=cleared)


def place_food(state: State) -> State:
    try:
        cell = food.respawn(state.snake, state.grid, state.rng)
    except BoardFull:
        return end_round(state._replace(food=None), cleared=True)
    return state._replace(food=cell)


def start_round(state: State) -> State:
    snake = Snake.spawn(state.grid, state.settings.start_length)
    state = state._replace(
        phase=Phase.RUNNING,
        snake=snake,
        food=None,
        score=0,
        cleared=False,
        last_result=None,
    )
    logger.info("round started on %dx%d grid", state.grid.width, state.grid.height)
    return place_food(state)


def on_key(state: State, key: Key | None) -> State:
    if key is Key.ESCAPE:
        return state._replace(quit=True)
    if key is Key.SPACE:
        if state.phase is Phase.RUNNING:
            return state
        return start_round(state)
    if key in KEY_DIRECTIONS and state.phase is Phase.RUNNING:
        state.snake.set_heading(KEY_DIRECTIONS[key])
    return state


def advance_snake(state: State) -> State:
    return state._replace(last_result=state.snake.step(state.food))


def check_collision(state: State) -> State:
    if state.last_result is StepResult.COLLISION:
        return end_round(state)
    return state


def update_food_and_score(state: State) -> State:
    if state.last_result is not StepResult.ATE:
        return state
    logger.debug("ate food at %s, length %d", state.food, len(state.snake))
    return place_food(state._replace(score=state.score + 1))


TICK_STAGES = (advance_snake, check_collision, update_food_and_score)


def on_tick(state: State) -> State:
    if state.phase is not Phase.RUNNING:
        return state
    for stage in TICK_STAGES:
        state = stage(state)
    return state
