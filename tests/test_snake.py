import pytest

from copperhead.errors import InvalidConfiguration
from copperhead.grid import Grid
from copperhead.snake import Direction, Snake, StepResult


def test_spawn_trails_behind_head():
    snake = Snake.spawn(Grid(10, 10), length=3)
    assert snake.cells() == ((5, 5), (4, 5), (3, 5))
    assert snake.heading is Direction.RIGHT


def test_spawn_that_does_not_fit():
    with pytest.raises(InvalidConfiguration):
        Snake.spawn(Grid(4, 4), length=4)


def test_reverse_heading_is_ignored():
    snake = Snake(Grid(10, 10), [(5, 5), (4, 5), (3, 5)], Direction.RIGHT)
    assert not snake.set_heading(Direction.LEFT)
    assert snake.heading is Direction.RIGHT
    assert snake.pending is Direction.RIGHT


def test_reverse_is_checked_against_travelled_heading():
    snake = Snake(Grid(10, 10), [(5, 5), (4, 5), (3, 5)], Direction.RIGHT)
    assert snake.set_heading(Direction.UP)
    assert snake.set_heading(Direction.DOWN)
    assert snake.step(None) is StepResult.MOVED
    assert snake.head == (5, 6)


def test_moves_without_food():
    snake = Snake(Grid(10, 10), [(5, 5)])
    for _ in range(3):
        assert snake.step((0, 0)) is StepResult.MOVED
    assert snake.head == (8, 5)
    assert len(snake) == 1


def test_grows_on_food():
    snake = Snake(Grid(10, 10), [(5, 5)])
    assert snake.step((6, 5)) is StepResult.ATE
    assert snake.cells() == ((6, 5), (5, 5))


def test_wall_collision_leaves_body_alone():
    snake = Snake(Grid(10, 10), [(9, 5), (8, 5)])
    assert snake.step(None) is StepResult.COLLISION
    assert snake.cells() == ((9, 5), (8, 5))


def test_self_collision():
    body = [(5, 5), (6, 5), (6, 6), (5, 6), (4, 6)]
    snake = Snake(Grid(10, 10), body, Direction.LEFT)
    snake.set_heading(Direction.DOWN)
    assert snake.step(None) is StepResult.COLLISION


def test_may_follow_vacating_tail():
    body = [(5, 5), (6, 5), (6, 6), (5, 6)]
    snake = Snake(Grid(10, 10), body, Direction.LEFT)
    snake.set_heading(Direction.DOWN)
    assert snake.step(None) is StepResult.MOVED
    assert snake.cells() == ((5, 6), (5, 5), (6, 5), (6, 6))
    assert len(set(snake.cells())) == 4


def test_tail_is_kept_when_growing():
    body = [(5, 5), (6, 5), (6, 6), (5, 6)]
    snake = Snake(Grid(10, 10), body, Direction.LEFT)
    snake.set_heading(Direction.DOWN)
    assert snake.step((5, 6)) is StepResult.COLLISION


def test_rejects_overlapping_body():
    with pytest.raises(ValueError):
        Snake(Grid(10, 10), [(1, 1), (1, 2), (1, 1)])
