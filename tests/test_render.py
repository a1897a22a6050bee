import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
pygame = pytest.importorskip("pygame")

from copperhead import config  # noqa: E402
from copperhead.render import cell_rect, draw_frame, load_fonts  # noqa: E402
from copperhead.snake import Direction  # noqa: E402
from copperhead.state import Frame, Phase  # noqa: E402


@pytest.fixture
def screen():
    pygame.font.init()
    settings = config.Settings(width=10, height=10)
    yield pygame.Surface(settings.window_size)
    pygame.font.quit()


def make_frame(phase, cleared=False):
    return Frame(
        width=10,
        height=10,
        snake=((5, 5), (4, 5), (3, 5)),
        heading=Direction.RIGHT,
        food=(2, 7),
        score=2,
        high_score=5,
        phase=phase,
        cleared=cleared,
    )


def color_at(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def test_running_frame_draws_food_and_body(screen):
    fonts = load_fonts("does-not-exist.ttf")
    draw_frame(screen, make_frame(Phase.RUNNING), fonts)
    assert color_at(screen, cell_rect((2, 7), config.CELL_SIZE).center) == config.FOOD_COLOR
    assert color_at(screen, cell_rect((4, 5), config.CELL_SIZE).center) == config.BODY_DARK
    assert color_at(screen, cell_rect((3, 5), config.CELL_SIZE).center) == config.BODY_LIGHT
    head = cell_rect((5, 5), config.CELL_SIZE)
    assert color_at(screen, (head.x + 2, head.bottom - 3)) == config.HEAD_COLOR
    assert color_at(screen, (1, 1)) == config.BORDER_COLOR


@pytest.mark.parametrize("phase,cleared", [(Phase.IDLE, False), (Phase.GAME_OVER, False), (Phase.GAME_OVER, True)])
def test_other_phases_render(screen, phase, cleared):
    fonts = load_fonts("does-not-exist.ttf")
    draw_frame(screen, make_frame(phase, cleared), fonts)
    assert color_at(screen, (1, 1)) == config.BORDER_COLOR
