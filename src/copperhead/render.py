from __future__ import annotations

import logging
import os

import pygame

from . import config
from .snake import Direction
from .state import Frame, Phase

logger = logging.getLogger(__name__)

FONT_SIZES = {"title": 48, "text": 24, "prompt": 20}


def load_fonts(path: str = config.FONT_PATH) -> dict[str, pygame.font.Font]:
    if not pygame.font.get_init():
        pygame.font.init()
    if not os.path.isfile(path):
        logger.info("font %s not found, using pygame default", path)
        path = None
    return {name: pygame.font.Font(path, size) for name, size in FONT_SIZES.items()}


def cell_rect(cell: tuple[int, int], cell_size: int) -> pygame.Rect:
    x, y = cell
    return pygame.Rect(config.BORDER + x * cell_size, config.BORDER + y * cell_size, cell_size, cell_size)


def draw_border(screen: pygame.Surface, frame: Frame, cell_size: int) -> None:
    w = frame.width * cell_size
    h = frame.height * cell_size
    b = config.BORDER
    full_w = w + 2 * b
    full_h = h + 2 * b
    pygame.draw.rect(screen, config.BORDER_COLOR, (0, 0, full_w, b))
    pygame.draw.rect(screen, config.BORDER_COLOR, (0, h + b, full_w, b))
    pygame.draw.rect(screen, config.BORDER_COLOR, (0, 0, b, full_h))
    pygame.draw.rect(screen, config.BORDER_COLOR, (w + b, 0, b, full_h))


def draw_head(screen: pygame.Surface, rect: pygame.Rect, heading: Direction) -> None:
    pygame.draw.rect(screen, config.HEAD_COLOR, rect)

    size = rect.width
    shine = pygame.Surface((int(size * 0.45), max(1, int(size * 0.18))), pygame.SRCALPHA)
    shine.fill(config.REFLECTION_COLOR)
    screen.blit(shine, (rect.x + int(size * 0.10), rect.y + int(size * 0.10)))

    # Eyes sit towards the front of the head.
    cx, cy = rect.center
    side = size * 0.20
    front = size * 0.18
    r = max(1, int(size * 0.1))
    dx, dy = heading.value
    if dx:
        eyes = [(cx + dx * front, cy - side), (cx + dx * front, cy + side)]
    else:
        eyes = [(cx - side, cy + dy * front), (cx + side, cy + dy * front)]
    for ex, ey in eyes:
        pygame.draw.rect(screen, config.EYE_COLOR, (int(ex) - r, int(ey) - r, 2 * r, 2 * r))


def draw_snake(screen: pygame.Surface, cells, heading: Direction, cell_size: int) -> None:
    if not cells:
        return
    head = cells[0]
    for i, cell in enumerate(cells[1:]):
        color = config.BODY_DARK if i % 2 == 0 else config.BODY_LIGHT
        pygame.draw.rect(screen, color, cell_rect(cell, cell_size))
    draw_head(screen, cell_rect(head, cell_size), heading)


def blit_centered(screen: pygame.Surface, font: pygame.font.Font, text: str, y: float) -> None:
    surf = font.render(text, True, config.TEXT_COLOR)
    screen.blit(surf, surf.get_rect(center=(screen.get_width() // 2, int(y))))


def draw_idle(screen: pygame.Surface, frame: Frame, fonts, cell_size: int) -> None:
    mid_y = screen.get_height() / 2
    blit_centered(screen, fonts["title"], "COPPERHEAD", mid_y - 60)
    cx, cy = frame.width // 2, frame.height // 2
    preview = tuple((cx - i, cy) for i in range(3) if cx - i >= 0)
    draw_snake(screen, preview, Direction.RIGHT, cell_size)
    blit_centered(screen, fonts["text"], "Press space to start", mid_y + cell_size + 50)


def draw_running(screen: pygame.Surface, frame: Frame, fonts, cell_size: int) -> None:
    if frame.food is not None:
        pygame.draw.rect(screen, config.FOOD_COLOR, cell_rect(frame.food, cell_size))
    draw_snake(screen, frame.snake, frame.heading, cell_size)
    blit_centered(screen, fonts["text"], str(frame.score), config.BORDER / 2)


def draw_game_over(screen: pygame.Surface, frame: Frame, fonts, cell_size: int) -> None:
    screen.fill(config.GAME_OVER_BACKGROUND)
    draw_border(screen, frame, cell_size)
    draw_snake(screen, frame.snake, frame.heading, cell_size)

    mid_y = screen.get_height() / 2
    headline = "BOARD CLEARED!" if frame.cleared else "COILED!"
    blit_centered(screen, fonts["title"], headline, mid_y - 40)
    blit_centered(screen, fonts["text"], f"Score: {frame.score}", mid_y + 20)
    blit_centered(screen, fonts["text"], f"Highest: {frame.high_score}", mid_y + 60)
    blit_centered(screen, fonts["prompt"], "Press space to restart", mid_y + 110)


def draw_frame(screen: pygame.Surface, frame: Frame, fonts, cell_size: int = config.CELL_SIZE) -> None:
    screen.fill(config.BACKGROUND)
    draw_border(screen, frame, cell_size)

    if frame.phase is Phase.IDLE:
        draw_idle(screen, frame, fonts, cell_size)
    elif frame.phase is Phase.RUNNING:
        draw_running(screen, frame, fonts, cell_size)
    else:
        draw_game_over(screen, frame, fonts, cell_size)
