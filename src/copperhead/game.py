from __future__ import annotations

import logging
import os

import pygame

from . import config
from .logic import KEY_DIRECTIONS, on_key, on_tick
from .render import draw_frame, load_fonts
from .state import Key, Phase, new_state, view
from .tick import InputQueue, TickClock

logger = logging.getLogger(__name__)

PYGAME_KEYS = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_ESCAPE: Key.ESCAPE,
}


def set_icon(path: str = config.ICON_PATH) -> None:
    if not os.path.isfile(path):
        logger.info("icon %s not found, keeping default", path)
        return
    try:
        pygame.display.set_icon(pygame.image.load(path))
    except pygame.error as e:
        logger.info("could not load icon %s: %s", path, e)


def run(settings: config.Settings) -> int:
    state = new_state(settings)
    logger.debug("starting with %s", settings)

    os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
    pygame.init()
    try:
        set_icon()
        screen = pygame.display.set_mode(settings.window_size)
        pygame.display.set_caption(config.TITLE)
        fonts = load_fonts()
        clock = pygame.time.Clock()
        ticks = TickClock(settings.tick_ms)
        queue = InputQueue(KEY_DIRECTIONS)

        while not state.quit:
            started = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    state = state._replace(quit=True)
                elif event.type == pygame.KEYDOWN:
                    key = queue.push(PYGAME_KEYS.get(event.key))
                    if key is None:
                        continue
                    was_running = state.phase is Phase.RUNNING
                    state = on_key(state, key)
                    if state.phase is Phase.RUNNING and not was_running:
                        ticks.reset()
                        queue.take()
                        started = True

            # A new round waits a full interval before its first move.
            due = 0 if started else ticks.advance(clock.get_time())
            for _ in range(due):
                state = on_key(state, queue.take())
                state = on_tick(state)

            draw_frame(screen, view(state), fonts, settings.cell_size)
            pygame.display.flip()
            clock.tick(config.FPS_LIMIT)
    finally:
        pygame.quit()

    return 0
