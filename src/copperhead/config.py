from __future__ import annotations

from typing import NamedTuple

from .errors import InvalidConfiguration

TITLE = "Copperhead"

GRID_WIDTH, GRID_HEIGHT = 20, 20
CELL_SIZE = 32
TICK_MS = 100
START_LENGTH = 1
FPS_LIMIT = 120

# Pixels between the window edge and the playfield on every side.
BORDER = 32

ICON_PATH = "assets/icon.png"
FONT_PATH = "assets/JetBrainsMono-Regular.ttf"

BACKGROUND = (166, 102, 46)
BORDER_COLOR = (64, 33, 13)
GAME_OVER_BACKGROUND = (153, 26, 26)
FOOD_COLOR = (242, 163, 94)
HEAD_COLOR = (230, 153, 64)
BODY_DARK = (153, 77, 26)
BODY_LIGHT = (217, 140, 56)
EYE_COLOR = (26, 26, 26)
REFLECTION_COLOR = (255, 242, 204, 89)
TEXT_COLOR = (242, 217, 166)


class Settings(NamedTuple):
    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT
    tick_ms: int = TICK_MS
    start_length: int = START_LENGTH
    cell_size: int = CELL_SIZE
    seed: int | None = None

    @property
    def window_size(self) -> tuple[int, int]:
        return (
            self.width * self.cell_size + 2 * BORDER,
            self.height * self.cell_size + 2 * BORDER,
        )

    def validate(self) -> Settings:
        if self.width <= 0 or self.height <= 0:
            raise InvalidConfiguration(f"grid must be at least 1x1, got {self.width}x{self.height}")
        if self.tick_ms <= 0:
            raise InvalidConfiguration(f"tick interval must be positive, got {self.tick_ms} ms")
        if self.cell_size <= 0:
            raise InvalidConfiguration(f"cell size must be positive, got {self.cell_size}")
        # The start snake trails left from the centre column.
        if self.start_length < 1 or self.start_length > self.width // 2 + 1:
            raise InvalidConfiguration(
                f"start length {self.start_length} does not fit a grid {self.width} cells wide"
            )
        return self
