from .config import Settings
from .errors import BoardFull, CopperheadError, InvalidConfiguration
from .grid import Grid
from .logic import on_key, on_tick, start_round
from .snake import Direction, Snake, StepResult
from .state import Frame, Key, Phase, State, new_state, view

__all__ = [
    "Settings",
    "BoardFull",
    "CopperheadError",
    "InvalidConfiguration",
    "Grid",
    "on_key",
    "on_tick",
    "start_round",
    "Direction",
    "Snake",
    "StepResult",
    "Frame",
    "Key",
    "Phase",
    "State",
    "new_state",
    "view",
]
