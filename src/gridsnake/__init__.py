from .engine import Engine
from .logic import initialize, place_food, request_direction, step, with_food
from .state import ConfigurationError, Direction, GameState, Outcome, Phase, Snapshot

__all__ = [
    "Engine",
    "initialize",
    "place_food",
    "request_direction",
    "step",
    "with_food",
    "ConfigurationError",
    "Direction",
    "GameState",
    "Outcome",
    "Phase",
    "Snapshot",
]
