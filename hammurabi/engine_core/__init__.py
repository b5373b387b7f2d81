"""
Engine Core - Deterministic validation plus randomized yearly events.

The engine is the runtime that:
1. Holds the city's GameState
2. Validates a GameAction against it
3. Applies the action via the reducer
4. Rolls plague, rats, newcomers and the market
5. Returns the next year's state and a StateDelta, or a typed error
"""

from .state import GameState, StateDelta, Game, new_game
from .action import GameAction, TransitionResult
from .errors import (
    TransitionError,
    NilState,
    NilAction,
    OutOfRange,
    InsufficientLandsToSell,
    InsufficientBushelsToBuyLands,
    InsufficientBushelsToFeed,
    InsufficientBushelsToSeed,
    Uprising,
)
from .events import RandomSource
from .reducer import Reducer, apply_action

__all__ = [
    "GameState",
    "StateDelta",
    "Game",
    "new_game",
    "GameAction",
    "TransitionResult",
    "TransitionError",
    "NilState",
    "NilAction",
    "OutOfRange",
    "InsufficientLandsToSell",
    "InsufficientBushelsToBuyLands",
    "InsufficientBushelsToFeed",
    "InsufficientBushelsToSeed",
    "Uprising",
    "RandomSource",
    "Reducer",
    "apply_action",
]
