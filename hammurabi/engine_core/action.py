"""
Action System - The player's yearly decision and the result of applying it.

One GameAction is submitted per year. Applying it produces a
TransitionResult: either the next year's state and delta, or a typed error
with the game left exactly as it was.
"""

from __future__ import annotations
from dataclasses import dataclass

from .state import GameState, StateDelta
from .errors import TransitionError, Uprising


@dataclass(frozen=True)
class GameAction:
    """
    The player's allocation for one year.

    lands_to_buy is signed: positive buys, negative sells, zero trades nothing.
    """
    lands_to_buy: int = 0
    bushels_to_feed: int = 0
    lands_to_seed: int = 0


@dataclass
class TransitionResult:
    """
    Result of applying an action.

    Contains:
    - Whether the transition succeeded
    - Next year, state and delta (if succeeded)
    - The typed error (if failed)
    """
    success: bool
    year: int | None = None
    new_state: GameState | None = None
    delta: StateDelta | None = None
    error: TransitionError | None = None

    @property
    def retryable(self) -> bool:
        """Whether the player may resubmit an action for the same year."""
        return self.error is not None and self.error.retryable

    @property
    def is_game_over(self) -> bool:
        """Whether the failure ended the game."""
        return self.error is not None and not self.error.retryable

    @property
    def uprising(self) -> Uprising | None:
        if isinstance(self.error, Uprising):
            return self.error
        return None

    @classmethod
    def failure(cls, error: TransitionError) -> TransitionResult:
        """Create a failure result."""
        return cls(success=False, error=error)

    @classmethod
    def success_with_state(
        cls,
        year: int,
        state: GameState,
        delta: StateDelta,
    ) -> TransitionResult:
        """Create a success result with the next year's state."""
        return cls(success=True, year=year, new_state=state, delta=delta)
