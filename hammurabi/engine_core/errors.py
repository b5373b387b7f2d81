"""
Errors - Typed failures of a transition.

Every failure is its own class carrying the numbers that caused it, so
callers can match on the type instead of parsing messages. Validators
return these; callers that prefer exceptions can raise them directly.

Retryable errors leave the game untouched and the player may resubmit an
action for the same year. Non-retryable errors end the session.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict, astuple
from typing import Any


class TransitionError(Exception):
    """Base class for all transition failures."""
    code = "TRANSITION_ERROR"
    retryable = True

    def __post_init__(self):
        # args mirror the fields so pickle and copy rebuild the same error
        super().__init__(*astuple(self))

    def details(self) -> dict[str, Any]:
        """Fields of the error as a plain dict."""
        return asdict(self)


@dataclass(unsafe_hash=True)
class NilState(TransitionError):
    code = "NIL_STATE"
    retryable = False

    def __str__(self) -> str:
        return "Game state is nil."


@dataclass(unsafe_hash=True)
class NilAction(TransitionError):
    code = "NIL_ACTION"
    retryable = False

    def __str__(self) -> str:
        return "Game action is nil."


@dataclass(unsafe_hash=True)
class OutOfRange(TransitionError):
    """An action field or internal quantity violates its range."""
    field: str
    reason: str

    code = "OUT_OF_RANGE"

    def __str__(self) -> str:
        return f"Value of '{self.field}' is out of range. Reason: {self.reason}."


@dataclass(unsafe_hash=True)
class InsufficientLandsToSell(TransitionError):
    current_lands: int
    requested_lands: int

    code = "INSUFFICIENT_LANDS_TO_SELL"

    def __str__(self) -> str:
        return (
            f"Insufficient lands to sell. Having {self.current_lands} acres of land "
            f"but requested to sell {self.requested_lands} acres."
        )


@dataclass(unsafe_hash=True)
class InsufficientBushelsToBuyLands(TransitionError):
    current_bushels: int
    required_bushels: int

    code = "INSUFFICIENT_BUSHELS_TO_BUY_LANDS"

    def __str__(self) -> str:
        return (
            f"Insufficient bushels to buy lands. Having {self.current_bushels} bushels "
            f"but required {self.required_bushels} bushels to buy."
        )


@dataclass(unsafe_hash=True)
class InsufficientBushelsToFeed(TransitionError):
    current_bushels: int
    requested_bushels: int

    code = "INSUFFICIENT_BUSHELS_TO_FEED"

    def __str__(self) -> str:
        return (
            f"Insufficient bushels to feed people. Having {self.current_bushels} bushels "
            f"but requested for {self.requested_bushels} bushels to feed."
        )


@dataclass(unsafe_hash=True)
class InsufficientBushelsToSeed(TransitionError):
    current_bushels: int
    requested_bushels: int

    code = "INSUFFICIENT_BUSHELS_TO_SEED"

    def __str__(self) -> str:
        return (
            f"Insufficient bushels to seed. Having {self.current_bushels} bushels "
            f"but requested {self.requested_bushels} bushels to seed."
        )


@dataclass(unsafe_hash=True)
class Uprising(TransitionError):
    """
    Too many people starved and the city overthrew its ruler.

    Terminal: the game is over, no further turns are meaningful.
    percentage is in [0, 100].
    """
    year: int
    people_starved: int
    percentage: float

    code = "UPRISING"
    retryable = False

    def __str__(self) -> str:
        return (
            f"In year {self.year}, you starved {self.people_starved} people "
            f"({self.percentage:.2f}% of the population). The people overthrew you."
        )
