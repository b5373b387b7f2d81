"""
Random Events - Plague, rats, immigration and the yearly market.

All randomness flows through a RandomSource so tests can script exact
outcomes. random.Random satisfies the protocol; so does the random module.

Helpers raise OutOfRange on inputs that cannot occur after validation.
"""

from __future__ import annotations
from typing import Protocol

from .errors import OutOfRange
from .rules import (
    PLAGUE_CHANCE,
    RAT_CHANCE,
    MIN_RAT_PERCENTAGE,
    MAX_RAT_PERCENTAGE,
    MIN_NEWCOMERS,
    MAX_NEWCOMERS,
    MIN_LAND_PRICE,
    MAX_LAND_PRICE,
    MIN_LAND_PROFIT,
    MAX_LAND_PROFIT,
)


class RandomSource(Protocol):
    """Minimal random interface used by the engine."""

    def random(self) -> float:
        """Float in [0.0, 1.0)."""
        ...

    def randint(self, a: int, b: int) -> int:
        """Integer in [a, b], both inclusive."""
        ...


def people_killed_by_plague(rng: RandomSource, population: int) -> int:
    """Half the population (rounded down) dies when plague strikes."""
    if population < 0:
        raise OutOfRange(field="population", reason="Must be non-negative")

    if rng.random() > PLAGUE_CHANCE:
        return 0
    return population // 2


def bushels_infested_by_rats(rng: RandomSource, bushels: int) -> int:
    """Rats eat between 10% and 40% of the store when they come."""
    if bushels < 0:
        raise OutOfRange(field="bushels", reason="Must be non-negative")

    if rng.random() > RAT_CHANCE:
        return 0
    fraction = rng.random() * (MAX_RAT_PERCENTAGE - MIN_RAT_PERCENTAGE) + MIN_RAT_PERCENTAGE
    return int(bushels * fraction)


def rand_int_inclusive(rng: RandomSource, low: int, high: int) -> int:
    if low > high:
        raise OutOfRange(field="low", reason=f"Must not exceed high {high}")
    if low == high:
        return low
    return rng.randint(low, high)


def newcomers(rng: RandomSource) -> int:
    return rand_int_inclusive(rng, MIN_NEWCOMERS, MAX_NEWCOMERS)


def next_land_price(rng: RandomSource) -> int:
    return rand_int_inclusive(rng, MIN_LAND_PRICE, MAX_LAND_PRICE)


def next_land_profit(rng: RandomSource) -> int:
    return rand_int_inclusive(rng, MIN_LAND_PROFIT, MAX_LAND_PROFIT)
