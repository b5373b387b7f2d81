"""
Validators - Checks an action against a state before it is applied.

Each validator checks only its own concern and returns the first violated
constraint, or None. None of them modify the state.

Requests beyond what the city can use (feeding more people than exist,
seeding more acres than can be farmed) are capped, never rejected.
"""

from __future__ import annotations

from .state import GameState
from .action import GameAction
from .errors import (
    TransitionError,
    OutOfRange,
    InsufficientLandsToSell,
    InsufficientBushelsToBuyLands,
    InsufficientBushelsToFeed,
    InsufficientBushelsToSeed,
    Uprising,
)
from .rules import (
    BUSHELS_PER_PERSON,
    LANDS_PER_PERSON,
    BUSHELS_PER_LAND,
    UPRISING_THRESHOLD,
)


def validate_action_shape(action: GameAction) -> TransitionError | None:
    """Feeding and seeding amounts must be non-negative."""
    if action.bushels_to_feed < 0:
        return OutOfRange(field="bushels_to_feed", reason="Must be non-negative")
    if action.lands_to_seed < 0:
        return OutOfRange(field="lands_to_seed", reason="Must be non-negative")
    return None


def validate_land_trade(state: GameState, action: GameAction) -> TransitionError | None:
    """Selling needs the acres, buying needs the bushels."""
    if action.lands_to_buy < 0 and state.lands + action.lands_to_buy < 0:
        return InsufficientLandsToSell(
            current_lands=state.lands,
            requested_lands=-action.lands_to_buy,
        )

    if action.lands_to_buy > 0:
        next_bushels = state.bushels - state.land_price * action.lands_to_buy
        if next_bushels < 0:
            return InsufficientBushelsToBuyLands(
                current_bushels=state.bushels,
                required_bushels=state.bushels - next_bushels,
            )

    return None


def max_bushels_to_feed(state: GameState, bushels_to_feed: int) -> int:
    """Bushels actually eaten: never more than the whole population needs."""
    return min(state.population * BUSHELS_PER_PERSON, bushels_to_feed)


def validate_feeding(state: GameState, action: GameAction) -> TransitionError | None:
    """The capped feeding amount must be in store."""
    bushels_to_feed = max_bushels_to_feed(state, action.bushels_to_feed)
    if bushels_to_feed > state.bushels:
        return InsufficientBushelsToFeed(
            current_bushels=state.bushels,
            requested_bushels=bushels_to_feed,
        )
    return None


def max_lands_to_harvest(state: GameState) -> int:
    """Acres the city can farm, bounded by labor and by land owned."""
    return min(state.population // LANDS_PER_PERSON, state.lands)


def lands_to_harvest(state: GameState, lands_to_seed: int) -> int:
    return min(max_lands_to_harvest(state), lands_to_seed)


def validate_seeding(state: GameState, action: GameAction) -> TransitionError | None:
    """Seed for the farmable part of the request must be in store."""
    required_bushels = lands_to_harvest(state, action.lands_to_seed) * BUSHELS_PER_LAND
    if state.bushels < required_bushels:
        return InsufficientBushelsToSeed(
            current_bushels=state.bushels,
            requested_bushels=required_bushels,
        )
    return None


def check_uprising(year: int, population: int, starved: int) -> TransitionError | None:
    """
    Check whether starvation overthrows the ruler.

    population is the head count before feeding. Starving exactly the
    threshold is tolerated; anything above it is an Uprising. An empty city
    cannot revolt.
    """
    if population < 0:
        return OutOfRange(field="population", reason="Must be non-negative")
    if starved < 0:
        return OutOfRange(field="starved", reason="Must be non-negative")
    if starved > population:
        return OutOfRange(
            field="starved",
            reason=f"Must be smaller than population {population}",
        )
    if population == 0:
        return None

    ratio = starved / population
    if ratio > UPRISING_THRESHOLD:
        return Uprising(
            year=year,
            people_starved=starved,
            percentage=ratio * 100.0,
        )
    return None
