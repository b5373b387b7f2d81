"""
Reducer - Applies a year's action to the game state.

The reducer is the single point of state transition.
All turns must go through apply_action().

Design principles:
- Pure function: (state, action, year) -> TransitionResult
- Validates each step before applying it
- Never mutates the given state; failures leave nothing half-applied
- Random events are drawn only after every check passed
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import random

from .state import GameState, StateDelta
from .action import GameAction, TransitionResult
from .errors import NilState, NilAction, TransitionError
from .events import (
    RandomSource,
    people_killed_by_plague,
    bushels_infested_by_rats,
    newcomers,
    next_land_price,
    next_land_profit,
)
from .validators import (
    validate_action_shape,
    validate_land_trade,
    validate_feeding,
    validate_seeding,
    check_uprising,
    max_bushels_to_feed,
    lands_to_harvest,
)
from .rules import BUSHELS_PER_PERSON, BUSHELS_PER_LAND

logger = logging.getLogger(__name__)


@dataclass
class Reducer:
    """
    Reducer applies actions to game state.

    Stateless apart from the random source - the year and state are
    passed in and the next ones returned.
    """
    rng: RandomSource = field(default_factory=random.Random)

    def apply(
        self,
        state: GameState | None,
        action: GameAction | None,
        year: int,
    ) -> TransitionResult:
        """
        Apply an action to the game state for the given year.

        Returns TransitionResult with year + 1 and the new state, or the
        first error encountered.
        """
        if state is None:
            return TransitionResult.failure(NilState())
        if action is None:
            return TransitionResult.failure(NilAction())

        # Deterministic part: every step validates before it applies
        error = validate_action_shape(action)
        if error:
            return self._reject(year, error)

        # Land trade
        error = validate_land_trade(state, action)
        if error:
            return self._reject(year, error)
        next_state = state.copy_with(
            bushels=state.bushels - state.land_price * action.lands_to_buy,
            lands=state.lands + action.lands_to_buy,
        )

        # Feeding
        error = validate_feeding(next_state, action)
        if error:
            return self._reject(year, error)
        people_fed = max_bushels_to_feed(next_state, action.bushels_to_feed) // BUSHELS_PER_PERSON
        next_state = next_state.copy_with(
            bushels=next_state.bushels - people_fed * BUSHELS_PER_PERSON,
            population=people_fed,
        )
        people_starved = state.population - next_state.population

        # Starvation is measured against the population before this turn
        error = check_uprising(year, state.population, people_starved)
        if error:
            return self._reject(year, error)

        # Seeding and harvest, at this year's profit rate
        error = validate_seeding(next_state, action)
        if error:
            return self._reject(year, error)
        harvested = lands_to_harvest(next_state, action.lands_to_seed)
        next_state = next_state.copy_with(
            bushels=next_state.bushels + harvested * (state.land_profit - BUSHELS_PER_LAND),
        )

        try:
            next_state, delta = self._apply_random_events(next_state, people_starved)
        except TransitionError as e:
            return self._reject(year, e)

        return TransitionResult.success_with_state(year + 1, next_state, delta)

    def _apply_random_events(
        self,
        state: GameState,
        people_starved: int,
    ) -> tuple[GameState, StateDelta]:
        """Plague, rats, immigration and next year's market, in that order."""
        people_killed = people_killed_by_plague(self.rng, state.population)
        population = state.population - people_killed

        bushels_infested = bushels_infested_by_rats(self.rng, state.bushels)
        bushels = state.bushels - bushels_infested

        people_added = newcomers(self.rng)
        population += people_added

        land_price = next_land_price(self.rng)
        land_profit = next_land_profit(self.rng)

        next_state = state.copy_with(
            bushels=bushels,
            population=population,
            land_price=land_price,
            land_profit=land_profit,
        )
        delta = StateDelta(
            people_starved=people_starved,
            people_killed=people_killed,
            people_added=people_added,
            bushels_infested=bushels_infested,
            has_rat=bushels_infested != 0,
            has_plague=people_killed != 0,
        )
        return next_state, delta

    def _reject(self, year: int, error: TransitionError) -> TransitionResult:
        if error.retryable:
            logger.debug("Year %d: action rejected (%s): %s", year, error.code, error)
        else:
            logger.info("Year %d: game ended (%s): %s", year, error.code, error)
        return TransitionResult.failure(error)


def apply_action(
    state: GameState | None,
    action: GameAction | None,
    year: int,
    rng: RandomSource | None = None,
) -> TransitionResult:
    """
    Convenience function to apply an action.

    Creates a Reducer and applies the action.
    """
    reducer = Reducer(rng=rng) if rng is not None else Reducer()
    return reducer.apply(state, action, year)
