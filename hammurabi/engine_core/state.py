"""
Game State - Resource state of the city and the per-turn delta.

Design principles:
- Immutable: a transition builds a new state, never mutates the old one
- Flat: five integers fully describe the city between turns
- Serializable: plain fields, trivially converted for the API
"""

from __future__ import annotations
from dataclasses import dataclass, replace

from . import rules


@dataclass(frozen=True)
class GameState:
    """
    Current resources of the city.

    land_price and land_profit are this year's market values; they are
    rerolled at the end of every successful turn.
    """
    bushels: int
    population: int
    lands: int
    land_price: int
    land_profit: int

    @classmethod
    def initial(cls) -> GameState:
        """The fixed opening position."""
        return cls(
            bushels=rules.INITIAL_BUSHELS,
            population=rules.INITIAL_POPULATION,
            lands=rules.INITIAL_LANDS,
            land_price=rules.INITIAL_LAND_PRICE,
            land_profit=rules.INITIAL_LAND_PROFIT,
        )

    def copy_with(self, **kwargs) -> GameState:
        """Return a copy with some fields replaced."""
        return replace(self, **kwargs)


@dataclass(frozen=True)
class StateDelta:
    """What happened during one turn."""
    people_starved: int = 0
    people_killed: int = 0
    people_added: int = 0
    bushels_infested: int = 0
    has_rat: bool = False
    has_plague: bool = False

    @classmethod
    def initial(cls) -> StateDelta:
        """Delta reported before the first turn."""
        return cls(
            people_added=rules.INITIAL_NEW_PEOPLE,
            bushels_infested=rules.INITIAL_BUSHELS_INFESTED,
            has_rat=True,
        )


@dataclass(frozen=True)
class Game:
    """
    A game at a point in time: state, year, and the last turn's delta.

    max_years bounds how many turns a caller will play; the engine itself
    does not enforce it.
    """
    state: GameState
    year: int
    max_years: int
    delta: StateDelta

    @property
    def is_term_over(self) -> bool:
        """True once every year of the term has been played."""
        return self.year > self.max_years


def new_game(max_years: int) -> Game:
    """Create a new game in its opening position at year 1."""
    return Game(
        state=GameState.initial(),
        year=rules.INITIAL_YEAR,
        max_years=max_years,
        delta=StateDelta.initial(),
    )
