"""
Pytest fixtures for Hammurabi tests.
"""

import pytest

from ..engine_core.state import GameState, new_game
from ..session import SessionManager
from ..api.service import APIService


class ScriptedRandom:
    """
    Random source returning pre-set values in order.

    Fails the test if the engine draws more values than scripted, or asks
    for an integer outside the requested range.
    """

    def __init__(self, floats=(), ints=()):
        self.floats = list(floats)
        self.ints = list(ints)
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        assert self.floats, "unexpected random() draw"
        return self.floats.pop(0)

    def randint(self, a: int, b: int) -> int:
        self.calls += 1
        assert self.ints, "unexpected randint() draw"
        value = self.ints.pop(0)
        assert a <= value <= b, f"scripted {value} outside [{a}, {b}]"
        return value


def quiet_year(newcomers=3, land_price=20, land_profit=4) -> ScriptedRandom:
    """No plague, no rats, then the given immigration and market."""
    return ScriptedRandom(floats=[0.99, 0.99], ints=[newcomers, land_price, land_profit])


def make_state(**kwargs) -> GameState:
    """A state with zero resources unless given."""
    values = dict(bushels=0, population=0, lands=0, land_price=20, land_profit=3)
    values.update(kwargs)
    return GameState(**values)


@pytest.fixture
def initial_state() -> GameState:
    return new_game(10).state


@pytest.fixture
def quiet_rng() -> ScriptedRandom:
    return quiet_year()


@pytest.fixture
def manager() -> SessionManager:
    return SessionManager()


@pytest.fixture
def service() -> APIService:
    """Create a fresh API service."""
    return APIService()
