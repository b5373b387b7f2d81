"""
Tests for action validators.

Tests:
- Action shape (non-negative feeding and seeding)
- Land trading affordability
- Feeding and seeding caps
- Uprising threshold
"""

import pytest

from ..engine_core.action import GameAction
from ..engine_core.errors import (
    OutOfRange,
    InsufficientLandsToSell,
    InsufficientBushelsToBuyLands,
    InsufficientBushelsToFeed,
    InsufficientBushelsToSeed,
    Uprising,
)
from ..engine_core.rules import BUSHELS_PER_PERSON, BUSHELS_PER_LAND, LANDS_PER_PERSON
from ..engine_core.validators import (
    validate_action_shape,
    validate_land_trade,
    validate_feeding,
    validate_seeding,
    check_uprising,
)
from .conftest import make_state


class TestActionShape:
    """Tests for validate_action_shape."""

    @pytest.mark.parametrize("action, field", [
        (GameAction(bushels_to_feed=-1), "bushels_to_feed"),
        (GameAction(lands_to_seed=-1), "lands_to_seed"),
        (GameAction(bushels_to_feed=-1, lands_to_seed=-1), "bushels_to_feed"),
    ])
    def test_negative_fields_rejected(self, action, field):
        """First negative field is reported."""
        error = validate_action_shape(action)
        assert isinstance(error, OutOfRange)
        assert error.field == field

    @pytest.mark.parametrize("action", [
        GameAction(bushels_to_feed=1, lands_to_seed=1),
        GameAction(bushels_to_feed=0, lands_to_seed=0),
        GameAction(lands_to_buy=-5),
    ])
    def test_valid_shapes(self, action):
        assert validate_action_shape(action) is None


class TestLandTrade:
    """Tests for validate_land_trade."""

    def test_insufficient_lands_to_sell(self):
        error = validate_land_trade(make_state(lands=10), GameAction(lands_to_buy=-20))
        assert error == InsufficientLandsToSell(current_lands=10, requested_lands=20)

    def test_insufficient_bushels_to_buy(self):
        state = make_state(bushels=100, land_price=20)
        error = validate_land_trade(state, GameAction(lands_to_buy=100))
        assert error == InsufficientBushelsToBuyLands(current_bushels=100, required_bushels=2000)

    def test_sufficient_lands_to_sell(self):
        assert validate_land_trade(make_state(lands=20), GameAction(lands_to_buy=-10)) is None

    def test_selling_everything(self):
        assert validate_land_trade(make_state(lands=20), GameAction(lands_to_buy=-20)) is None

    def test_sufficient_bushels_to_buy(self):
        state = make_state(bushels=2000, land_price=10)
        assert validate_land_trade(state, GameAction(lands_to_buy=10)) is None

    def test_spending_every_bushel(self):
        state = make_state(bushels=200, land_price=20)
        assert validate_land_trade(state, GameAction(lands_to_buy=10)) is None

    def test_no_trade(self):
        assert validate_land_trade(make_state(), GameAction()) is None


class TestFeeding:
    """Tests for validate_feeding."""

    def test_more_than_affordable(self):
        """Only enough to feed 5, asking to feed 10."""
        state = make_state(population=10, bushels=BUSHELS_PER_PERSON * 5)
        error = validate_feeding(state, GameAction(bushels_to_feed=BUSHELS_PER_PERSON * 10))
        assert error == InsufficientBushelsToFeed(
            current_bushels=BUSHELS_PER_PERSON * 5,
            requested_bushels=BUSHELS_PER_PERSON * 10,
        )

    def test_less_than_required(self):
        state = make_state(population=10, bushels=BUSHELS_PER_PERSON * 20)
        assert validate_feeding(state, GameAction(bushels_to_feed=BUSHELS_PER_PERSON * 9)) is None

    def test_more_than_population_needs_is_capped(self):
        """Asking to feed 30 when only 10 exist is not an error."""
        state = make_state(population=10, bushels=BUSHELS_PER_PERSON * 20)
        assert validate_feeding(state, GameAction(bushels_to_feed=BUSHELS_PER_PERSON * 30)) is None

    def test_cap_applies_to_requested_amount(self):
        """Excess over the population's needs is not reported as requested."""
        state = make_state(population=10, bushels=50)
        error = validate_feeding(state, GameAction(bushels_to_feed=10_000))
        assert error == InsufficientBushelsToFeed(current_bushels=50, requested_bushels=200)


class TestSeeding:
    """Tests for validate_seeding."""

    def test_more_than_affordable(self):
        """Enough people for 100 acres, 10 owned, seed for only 5."""
        state = make_state(
            population=100 * LANDS_PER_PERSON,
            lands=10,
            bushels=BUSHELS_PER_LAND * 5,
        )
        error = validate_seeding(state, GameAction(lands_to_seed=10))
        assert error == InsufficientBushelsToSeed(
            current_bushels=BUSHELS_PER_LAND * 5,
            requested_bushels=BUSHELS_PER_LAND * 10,
        )

    def test_enough_bushels(self):
        state = make_state(population=100 * LANDS_PER_PERSON, lands=10, bushels=10)
        assert validate_seeding(state, GameAction(lands_to_seed=5)) is None

    def test_more_than_lands_owned_is_capped(self):
        state = make_state(population=100 * LANDS_PER_PERSON, lands=10, bushels=20)
        assert validate_seeding(state, GameAction(lands_to_seed=50)) is None

    def test_labor_caps_requirement(self):
        """50 people farm at most 5 acres, so only 5 bushels are needed."""
        state = make_state(population=50, lands=1000, bushels=5)
        assert validate_seeding(state, GameAction(lands_to_seed=1000)) is None

        error = validate_seeding(make_state(population=50, lands=1000, bushels=4), GameAction(lands_to_seed=1000))
        assert error == InsufficientBushelsToSeed(current_bushels=4, requested_bushels=5)


class TestUprising:
    """Tests for check_uprising."""

    def test_exactly_at_threshold_is_tolerated(self):
        assert check_uprising(year=3, population=100, starved=45) is None

    def test_above_threshold_is_uprising(self):
        error = check_uprising(year=3, population=100, starved=46)
        assert isinstance(error, Uprising)
        assert error.year == 3
        assert error.people_starved == 46
        assert error.percentage == pytest.approx(46.0)
        assert not error.retryable

    def test_everyone_starved(self):
        error = check_uprising(year=1, population=10, starved=10)
        assert isinstance(error, Uprising)
        assert error.percentage == pytest.approx(100.0)

    def test_empty_city_cannot_revolt(self):
        assert check_uprising(year=1, population=0, starved=0) is None

    @pytest.mark.parametrize("population, starved, field", [
        (-1, 0, "population"),
        (10, -1, "starved"),
        (10, 11, "starved"),
    ])
    def test_out_of_range(self, population, starved, field):
        error = check_uprising(year=1, population=population, starved=starved)
        assert isinstance(error, OutOfRange)
        assert error.field == field
