"""
Tests for API Pydantic schemas.

Validates that:
- Request models enforce their bounds
- Responses serialize enums as values
- Engine errors keep their fields when wrapped
"""

import copy
import pickle

import pytest
from pydantic import ValidationError

from ..api.schemas import (
    ActionRequest,
    CreateGameRequest,
    ErrorCode,
    GameStateInfo,
    StateDeltaInfo,
)
from ..api.service import error_response
from ..engine_core.errors import (
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
from ..engine_core.state import GameState, StateDelta

ENGINE_ERRORS = [
    NilState(),
    NilAction(),
    OutOfRange(field="lands_to_seed", reason="Must be non-negative"),
    InsufficientLandsToSell(current_lands=1, requested_lands=2),
    InsufficientBushelsToBuyLands(current_bushels=1, required_bushels=2),
    InsufficientBushelsToFeed(current_bushels=1, requested_bushels=2),
    InsufficientBushelsToSeed(current_bushels=1, requested_bushels=2),
    Uprising(year=2, people_starved=60, percentage=60.0),
]


class TestRequests:
    def test_create_defaults(self):
        request = CreateGameRequest()
        assert request.max_years == 10
        assert request.seed is None
        assert request.name is None

    @pytest.mark.parametrize("payload", [
        {"max_years": 0},
        {"max_years": 101},
        {"name": "has space"},
        {"name": ""},
    ])
    def test_create_rejects(self, payload):
        with pytest.raises(ValidationError):
            CreateGameRequest(**payload)

    def test_action_allows_negative_values(self):
        """Signs are the engine's concern."""
        request = ActionRequest(lands_to_buy=-3, bushels_to_feed=-1)
        assert request.lands_to_buy == -3
        assert request.bushels_to_feed == -1


class TestConversions:
    def test_state_from_engine(self):
        state = GameState(bushels=1, population=2, lands=3, land_price=17, land_profit=6)
        assert GameStateInfo.model_validate(state).model_dump() == {
            "bushels": 1,
            "population": 2,
            "lands": 3,
            "land_price": 17,
            "land_profit": 6,
        }

    def test_delta_from_engine(self):
        delta = StateDelta(people_killed=4, has_plague=True)
        info = StateDeltaInfo.model_validate(delta)
        assert info.people_killed == 4
        assert info.has_plague is True


class TestErrorResponse:
    @pytest.mark.parametrize("error", ENGINE_ERRORS)
    def test_every_engine_error_has_a_code(self, error):
        response = error_response(error)
        assert response.error_code == ErrorCode(error.code)
        assert response.retryable == error.retryable
        assert response.error == str(error)

    def test_uprising_details(self):
        response = error_response(Uprising(year=2, people_starved=60, percentage=60.0))
        data = response.model_dump(mode="json")

        assert data["error_code"] == "UPRISING"
        assert data["details"] == {"year": 2, "people_starved": 60, "percentage": 60.0}
        assert "60.00%" in data["error"]

    def test_errors_share_a_base(self):
        assert issubclass(Uprising, TransitionError)
        assert issubclass(TransitionError, Exception)


class TestEngineErrors:
    """Engine errors behave like ordinary exceptions outside the engine."""

    @pytest.mark.parametrize("error", ENGINE_ERRORS)
    def test_args_hold_the_fields(self, error):
        assert error.args == tuple(error.details().values())

    @pytest.mark.parametrize("error", ENGINE_ERRORS)
    def test_pickle_keeps_the_error(self, error):
        restored = pickle.loads(pickle.dumps(error))
        assert type(restored) is type(error)
        assert restored == error
        assert str(restored) == str(error)

    @pytest.mark.parametrize("error", ENGINE_ERRORS)
    def test_copy_keeps_the_error(self, error):
        assert copy.copy(error) == error
        assert copy.deepcopy(error) == error

    def test_errors_are_hashable(self):
        first = Uprising(year=2, people_starved=60, percentage=60.0)
        second = Uprising(year=2, people_starved=60, percentage=60.0)
        assert hash(first) == hash(second)
        assert len(set(ENGINE_ERRORS)) == len(ENGINE_ERRORS)

    def test_raised_error_keeps_its_message(self):
        with pytest.raises(InsufficientLandsToSell, match="requested to sell 2 acres"):
            raise InsufficientLandsToSell(current_lands=1, requested_lands=2)
