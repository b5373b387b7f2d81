"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the contract between HTTP clients and the engine.

Error Codes:
- GAME_NOT_FOUND: No game with that name
- GAME_EXISTS: A game with that name already exists
- GAME_OVER: The game has ended and accepts no more actions
- UPRISING: The action starved too many people; the game is lost
- OUT_OF_RANGE / INSUFFICIENT_*: The action cannot be afforded; resubmit
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class GameStatus(str, Enum):
    """Game session status values."""
    ACTIVE = "active"
    COMPLETED = "completed"
    GAME_OVER = "game_over"
    ABANDONED = "abandoned"


class ErrorCode(str, Enum):
    """Structured error codes."""
    GAME_NOT_FOUND = "GAME_NOT_FOUND"
    GAME_EXISTS = "GAME_EXISTS"
    GAME_OVER = "GAME_OVER"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    # Engine errors
    NIL_STATE = "NIL_STATE"
    NIL_ACTION = "NIL_ACTION"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    INSUFFICIENT_LANDS_TO_SELL = "INSUFFICIENT_LANDS_TO_SELL"
    INSUFFICIENT_BUSHELS_TO_BUY_LANDS = "INSUFFICIENT_BUSHELS_TO_BUY_LANDS"
    INSUFFICIENT_BUSHELS_TO_FEED = "INSUFFICIENT_BUSHELS_TO_FEED"
    INSUFFICIENT_BUSHELS_TO_SEED = "INSUFFICIENT_BUSHELS_TO_SEED"
    UPRISING = "UPRISING"


# =============================================================================
# Shared Models
# =============================================================================

class GameStateInfo(BaseModel):
    """The city's resources."""
    bushels: int
    population: int
    lands: int
    land_price: int = Field(description="Bushels per acre this year")
    land_profit: int = Field(description="Bushels harvested per seeded acre this year")

    model_config = {"from_attributes": True}


class StateDeltaInfo(BaseModel):
    """What happened during the last turn."""
    people_starved: int = 0
    people_killed: int = 0
    people_added: int = 0
    bushels_infested: int = 0
    has_rat: bool = False
    has_plague: bool = False

    model_config = {"from_attributes": True}


class GameSummary(BaseModel):
    """One entry of the game listing."""
    name: str
    description: str = ""
    status: GameStatus
    year: int
    max_years: int


# =============================================================================
# Requests
# =============================================================================

class CreateGameRequest(BaseModel):
    """Start a new game."""
    max_years: int = Field(10, ge=1, le=100, description="Length of the term in years")
    description: str = ""
    seed: Optional[int] = Field(None, description="Seed for reproducible random events")
    name: Optional[str] = Field(
        None,
        min_length=1,
        max_length=64,
        pattern=r"^[A-Za-z0-9_-]+$",
        description="Game name; generated when omitted",
    )


class ActionRequest(BaseModel):
    """
    The player's allocation for the current year.

    Signs are checked by the engine so that its error codes reach the client.
    """
    lands_to_buy: int = Field(0, description="Positive buys, negative sells")
    bushels_to_feed: int = 0
    lands_to_seed: int = 0


# =============================================================================
# Responses
# =============================================================================

class GameResponse(BaseModel):
    """Full view of a game."""
    name: str
    description: str = ""
    status: GameStatus
    year: int
    max_years: int
    state: GameStateInfo
    last_delta: StateDeltaInfo
    created_at: float
    final_error: Optional["ErrorResponse"] = None
    api_version: str = "v1"


class GameListResponse(BaseModel):
    games: list[GameSummary] = Field(default_factory=list)
    count: int = 0


class TurnResponse(BaseModel):
    """Result of a successful turn."""
    success: bool = True
    name: str
    status: GameStatus
    year: int = Field(description="The year now to be played")
    state: GameStateInfo
    delta: StateDeltaInfo


class EndGameResponse(BaseModel):
    success: bool
    name: str


class ErrorResponse(BaseModel):
    """Standard error envelope."""
    error: str
    error_code: ErrorCode
    details: Optional[dict[str, Any]] = None
    retryable: bool = False


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    environment: str
    active_games: int = 0


GameResponse.model_rebuild()
