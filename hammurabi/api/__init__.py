"""
API Module - HTTP interface to game sessions.

Clients:
1. Create a game
2. Submit one action per year
3. Read the yearly report (state + last delta)
4. End the game

All state is session-scoped and in-memory. No user accounts.
"""

from .schemas import (
    # Requests
    CreateGameRequest,
    ActionRequest,
    # Responses
    GameResponse,
    GameListResponse,
    TurnResponse,
    EndGameResponse,
    ErrorResponse,
    HealthResponse,
    # Shared
    GameStateInfo,
    StateDeltaInfo,
    GameSummary,
    GameStatus,
    ErrorCode,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "CreateGameRequest",
    "ActionRequest",
    # Responses
    "GameResponse",
    "GameListResponse",
    "TurnResponse",
    "EndGameResponse",
    "ErrorResponse",
    "HealthResponse",
    # Shared
    "GameStateInfo",
    "StateDeltaInfo",
    "GameSummary",
    "GameStatus",
    "ErrorCode",
    # Service
    "APIService",
    "create_app",
]
