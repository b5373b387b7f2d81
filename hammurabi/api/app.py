"""
FastAPI Application - REST API for playing Hammurabi over HTTP.

Endpoints:
    GET    /api/v1/health                 Service health
    GET    /api/v1/games                  List games
    POST   /api/v1/games                  Create a game
    GET    /api/v1/games/{name}           Get a game's state
    POST   /api/v1/games/{name}/actions   Play one year
    DELETE /api/v1/games/{name}           End a game

Turn outcomes:
    200  Turn applied, game moved to the next year
    422  Action cannot be afforded; resubmit for the same year
    409  Uprising (game lost) or the game is already over
    404  No such game

All responses are JSON with explicit Pydantic schemas.
"""

from typing import Optional, Union
import logging

from .. import __version__
from ..config import HAMMURABI_ENV, ALLOWED_ORIGINS

logger = logging.getLogger(__name__)


def create_app(service=None):
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    from fastapi import FastAPI, Query
    from fastapi.middleware.cors import CORSMiddleware
    from fastapi.responses import JSONResponse

    from .service import APIService
    from .schemas import (
        ActionRequest,
        CreateGameRequest,
        EndGameResponse,
        ErrorCode,
        ErrorResponse,
        GameListResponse,
        GameResponse,
        HealthResponse,
        TurnResponse,
    )

    app = FastAPI(
        title="Hammurabi API",
        description="""
Rule ancient Samaria for a term of years: trade land, feed your people and
seed your fields. Each `POST /actions` plays one year.

## Error Codes

| Code | Description |
|------|-------------|
| `GAME_NOT_FOUND` | No game with that name |
| `GAME_EXISTS` | Name already taken |
| `GAME_OVER` | The game accepts no more actions |
| `UPRISING` | More than 45% starved; the game is lost |
| `INSUFFICIENT_*`, `OUT_OF_RANGE` | Action not affordable; try again |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or APIService()

    # =========================================================================
    # Error helpers
    # =========================================================================

    def status_for(error: ErrorResponse) -> int:
        if error.error_code == ErrorCode.GAME_NOT_FOUND:
            return 404
        if error.error_code in {ErrorCode.GAME_EXISTS, ErrorCode.GAME_OVER, ErrorCode.UPRISING}:
            return 409
        if error.retryable:
            return 422
        return 400

    def make_error_response(error: ErrorResponse) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_for(error),
            content=error.model_dump(mode="json"),
        )

    # =========================================================================
    # Health
    # =========================================================================

    @app.get(
        "/api/v1/health",
        response_model=HealthResponse,
        tags=["System"],
    )
    def health() -> HealthResponse:
        return HealthResponse(
            version=__version__,
            environment=HAMMURABI_ENV,
            active_games=api_service.active_game_count(),
        )

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.get(
        "/api/v1/games",
        response_model=GameListResponse,
        tags=["Games"],
        summary="List games",
    )
    def list_games() -> GameListResponse:
        """List every game held by this server, oldest first."""
        return api_service.list_games()

    @app.post(
        "/api/v1/games",
        response_model=GameResponse,
        status_code=201,
        responses={409: {"model": ErrorResponse, "description": "Name already taken"}},
        tags=["Games"],
        summary="Create a new game",
    )
    def create_game(body: Optional[CreateGameRequest] = None) -> Union[GameResponse, JSONResponse]:
        """Start a new game at year 1 in the fixed opening position."""
        response = api_service.create_game(body or CreateGameRequest())
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    @app.get(
        "/api/v1/games/{name}",
        response_model=GameResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Games"],
        summary="Get a game",
    )
    def get_game(name: str) -> Union[GameResponse, JSONResponse]:
        response = api_service.get_game(name)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    @app.delete(
        "/api/v1/games/{name}",
        response_model=EndGameResponse,
        tags=["Games"],
        summary="End a game",
    )
    def end_game(
        name: str,
        reason: str = Query("user_ended", description="Reason for ending"),
    ) -> EndGameResponse:
        """End a game and release it."""
        return api_service.end_game(name, reason)

    # =========================================================================
    # Turn Endpoint
    # =========================================================================

    @app.post(
        "/api/v1/games/{name}/actions",
        response_model=TurnResponse,
        responses={
            404: {"model": ErrorResponse, "description": "Game not found"},
            409: {"model": ErrorResponse, "description": "Uprising or game over"},
            422: {"model": ErrorResponse, "description": "Action not affordable"},
        },
        tags=["Game Loop"],
        summary="Play one year",
    )
    def play_turn(name: str, body: ActionRequest) -> Union[TurnResponse, JSONResponse]:
        """
        Apply the player's allocation for the current year.

        On a retryable error the game stays in the same year with the same
        state. An `UPRISING` ends the game.
        """
        response = api_service.play_turn(name, body)
        if isinstance(response, ErrorResponse):
            logger.debug("Turn for %s rejected: %s", name, response.error_code.value)
            return make_error_response(response)
        return response

    return app


# For running directly: uvicorn hammurabi.api.app:app
app = create_app()
