"""
API Service - Business logic layer between the HTTP app and the engine.

The service:
1. Translates API requests to session and engine calls
2. Manages sessions
3. Formats responses

This layer is framework-agnostic. Lookups that can fail return an
ErrorResponse instead of raising, so the app only maps codes to statuses.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .schemas import (
    ActionRequest,
    CreateGameRequest,
    EndGameResponse,
    ErrorCode,
    ErrorResponse,
    GameListResponse,
    GameResponse,
    GameStateInfo,
    GameStatus,
    GameSummary,
    StateDeltaInfo,
    TurnResponse,
)
from ..config import HAMMURABI_SESSION_TTL
from ..engine_core.action import GameAction
from ..engine_core.errors import TransitionError
from ..session import SessionManager, Session, SessionExists, GameLoop, GameFinished


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()
        game = service.create_game(CreateGameRequest(max_years=10))
        turn = service.play_turn(game.name, ActionRequest(bushels_to_feed=2000))
    """
    session_manager: SessionManager = field(default_factory=SessionManager)
    stale_after_seconds: int = HAMMURABI_SESSION_TTL

    def create_game(self, request: CreateGameRequest) -> GameResponse | ErrorResponse:
        """
        Create a new game at year 1.

        Finished games older than stale_after_seconds are dropped first.
        """
        self.session_manager.cleanup_stale_sessions(self.stale_after_seconds)
        try:
            session = self.session_manager.create_session(
                max_years=request.max_years,
                description=request.description,
                seed=request.seed,
                name=request.name,
            )
        except SessionExists as e:
            return ErrorResponse(error=str(e), error_code=ErrorCode.GAME_EXISTS)
        except ValueError as e:
            return ErrorResponse(error=str(e), error_code=ErrorCode.VALIDATION_ERROR)
        return self._game_response(session)

    def list_games(self) -> GameListResponse:
        games = [
            GameSummary(
                name=s.session_id,
                description=s.description,
                status=GameStatus(s.status.value),
                year=s.game.year,
                max_years=s.game.max_years,
            )
            for s in self.session_manager.list_sessions()
        ]
        return GameListResponse(games=games, count=len(games))

    def get_game(self, name: str) -> GameResponse | ErrorResponse:
        session = self.session_manager.get_session(name)
        if not session:
            return self._not_found(name)
        return self._game_response(session)

    def play_turn(self, name: str, request: ActionRequest) -> TurnResponse | ErrorResponse:
        """
        Apply one action to a game.

        Returns TurnResponse on success, or the engine's error (retryable
        unless it ended the game).
        """
        session = self.session_manager.get_session(name)
        if not session:
            return self._not_found(name)

        action = GameAction(
            lands_to_buy=request.lands_to_buy,
            bushels_to_feed=request.bushels_to_feed,
            lands_to_seed=request.lands_to_seed,
        )
        try:
            result = GameLoop(session).play_turn(action)
        except GameFinished as e:
            return ErrorResponse(
                error=str(e),
                error_code=ErrorCode.GAME_OVER,
                details={"status": e.status.value},
            )

        if not result.success:
            return error_response(result.error)

        return TurnResponse(
            name=session.session_id,
            status=GameStatus(result.session_state.value),
            year=result.year,
            state=GameStateInfo.model_validate(result.state),
            delta=StateDeltaInfo.model_validate(result.delta),
        )

    def end_game(self, name: str, reason: str = "user_ended") -> EndGameResponse:
        success = self.session_manager.end_session(name, reason)
        return EndGameResponse(success=success, name=name)

    def active_game_count(self) -> int:
        return len(self.session_manager.list_active_sessions())

    def _game_response(self, session: Session) -> GameResponse:
        game = session.game
        return GameResponse(
            name=session.session_id,
            description=session.description,
            status=GameStatus(session.status.value),
            year=game.year,
            max_years=game.max_years,
            state=GameStateInfo.model_validate(game.state),
            last_delta=StateDeltaInfo.model_validate(game.delta),
            created_at=session.created_at,
            final_error=error_response(session.final_error) if session.final_error else None,
        )

    def _not_found(self, name: str) -> ErrorResponse:
        return ErrorResponse(
            error=f"Game {name} not found",
            error_code=ErrorCode.GAME_NOT_FOUND,
        )


def error_response(error: TransitionError) -> ErrorResponse:
    """Wrap an engine error, keeping all of its fields."""
    return ErrorResponse(
        error=str(error),
        error_code=ErrorCode(error.code),
        details=error.details(),
        retryable=error.retryable,
    )
