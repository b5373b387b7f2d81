"""
Game Loop - Drives a session one year at a time.

The loop:
1. Caller submits a GameAction for the current year
2. Engine validates and applies it
3. Retryable error -> same year, caller asks again
4. Uprising -> session is over
5. Success -> session moves to the next year; past the last year the
   term is completed
"""

from __future__ import annotations
from dataclasses import dataclass
import logging

from ..engine_core.state import Game, GameState, StateDelta
from ..engine_core.action import GameAction
from ..engine_core.errors import TransitionError
from .manager import Session, SessionState

logger = logging.getLogger(__name__)


class GameFinished(Exception):
    """Raised when an action is submitted to a session that has ended."""

    def __init__(self, session_id: str, status: SessionState):
        super().__init__(f"Game {session_id} is {status.value}; no more actions allowed")
        self.session_id = session_id
        self.status = status


@dataclass
class TurnResult:
    """
    Result of playing one turn.

    year/state/delta are the session's values after the turn: the next year
    on success, the unchanged current year on failure.
    """
    success: bool
    session_state: SessionState
    year: int
    state: GameState
    delta: StateDelta
    error: TransitionError | None = None

    @property
    def can_retry(self) -> bool:
        return self.error is not None and self.session_state == SessionState.ACTIVE


class GameLoop:
    """
    The main game loop driver.

    Usage:
        loop = GameLoop(session)
        result = loop.play_turn(GameAction(0, 2000, 1000))

        if result.can_retry:
            # Show result.error, ask for another action
            ...
    """

    def __init__(self, session: Session):
        self.session = session

    def play_turn(self, action: GameAction) -> TurnResult:
        """
        Apply one action to the session.

        Raises GameFinished if the session no longer accepts actions.
        """
        session = self.session
        with session.turn_lock:
            if not session.is_active():
                raise GameFinished(session.session_id, session.status)

            game = session.game
            result = session.reducer.apply(game.state, action, game.year)

            if not result.success:
                if not result.error.retryable:
                    session.status = SessionState.GAME_OVER
                    session.final_error = result.error
                    logger.info("Game %s lost in year %d", session.session_id, game.year)
                return self._result(False, result.error)

            session.game = Game(
                state=result.new_state,
                year=result.year,
                max_years=game.max_years,
                delta=result.delta,
            )
            if session.game.is_term_over:
                session.status = SessionState.COMPLETED
                logger.info("Game %s completed its %d-year term", session.session_id, game.max_years)

            return self._result(True)

    def _result(self, success: bool, error: TransitionError | None = None) -> TurnResult:
        game = self.session.game
        return TurnResult(
            success=success,
            session_state=self.session.status,
            year=game.year,
            state=game.state,
            delta=game.delta,
            error=error,
        )
