"""
Session Manager - Creates and manages game sessions.

LIFECYCLE:
1. Caller creates a session -> new game at year 1 (in-memory only)
2. During the game the GameLoop applies one action per turn
3. Game ends by finishing the term, by an uprising, or by the caller
4. Ended sessions stay listed until removed

PERSISTENCE RULES:
- NO database, NO save/load
- Each session owns its state; nothing is shared between sessions
- One turn in flight per session, guarded by the session's lock
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from itertools import count
import logging
import random
import threading
import time

from ..engine_core.state import Game, new_game
from ..engine_core.errors import TransitionError
from ..engine_core.reducer import Reducer

logger = logging.getLogger(__name__)


class SessionExists(ValueError):
    """A session with the requested name is already held."""


class SessionState(Enum):
    """State of a game session."""
    ACTIVE = "active"  # Waiting for the next action
    COMPLETED = "completed"  # Ruled for the full term
    GAME_OVER = "game_over"  # Overthrown
    ABANDONED = "abandoned"  # Caller quit


@dataclass
class Session:
    """
    An ephemeral game session.

    Contains:
    - The current game (state, year, last delta)
    - The reducer with this session's own random source
    - The terminal error, once the game was lost
    """
    session_id: str
    game: Game
    reducer: Reducer
    created_at: float
    description: str = ""

    status: SessionState = SessionState.ACTIVE
    final_error: TransitionError | None = None
    turn_lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def is_active(self) -> bool:
        """Check if the session still accepts actions."""
        return self.status == SessionState.ACTIVE

    @property
    def year(self) -> int:
        return self.game.year


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions with a fresh game
    - Track sessions by name
    - Clean up finished sessions

    No persistence - sessions are in-memory only.
    """

    def __init__(self):
        self._sessions: dict[str, Session] = {}
        self._ids = count(1)
        self._lock = threading.Lock()

    def create_session(
        self,
        max_years: int,
        description: str = "",
        seed: int | None = None,
        name: str | None = None,
    ) -> Session:
        """
        Create a new game session.

        Args:
            max_years: Length of the term
            description: Free text shown in listings
            seed: Seed for this session's random source (for reproducible play)
            name: Session name; generated as ham_N when omitted

        Returns:
            New Session at year 1

        Raises:
            ValueError: max_years is below 1
            SessionExists: name is already taken
        """
        if max_years < 1:
            raise ValueError(f"max_years must be at least 1, got {max_years}")

        with self._lock:
            if name is None:
                name = f"ham_{next(self._ids)}"
                while name in self._sessions:
                    name = f"ham_{next(self._ids)}"
            elif name in self._sessions:
                raise SessionExists(f"Game {name} already exists")

            session = Session(
                session_id=name,
                game=new_game(max_years),
                reducer=Reducer(rng=random.Random(seed)),
                created_at=time.time(),
                description=description,
            )
            self._sessions[name] = session

        logger.info("Created game %s for %d years", name, max_years)
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by name."""
        with self._lock:
            return self._sessions.get(session_id)

    def end_session(self, session_id: str, reason: str = "completed") -> bool:
        """
        End a session and remove it.

        Returns False if no such session exists.
        """
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if not session:
            return False

        if session.is_active():
            session.status = SessionState.ABANDONED
        logger.info("Ended game %s (%s)", session_id, reason)
        return True

    def list_sessions(self) -> list[Session]:
        """All sessions, oldest first."""
        with self._lock:
            sessions = list(self._sessions.values())
        return sorted(sessions, key=lambda s: s.created_at)

    def list_active_sessions(self) -> list[str]:
        """List names of sessions still accepting actions."""
        with self._lock:
            sessions = list(self._sessions.items())
        return [sid for sid, session in sessions if session.is_active()]

    def cleanup_stale_sessions(self, max_age_seconds: int = 3600) -> int:
        """
        Remove finished sessions older than max_age.

        Returns the number of sessions removed.
        """
        current_time = time.time()
        with self._lock:
            sessions = list(self._sessions.items())
        to_remove = [
            session_id
            for session_id, session in sessions
            if current_time - session.created_at > max_age_seconds and not session.is_active()
        ]

        # A concurrent end_session may already have taken some of these.
        return sum(self.end_session(session_id, reason="stale") for session_id in to_remove)
