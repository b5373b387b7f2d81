"""
Session Module - Manages ephemeral game sessions.

A session represents one play-through of a game:
- Created when a player starts a game
- Holds the current year, state and last delta
- Applies one action per turn through the GameLoop
- Ends when the term is over, the ruler is overthrown, or the player quits

Sessions are EPHEMERAL: nothing is saved between process runs.
"""

from .manager import SessionManager, Session, SessionState, SessionExists
from .game_loop import GameLoop, GameFinished, TurnResult

__all__ = [
    "SessionManager",
    "Session",
    "SessionState",
    "SessionExists",
    "GameLoop",
    "GameFinished",
    "TurnResult",
]
