import logging
from collections import OrderedDict

from ..exceptions import SessionNotFound
from ..models.state import GameSession, GameStatus

logger = logging.getLogger(__name__)


class SessionStore:
    """
    In-memory registry of live game sessions, keyed by session id.

    Holds at most max_sessions entries. When full, the oldest finished game
    is dropped first, then the oldest game of any status.
    """

    def __init__(self, max_sessions: int = 1000):
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self.max_sessions = max_sessions
        self._sessions: "OrderedDict[str, GameSession]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def add(self, session: GameSession) -> GameSession:
        self._sessions[session.id] = session
        while len(self._sessions) > self.max_sessions:
            self._evict()
        return session

    def get(self, session_id: str) -> GameSession:
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFound(session_id) from None

    def delete(self, session_id: str) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFound(session_id)

    def _evict(self) -> None:
        victim = next(
            (sid for sid, s in self._sessions.items() if s.status == GameStatus.FINISHED),
            next(iter(self._sessions))
        )
        del self._sessions[victim]
        logger.debug("Evicted game session %s", victim)
