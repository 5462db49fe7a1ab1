from fastapi import Depends, HTTPException, Request, status

from .exceptions import SessionNotFound
from .models.state import GameSession
from .services.engine import GameEngine
from .services.sessions import SessionStore


def get_engine(request: Request) -> GameEngine:
    """Game engine created at startup."""
    return request.app.state.engine


def get_store(request: Request) -> SessionStore:
    """Live session registry created at startup."""
    return request.app.state.sessions


def get_game_session(
    session_id: str,
    store: SessionStore = Depends(get_store)
) -> GameSession:
    """Resolve the session id in the path, 404 if it is unknown."""
    try:
        return store.get(session_id)
    except SessionNotFound as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{e}. Start a new game."
        )
