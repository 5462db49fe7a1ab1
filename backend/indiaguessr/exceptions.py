class GameError(Exception):
    """Base class for errors raised by the game engine."""


class InvalidDivisionName(GameError):
    """The guessed name is not one of the known divisions."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown division: {name!r}")


class SequenceViolation(GameError):
    """An engine operation was called from the wrong game state."""


class SessionNotFound(GameError):
    """No live game session with the given id."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Game session {session_id!r} not found")
