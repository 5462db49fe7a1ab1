from pydantic import BaseModel, Field
from typing import Optional, List

from .state import GameStatus


class GuessRequest(BaseModel):
    """Request for submitting a guess."""
    division_name: str


class RevealRequest(BaseModel):
    """Request for revealing a round; falls back to the first division."""
    division_name: Optional[str] = None


class GuessResponse(BaseModel):
    """Response after a guess or reveal."""
    round_number: int
    guessed_division_name: str
    true_division_name: str
    is_exact_match: bool
    distance_km: float
    score: int
    total_score: int
    actual_latitude: float
    actual_longitude: float
    guess_latitude: float
    guess_longitude: float
    game_completed: bool


class MapView(BaseModel):
    """Where the frontend should center the map."""
    latitude: float
    longitude: float
    zoom: int


class RoundResponse(BaseModel):
    """Response with the current round (true division hidden until reveal)."""
    round_number: int
    point_latitude: float
    point_longitude: float
    region: List[List[float]]
    view: MapView
    revealed: bool
    true_division_name: Optional[str] = None


class RoundSummary(BaseModel):
    """One completed round."""
    round_number: int
    true_division_name: str
    guessed_division_name: str
    is_exact_match: bool
    distance_km: float
    score: int
    point_latitude: float
    point_longitude: float


class GameSessionCreate(BaseModel):
    """Request to create a new game session."""
    total_rounds: Optional[int] = Field(default=None, ge=1)


class GameSessionResponse(BaseModel):
    """Response with game session details."""
    id: str
    status: GameStatus
    total_rounds: int
    current_round_index: int
    cumulative_score: int

    class Config:
        from_attributes = True


class DivisionListResponse(BaseModel):
    """Division names in selection order."""
    names: List[str]
