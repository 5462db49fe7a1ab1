from enum import Enum
from typing import List, Optional
from uuid import uuid4

from pydantic import BaseModel, Field, model_validator

from .geo import Division, GeoPoint


class GameStatus(str, Enum):
    """Lifecycle of a game session."""
    NOT_STARTED = "not_started"
    ROUND_ACTIVE = "round_active"
    ROUND_REVEALED = "round_revealed"
    FINISHED = "finished"


class Round(BaseModel):
    """Ground truth of a single round."""
    index: int = Field(..., ge=1)
    truth: Division
    sampled_point: GeoPoint

    class Config:
        frozen = True


class GuessOutcome(BaseModel):
    """Result of evaluating one guess."""
    guessed_division_name: str
    truth_name: str
    is_exact_match: bool
    distance_km: float = Field(..., ge=0)
    points_awarded: int = Field(..., ge=0)
    max_points: int = Field(default=5000, ge=0)

    class Config:
        frozen = True

    @model_validator(mode="after")
    def check_points_within_max(self) -> "GuessOutcome":
        if self.points_awarded > self.max_points:
            raise ValueError(
                f"points_awarded {self.points_awarded} exceeds max_points {self.max_points}"
            )
        return self


class RoundResult(BaseModel):
    """A completed round together with how it was scored."""
    round: Round
    guessed_centroid: GeoPoint
    outcome: GuessOutcome


class GameSession(BaseModel):
    """
    Mutable state of one game.

    Only GameEngine changes these fields; everything else treats the session
    as read-only.
    """
    id: str = Field(default_factory=lambda: uuid4().hex)
    total_rounds: int = Field(..., ge=1)
    current_round_index: int = 0
    cumulative_score: int = 0
    status: GameStatus = GameStatus.NOT_STARTED
    current_round: Optional[Round] = None
    history: List[RoundResult] = Field(default_factory=list)

    @property
    def is_last_round(self) -> bool:
        return self.current_round_index >= self.total_rounds

    @property
    def last_result(self) -> Optional[RoundResult]:
        return self.history[-1] if self.history else None
