from fastapi import APIRouter, Depends, HTTPException, status
from typing import List, Optional

from ..dependencies import get_engine, get_store, get_game_session
from ..exceptions import InvalidDivisionName, SequenceViolation
from ..models.game import (
    GameSessionCreate, GameSessionResponse, GuessRequest, GuessResponse,
    MapView, RevealRequest, RoundResponse, RoundSummary
)
from ..models.state import GameSession, GameStatus, GuessOutcome
from ..services.engine import GameEngine
from ..services.geodesy import region_polygon
from ..services.sessions import SessionStore
from ..config import get_settings

router = APIRouter(prefix="/game", tags=["Game"])
settings = get_settings()


def _guess_response(game: GameSession, outcome: GuessOutcome) -> GuessResponse:
    result = game.last_result
    return GuessResponse(
        round_number=result.round.index,
        guessed_division_name=outcome.guessed_division_name,
        true_division_name=outcome.truth_name,
        is_exact_match=outcome.is_exact_match,
        distance_km=outcome.distance_km,
        score=outcome.points_awarded,
        total_score=game.cumulative_score,
        actual_latitude=result.round.sampled_point.lat,
        actual_longitude=result.round.sampled_point.lng,
        guess_latitude=result.guessed_centroid.lat,
        guess_longitude=result.guessed_centroid.lng,
        game_completed=game.is_last_round
    )


def _sequence_error(e: SequenceViolation) -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.post("/start", response_model=GameSessionResponse, status_code=status.HTTP_201_CREATED)
async def start_game(
    game_data: Optional[GameSessionCreate] = None,
    engine: GameEngine = Depends(get_engine),
    store: SessionStore = Depends(get_store)
):
    """Start a new game session with its first round."""
    game = engine.start_session(game_data.total_rounds if game_data else None)
    store.add(game)
    return game


@router.get("/{session_id}", response_model=GameSessionResponse)
async def get_game(game: GameSession = Depends(get_game_session)):
    """Get the game session state."""
    return game


@router.get("/{session_id}/round", response_model=RoundResponse)
async def get_current_round(
    game: GameSession = Depends(get_game_session),
    engine: GameEngine = Depends(get_engine)
):
    """Get the current round (true division withheld until it is revealed)."""
    current_round = game.current_round
    if current_round is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No round has been started."
        )

    revealed = game.status in (GameStatus.ROUND_REVEALED, GameStatus.FINISHED)
    centroid = current_round.truth.centroid
    return RoundResponse(
        round_number=current_round.index,
        point_latitude=current_round.sampled_point.lat,
        point_longitude=current_round.sampled_point.lng,
        region=region_polygon(centroid, engine.radius_km, settings.REGION_POLYGON_POINTS),
        view=MapView(latitude=centroid.lat, longitude=centroid.lng, zoom=settings.MAP_ZOOM),
        revealed=revealed,
        true_division_name=current_round.truth.name if revealed else None
    )


@router.post("/{session_id}/guess", response_model=GuessResponse)
async def submit_guess(
    guess: GuessRequest,
    game: GameSession = Depends(get_game_session),
    engine: GameEngine = Depends(get_engine)
):
    """Submit a division guess for the current round."""
    try:
        outcome = engine.evaluate_guess(game, guess.division_name)
    except InvalidDivisionName as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except SequenceViolation as e:
        raise _sequence_error(e)

    return _guess_response(game, outcome)


@router.post("/{session_id}/reveal", response_model=GuessResponse)
async def reveal_round(
    reveal: Optional[RevealRequest] = None,
    game: GameSession = Depends(get_game_session),
    engine: GameEngine = Depends(get_engine)
):
    """Reveal the current round, scoring the selected division (or the first one)."""
    selected = reveal.division_name if reveal else None
    try:
        outcome = engine.reveal(game, selected)
    except InvalidDivisionName as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except SequenceViolation as e:
        raise _sequence_error(e)

    return _guess_response(game, outcome)


@router.post("/{session_id}/next", response_model=GameSessionResponse)
async def next_round(
    game: GameSession = Depends(get_game_session),
    engine: GameEngine = Depends(get_engine)
):
    """Move on to the next round, or finish the game after the last one."""
    try:
        engine.advance_or_finish(game)
    except SequenceViolation as e:
        raise _sequence_error(e)
    return game


@router.get("/{session_id}/rounds", response_model=List[RoundSummary])
async def get_game_rounds(game: GameSession = Depends(get_game_session)):
    """Get all completed rounds of the game."""
    return [
        RoundSummary(
            round_number=result.round.index,
            true_division_name=result.outcome.truth_name,
            guessed_division_name=result.outcome.guessed_division_name,
            is_exact_match=result.outcome.is_exact_match,
            distance_km=result.outcome.distance_km,
            score=result.outcome.points_awarded,
            point_latitude=result.round.sampled_point.lat,
            point_longitude=result.round.sampled_point.lng
        )
        for result in game.history
    ]


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_game(
    game: GameSession = Depends(get_game_session),
    store: SessionStore = Depends(get_store)
):
    """Delete a game session."""
    store.delete(game.id)
    return None
