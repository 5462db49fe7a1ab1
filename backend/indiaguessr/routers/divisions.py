from fastapi import APIRouter, Depends

from ..dependencies import get_engine
from ..models.game import DivisionListResponse
from ..services.engine import GameEngine

router = APIRouter(prefix="/divisions", tags=["Divisions"])


@router.get("", response_model=DivisionListResponse)
async def list_divisions(engine: GameEngine = Depends(get_engine)):
    """Names for the guess selection box, in display order."""
    return DivisionListResponse(names=engine.list_division_names())
