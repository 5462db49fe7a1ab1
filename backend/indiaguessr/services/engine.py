import logging
import random
from typing import List, Optional

from ..config import Settings
from ..exceptions import SequenceViolation
from ..models.state import GameSession, GameStatus, GuessOutcome, Round, RoundResult
from .divisions import DivisionCatalog
from .geodesy import haversine_distance
from .sampler import sample_uniform_point_in_disk
from .scoring import calculate_score

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Round and score state machine.

    A session moves NOT_STARTED -> ROUND_ACTIVE -> ROUND_REVEALED and then
    either back to ROUND_ACTIVE or on to FINISHED. Calling an operation from
    any other state raises SequenceViolation. The engine never renders
    anything; callers get back plain data to draw.
    """

    def __init__(
        self,
        catalog: DivisionCatalog,
        rounds_per_game: int = 5,
        radius_km: float = 70.0,
        shrink_factor: float = 0.95,
        max_points: int = 5000,
        points_per_km: float = 8.0,
        rng: Optional[random.Random] = None
    ):
        self.catalog = catalog
        self.rounds_per_game = rounds_per_game
        self.radius_km = radius_km
        self.shrink_factor = shrink_factor
        self.max_points = max_points
        self.points_per_km = points_per_km
        self.rng = rng or random.Random()

    @classmethod
    def from_settings(
        cls,
        catalog: DivisionCatalog,
        settings: Settings,
        rng: Optional[random.Random] = None
    ) -> "GameEngine":
        return cls(
            catalog,
            rounds_per_game=settings.ROUNDS_PER_GAME,
            radius_km=settings.POINT_RADIUS_KM,
            shrink_factor=settings.SAMPLE_SHRINK_FACTOR,
            max_points=settings.MAX_POINTS,
            points_per_km=settings.POINTS_PER_KM,
            rng=rng
        )

    def list_division_names(self) -> List[str]:
        return self.catalog.names()

    def start_session(self, total_rounds: Optional[int] = None) -> GameSession:
        """Create a session and start its first round."""
        total_rounds = self.rounds_per_game if total_rounds is None else total_rounds
        if total_rounds < 1:
            raise ValueError("A game needs at least one round")

        session = GameSession(total_rounds=total_rounds)
        logger.info("Started game %s with %d rounds", session.id, total_rounds)
        self.start_round(session)
        return session

    def start_round(self, session: GameSession) -> Round:
        """
        Begin the next round of a session.

        The true division is drawn with replacement, so the same division may
        come up in several rounds of one game.
        """
        if session.status not in (GameStatus.NOT_STARTED, GameStatus.ROUND_REVEALED):
            raise SequenceViolation(
                f"Cannot start a round while the game is {session.status.value}"
            )
        if session.current_round_index >= session.total_rounds:
            raise SequenceViolation(
                f"All {session.total_rounds} rounds have already been played"
            )

        truth = self.catalog.choose(self.rng)
        point = sample_uniform_point_in_disk(
            truth.centroid, self.radius_km, self.shrink_factor, rng=self.rng
        )

        session.current_round_index += 1
        session.current_round = Round(
            index=session.current_round_index,
            truth=truth,
            sampled_point=point
        )
        session.status = GameStatus.ROUND_ACTIVE
        logger.debug("Game %s: round %d started", session.id, session.current_round_index)
        return session.current_round

    def evaluate_guess(self, session: GameSession, guessed_name: str) -> GuessOutcome:
        """
        Score a guess for the active round and reveal it.

        Distance is measured from the sampled point to the guessed division's
        centroid, so a correct name still usually shows a non-zero distance.

        Raises:
            SequenceViolation: no round is waiting for a guess
            InvalidDivisionName: guessed_name is not in the catalog
        """
        if session.status != GameStatus.ROUND_ACTIVE or session.current_round is None:
            raise SequenceViolation(
                f"Cannot guess while the game is {session.status.value}"
            )

        guessed = self.catalog.get(guessed_name)
        current = session.current_round

        is_exact_match = guessed.name == current.truth.name
        distance = haversine_distance(current.sampled_point, guessed.centroid)
        points = calculate_score(
            distance, is_exact_match, self.max_points, self.points_per_km
        )

        outcome = GuessOutcome(
            guessed_division_name=guessed.name,
            truth_name=current.truth.name,
            is_exact_match=is_exact_match,
            distance_km=distance,
            points_awarded=points,
            max_points=self.max_points
        )

        session.cumulative_score += points
        session.history.append(RoundResult(
            round=current,
            guessed_centroid=guessed.centroid,
            outcome=outcome
        ))
        session.status = GameStatus.ROUND_REVEALED
        logger.info(
            "Game %s: round %d guessed %r (%s), %.1f km, %d points",
            session.id, current.index, guessed.name,
            "correct" if is_exact_match else "wrong", distance, points
        )
        return outcome

    def reveal(self, session: GameSession, selected_name: Optional[str] = None) -> GuessOutcome:
        """
        Reveal the active round using the current selection.

        With nothing selected the first division of the catalog stands in as
        the guess, and is scored like any other guess.
        """
        return self.evaluate_guess(session, selected_name or self.catalog.first().name)

    def advance_or_finish(self, session: GameSession) -> GameStatus:
        """Start the next round, or finish the game after the last one."""
        if session.status != GameStatus.ROUND_REVEALED:
            raise SequenceViolation(
                f"Cannot advance while the game is {session.status.value}"
            )

        if session.is_last_round:
            session.status = GameStatus.FINISHED
            logger.info(
                "Game %s finished with %d points", session.id, session.cumulative_score
            )
        else:
            self.start_round(session)
        return session.status
