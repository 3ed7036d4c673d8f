"""End-to-end team generation: draft, score, then balance."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math
import time
from typing import List, Optional, Sequence

from teambalance.config import EngineSettings, load_settings
from teambalance.models import PlayerRecord, SkillWeights, Team

from .allocator import allocate
from .optimizer import OptimizationOutcome, optimize_team_balance
from .scoring import score_spread, skill_balance_score
from .subset import SubsetSelector


logger = logging.getLogger(__name__)

_WEIGHT_SUM_TOLERANCE = 1e-6


class NoEligiblePlayersError(ValueError):
    """Raised when the pool has no available players to place."""


@dataclass
class GenerationResult:
    teams: List[Team]
    total_score_difference: float
    skill_balance_score: float
    iterations: int
    execution_time_ms: float
    random_seed: Optional[int] = None
    optimization: Optional[OptimizationOutcome] = None


def generate_teams(
    players: Sequence[PlayerRecord],
    number_of_teams: int,
    players_per_team: Optional[int] = None,
    skill_weights: Optional[SkillWeights] = None,
    random_seed: Optional[int] = None,
    *,
    settings: Optional[EngineSettings] = None,
    selector: Optional[SubsetSelector] = None,
) -> GenerationResult:
    """Split available players into ``number_of_teams`` balanced teams.

    The result is deterministic for a given player order, weights and team
    sizing. ``random_seed`` is carried through to the result but does not
    influence the draft or the optimizer.
    """

    started_at = time.perf_counter()
    settings = settings or load_settings()
    weights = skill_weights or SkillWeights()

    if number_of_teams < 1:
        raise ValueError(f"number_of_teams must be at least 1, got {number_of_teams}")
    if not math.isclose(weights.total, 1.0, abs_tol=_WEIGHT_SUM_TOLERANCE):
        logger.warning("Skill weights sum to %.4f; scores are relative only", weights.total)

    available = [player for player in players if player.is_available]
    if not available:
        raise NoEligiblePlayersError("No available players found")

    teams = allocate(available, number_of_teams, players_per_team, weights, selector)
    outcome = optimize_team_balance(
        teams,
        weights,
        settings=settings,
        started_at=started_at,
        selector=selector,
    )

    result = GenerationResult(
        teams=teams,
        total_score_difference=score_spread(teams),
        skill_balance_score=skill_balance_score(teams, weights),
        iterations=outcome.iterations,
        execution_time_ms=(time.perf_counter() - started_at) * 1000.0,
        random_seed=random_seed,
        optimization=outcome,
    )
    logger.info(
        "Generated %s teams from %s players: spread=%.3f iterations=%s stopped_by=%s (%.1f ms)",
        number_of_teams,
        len(available),
        result.total_score_difference,
        result.iterations,
        outcome.stopped_by,
        result.execution_time_ms,
    )
    return result
