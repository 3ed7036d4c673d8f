"""Pairwise-swap hill climbing that narrows the team score spread."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import time
from typing import Dict, List, Literal, Optional, Tuple

from teambalance.config import EngineSettings
from teambalance.models import PlayerSlot, SkillWeights, Team

from .aggregate import recompute_team
from .scoring import score_spread
from .subset import SubsetSelector


logger = logging.getLogger(__name__)

StopReason = Literal["converged", "iterations", "time"]


@dataclass(frozen=True)
class OptimizationOutcome:
    iterations: int
    elapsed_ms: float
    spread: float
    stopped_by: StopReason
    accepted_swaps: int = 0


_TeamState = Tuple[List[PlayerSlot], float, Dict[str, float]]


def _snapshot(team: Team) -> _TeamState:
    return list(team.players), team.total_score, dict(team.skill_averages)


def _restore(team: Team, state: _TeamState) -> None:
    players, total, averages = state
    team.players = players
    team.total_score = total
    team.skill_averages = averages


def _elapsed_ms(started_at: float) -> float:
    return (time.perf_counter() - started_at) * 1000.0


def optimize_team_balance(
    teams: List[Team],
    weights: SkillWeights,
    *,
    settings: Optional[EngineSettings] = None,
    started_at: Optional[float] = None,
    selector: Optional[SubsetSelector] = None,
) -> OptimizationOutcome:
    """Swap unlocked players between team pairs while the spread improves.

    Every pass scans all team pairs and all player positions, keeping each
    swap that lowers the spread. Iteration and time limits are checked only
    at the start of a pass; the run stops once elapsed time exceeds
    ``time_limit_ms``. ``started_at`` is a ``time.perf_counter`` reading;
    it defaults to now.
    """

    settings = settings or EngineSettings()
    clock_start = started_at if started_at is not None else time.perf_counter()
    epsilon = settings.improvement_epsilon

    best_spread = score_spread(teams)
    iterations = 0
    accepted = 0
    improved = True
    stopped_by: StopReason = "converged"

    while improved:
        if iterations >= settings.max_iterations:
            stopped_by = "iterations"
            break
        if _elapsed_ms(clock_start) > settings.time_limit_ms:
            stopped_by = "time"
            break

        improved = False
        iterations += 1

        for i in range(len(teams)):
            for j in range(i + 1, len(teams)):
                team_a = teams[i]
                team_b = teams[j]
                for pos_a in range(len(team_a.players)):
                    for pos_b in range(len(team_b.players)):
                        slot_a = team_a.players[pos_a]
                        slot_b = team_b.players[pos_b]
                        if slot_a.locked or slot_b.locked:
                            continue

                        state_a = _snapshot(team_a)
                        state_b = _snapshot(team_b)
                        team_a.players[pos_a] = slot_b
                        team_b.players[pos_b] = slot_a
                        recompute_team(team_a, weights, selector, active_roster_size=settings.active_roster_size)
                        recompute_team(team_b, weights, selector, active_roster_size=settings.active_roster_size)

                        spread = score_spread(teams)
                        if spread < best_spread - epsilon:
                            logger.debug(
                                "Swapped %s (%s) with %s (%s); spread %.4f -> %.4f",
                                slot_a.player_id,
                                team_a.team_id,
                                slot_b.player_id,
                                team_b.team_id,
                                best_spread,
                                spread,
                            )
                            best_spread = spread
                            improved = True
                            accepted += 1
                        else:
                            _restore(team_a, state_a)
                            _restore(team_b, state_b)

    return OptimizationOutcome(
        iterations=iterations,
        elapsed_ms=_elapsed_ms(clock_start),
        spread=best_spread,
        stopped_by=stopped_by,
        accepted_swaps=accepted,
    )
