"""Team balancing engine: scoring, drafting, local search and edits."""

from .aggregate import ACTIVE_ROSTER_SIZE, recompute_team, update_team_scores
from .allocator import allocate, snake_draft
from .mutations import lock_player, set_lock, swap_player, swap_players
from .optimizer import OptimizationOutcome, optimize_team_balance
from .scoring import group_score, score, score_spread, skill_balance_score
from .service import GenerationResult, NoEligiblePlayersError, generate_teams
from .reshuffle import (
    ForcedRotation,
    RandomizedReshuffle,
    ReshuffleResult,
    count_moved_players,
    reshuffle,
)
from .subset import ExhaustiveSelector, SlidingWindowSelector, SubsetSelector

__all__ = [
    "ACTIVE_ROSTER_SIZE",
    "ExhaustiveSelector",
    "ForcedRotation",
    "GenerationResult",
    "NoEligiblePlayersError",
    "OptimizationOutcome",
    "RandomizedReshuffle",
    "ReshuffleResult",
    "SlidingWindowSelector",
    "SubsetSelector",
    "allocate",
    "count_moved_players",
    "generate_teams",
    "group_score",
    "lock_player",
    "optimize_team_balance",
    "recompute_team",
    "reshuffle",
    "score",
    "score_spread",
    "set_lock",
    "skill_balance_score",
    "snake_draft",
    "swap_player",
    "swap_players",
    "update_team_scores",
]
