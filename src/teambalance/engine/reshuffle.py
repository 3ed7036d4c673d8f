"""Regenerate an assignment that visibly differs from the previous one."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import zip_longest
import logging
import random
from typing import List, Optional, Protocol, Sequence

from teambalance.config import EngineSettings
from teambalance.models import PlayerRecord, PlayerSlot, SkillWeights, Team

from .aggregate import recompute_team
from .allocator import build_empty_teams, target_team_size
from .optimizer import optimize_team_balance
from .scoring import score
from .service import NoEligiblePlayersError
from .subset import SubsetSelector


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReshuffleResult:
    teams: List[Team]
    moved_players: int
    attempts: int
    forced: bool


def count_moved_players(previous: Sequence[Team], candidate: Sequence[Team]) -> int:
    """Sum of per-team symmetric differences of player ids, paired by index."""

    moved = 0
    for old, new in zip_longest(previous, candidate):
        old_ids = set(old.player_ids()) if old is not None else set()
        new_ids = set(new.player_ids()) if new is not None else set()
        moved += len(old_ids ^ new_ids)
    return moved


def chunk_into_teams(
    players: Sequence[PlayerRecord],
    num_teams: int,
    players_per_team: Optional[int],
    weights: SkillWeights,
    selector: Optional[SubsetSelector] = None,
) -> List[Team]:
    """Fill teams with consecutive runs of ``players`` in the given order.

    Players beyond ``num_teams * size`` are appended round-robin.
    """

    teams = build_empty_teams(num_teams)
    slots = [PlayerSlot.from_record(player, score(player, weights)) for player in players]
    size = target_team_size(len(slots), num_teams, players_per_team)
    capacity = size * num_teams
    for offset, slot in enumerate(slots):
        if offset < capacity:
            team_idx = offset // size
        else:
            team_idx = (offset - capacity) % num_teams
        teams[team_idx].players.append(slot)
    for team in teams:
        recompute_team(team, weights, selector)
    return teams


class ReshuffleStrategy(Protocol):
    def build(
        self,
        players: Sequence[PlayerRecord],
        num_teams: int,
        players_per_team: Optional[int],
        weights: SkillWeights,
    ) -> List[Team]: ...


class RandomizedReshuffle:
    """Shuffle the pool, chunk it into teams and re-balance."""

    def __init__(
        self,
        rng: random.Random,
        settings: Optional[EngineSettings] = None,
        selector: Optional[SubsetSelector] = None,
    ) -> None:
        self.rng = rng
        self.settings = settings or EngineSettings()
        self.selector = selector

    def build(self, players, num_teams, players_per_team, weights):
        shuffled = list(players)
        self.rng.shuffle(shuffled)
        teams = chunk_into_teams(shuffled, num_teams, players_per_team, weights, self.selector)
        optimize_team_balance(teams, weights, settings=self.settings, selector=self.selector)
        return teams


class ForcedRotation:
    """Rotate the pool by 1..n-1 places and chunk it without re-balancing."""

    def __init__(self, rng: random.Random, selector: Optional[SubsetSelector] = None) -> None:
        self.rng = rng
        self.selector = selector

    def build(self, players, num_teams, players_per_team, weights):
        pool = list(players)
        shift = self.rng.randint(1, len(pool) - 1) if len(pool) > 1 else 0
        rotated = pool[-shift:] + pool[:-shift] if shift else pool
        return chunk_into_teams(rotated, num_teams, players_per_team, weights, self.selector)


def reshuffle(
    players: Sequence[PlayerRecord],
    previous_teams: Sequence[Team],
    number_of_teams: int,
    players_per_team: Optional[int] = None,
    skill_weights: Optional[SkillWeights] = None,
    *,
    seed: Optional[int] = None,
    settings: Optional[EngineSettings] = None,
    primary: Optional[ReshuffleStrategy] = None,
    fallback: Optional[ReshuffleStrategy] = None,
) -> ReshuffleResult:
    """Retry ``primary`` until enough players change teams, else use ``fallback``."""

    settings = settings or EngineSettings()
    weights = skill_weights or SkillWeights()
    eligible = [player for player in players if player.is_available]
    if not eligible:
        raise NoEligiblePlayersError("No available players found")
    rng = random.Random(seed)
    primary = primary or RandomizedReshuffle(rng, settings)
    fallback = fallback or ForcedRotation(rng)

    for attempt in range(1, settings.reshuffle_max_attempts + 1):
        candidate = primary.build(eligible, number_of_teams, players_per_team, weights)
        moved = count_moved_players(previous_teams, candidate)
        if moved >= settings.reshuffle_min_moves:
            logger.info("Reshuffled after %s attempt(s); %s players moved", attempt, moved)
            return ReshuffleResult(teams=candidate, moved_players=moved, attempts=attempt, forced=False)

    logger.warning(
        "No reshuffle moved %s+ players in %s attempts; forcing a rotation",
        settings.reshuffle_min_moves,
        settings.reshuffle_max_attempts,
    )
    forced = fallback.build(eligible, number_of_teams, players_per_team, weights)
    return ReshuffleResult(
        teams=forced,
        moved_players=count_moved_players(previous_teams, forced),
        attempts=settings.reshuffle_max_attempts,
        forced=True,
    )
