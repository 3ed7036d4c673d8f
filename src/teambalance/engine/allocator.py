"""Snake-draft allocation of scored players into teams."""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

from teambalance.models import PlayerRecord, PlayerSlot, SkillWeights, Team

from .aggregate import recompute_team
from .scoring import score
from .subset import SubsetSelector


def build_empty_teams(num_teams: int) -> List[Team]:
    if num_teams < 1:
        raise ValueError(f"number of teams must be at least 1, got {num_teams}")
    return [Team(team_id=f"team_{idx + 1}", name=f"Team {idx + 1}") for idx in range(num_teams)]


def score_players(players: Sequence[PlayerRecord], weights: SkillWeights) -> List[PlayerSlot]:
    """Snapshot players as unlocked slots, strongest first.

    ``sorted`` is stable, so equal scores keep their input order.
    """

    slots = [PlayerSlot.from_record(player, score(player, weights)) for player in players]
    return sorted(slots, key=lambda slot: slot.score, reverse=True)


def target_team_size(total_players: int, num_teams: int, players_per_team: Optional[int]) -> int:
    if players_per_team:
        return players_per_team
    return math.ceil(total_players / num_teams)


def snake_draft(slots: Sequence[PlayerSlot], teams: List[Team], target: int) -> None:
    """Deal ``slots`` into ``teams`` in boustrophedon order.

    Teams already holding ``target`` players are skipped. If a full pass places
    nobody, the remaining players are appended round-robin from the first team.
    """

    index = 0
    forward = True
    order = list(range(len(teams)))
    while index < len(slots):
        placed = 0
        for team_idx in (order if forward else reversed(order)):
            if index >= len(slots):
                break
            team = teams[team_idx]
            if len(team.players) < target:
                team.players.append(slots[index])
                index += 1
                placed += 1
        forward = not forward
        if placed == 0:
            break

    overflow = slots[index:]
    for offset, slot in enumerate(overflow):
        teams[offset % len(teams)].players.append(slot)


def allocate(
    players: Sequence[PlayerRecord],
    num_teams: int,
    players_per_team: Optional[int] = None,
    weights: Optional[SkillWeights] = None,
    selector: Optional[SubsetSelector] = None,
) -> List[Team]:
    """Build freshly scored draft teams from an eligible player list."""

    weights = weights or SkillWeights()
    teams = build_empty_teams(num_teams)
    slots = score_players(players, weights)
    target = target_team_size(len(slots), num_teams, players_per_team)
    snake_draft(slots, teams, target)
    for team in teams:
        recompute_team(team, weights, selector)
    return teams
