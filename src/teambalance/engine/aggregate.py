"""Recompute cached team aggregates from the current roster."""

from __future__ import annotations

from typing import Optional

from teambalance.models import SKILL_NAMES, SkillWeights, Team, empty_skill_averages

from .scoring import score
from .subset import DEFAULT_SELECTOR, SubsetSelector


ACTIVE_ROSTER_SIZE = 6


def recompute_team(
    team: Team,
    weights: SkillWeights,
    selector: Optional[SubsetSelector] = None,
    *,
    active_roster_size: int = ACTIVE_ROSTER_SIZE,
) -> Team:
    """Refresh ``team.total_score`` and ``team.skill_averages`` in place.

    Rosters larger than ``active_roster_size`` are scored on the subset chosen
    by ``selector``; the remaining players stay on the team as substitutes.
    """

    if not team.players:
        team.total_score = 0.0
        team.skill_averages = empty_skill_averages()
        return team

    if len(team.players) > active_roster_size:
        chooser = selector or DEFAULT_SELECTOR
        effective = chooser.select_best(team.players, active_roster_size, weights)
    else:
        effective = team.players

    count = len(effective)
    team.total_score = sum(score(slot, weights) for slot in effective)
    team.skill_averages = {
        name: sum(slot.skills[name] for slot in effective) / count for name in SKILL_NAMES
    }
    return team


# Public name used by manual-edit flows.
update_team_scores = recompute_team
