"""Weighted skill scoring for players and team snapshots."""

from __future__ import annotations

from typing import Iterable, Mapping, Protocol, Sequence

from teambalance.models import SKILL_NAMES, SkillWeights, Team


class HasSkills(Protocol):
    @property
    def skills(self) -> Mapping[str, float]: ...


def score(item: HasSkills, weights: SkillWeights) -> float:
    """Linear combination of the six skills with ``weights``."""

    skills = item.skills
    return sum(skills[name] * getattr(weights, name) for name in SKILL_NAMES)


def group_score(items: Sequence[HasSkills], weights: SkillWeights) -> float:
    """Weighted score of a group's skill averages, scaled back up by group size."""

    if not items:
        return 0.0
    count = len(items)
    averages = {
        name: sum(item.skills[name] for item in items) / count for name in SKILL_NAMES
    }
    return sum(averages[name] * getattr(weights, name) for name in SKILL_NAMES) * count


def score_spread(teams: Iterable[Team]) -> float:
    """Difference between the highest and lowest team totals."""

    totals = [team.total_score for team in teams]
    if len(totals) < 2:
        return 0.0
    return max(totals) - min(totals)


def skill_balance_score(teams: Sequence[Team], weights: SkillWeights) -> float:
    """Weighted sum of per-skill population variance across team averages.

    Lower is better; zero means every team has identical skill averages.
    """

    if len(teams) < 2:
        return 0.0
    total = 0.0
    for name in SKILL_NAMES:
        values = [team.skill_averages[name] for team in teams]
        mean = sum(values) / len(values)
        variance = sum((value - mean) ** 2 for value in values) / len(values)
        total += variance * getattr(weights, name)
    return total
