"""Strategies for choosing the scoring subset of an oversized roster."""

from __future__ import annotations

from itertools import combinations
from typing import List, Protocol, Sequence

from teambalance.models import PlayerSlot, SkillWeights

from .scoring import group_score, score


class SubsetSelector(Protocol):
    def select_best(
        self, players: Sequence[PlayerSlot], cap: int, weights: SkillWeights
    ) -> List[PlayerSlot]: ...


class SlidingWindowSelector:
    """Cheap non-exhaustive search over score-sorted windows.

    The roster-order prefix of ``cap`` players is the baseline. Players are
    then sorted ascending by individual score and each window starting at
    ``0 .. len(players) - cap - 1`` is tried; a window only replaces the
    current best when it scores strictly higher. For 8 players and a cap of 6
    that is three candidates out of 28 possible subsets.
    """

    def select_best(
        self, players: Sequence[PlayerSlot], cap: int, weights: SkillWeights
    ) -> List[PlayerSlot]:
        if len(players) <= cap:
            return list(players)

        best = list(players[:cap])
        best_score = group_score(best, weights)

        ordered = sorted(players, key=lambda slot: score(slot, weights))
        for start in range(len(players) - cap):
            window = ordered[start:start + cap]
            window_score = group_score(window, weights)
            if window_score > best_score:
                best = window
                best_score = window_score
        return best


class ExhaustiveSelector:
    """Evaluate every ``cap``-sized combination; first best in roster order wins."""

    def select_best(
        self, players: Sequence[PlayerSlot], cap: int, weights: SkillWeights
    ) -> List[PlayerSlot]:
        if len(players) <= cap:
            return list(players)

        best: List[PlayerSlot] = []
        best_score = float("-inf")
        for candidate in combinations(players, cap):
            candidate_score = group_score(candidate, weights)
            if candidate_score > best_score:
                best = list(candidate)
                best_score = candidate_score
        return best


DEFAULT_SELECTOR: SubsetSelector = SlidingWindowSelector()
