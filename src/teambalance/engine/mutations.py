"""Manual edits applied to a generated assignment."""

from __future__ import annotations

from typing import List, Optional

from teambalance.models import SkillWeights, Team

from .aggregate import recompute_team
from .subset import SubsetSelector


def swap_player(
    teams: List[Team],
    player_id: str,
    from_index: int,
    to_index: int,
    weights: SkillWeights,
    selector: Optional[SubsetSelector] = None,
) -> bool:
    """Move an unlocked player between teams and rescore both.

    Returns False without touching anything when the indices are invalid or
    equal, or the player is missing from the source team or locked.
    """

    if from_index == to_index:
        return False
    if not 0 <= from_index < len(teams) or not 0 <= to_index < len(teams):
        return False

    source = teams[from_index]
    target = teams[to_index]
    position = next(
        (idx for idx, slot in enumerate(source.players) if slot.player_id == player_id),
        None,
    )
    if position is None:
        return False
    slot = source.players[position]
    if slot.locked:
        return False

    source.players.pop(position)
    target.players.append(slot)
    recompute_team(source, weights, selector)
    recompute_team(target, weights, selector)
    return True


def set_lock(teams: List[Team], player_id: str, locked: bool) -> bool:
    """Pin or release a player wherever they are; scores are unaffected."""

    for team in teams:
        slot = team.find(player_id)
        if slot is not None:
            slot.locked = locked
            return True
    return False


swap_players = swap_player
lock_player = set_lock
