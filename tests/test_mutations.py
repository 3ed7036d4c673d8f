import copy

import pytest

from teambalance.engine import lock_player, recompute_team, set_lock, swap_player, swap_players
from teambalance.models import PlayerSlot, SkillWeights, Team


ATTACK_ONLY = SkillWeights(serve=0, set=0, block=0, receive=0, attack=1.0, defense=0)


def _team(team_id: str, *scores: float) -> Team:
    team = Team(
        team_id=team_id,
        name=team_id,
        players=[
            PlayerSlot(
                player_id=f"{team_id}{idx}",
                name=f"{team_id}{idx}",
                score=value,
                skills={"serve": 0.0, "set": 0.0, "block": 0.0, "receive": 0.0, "attack": value, "defense": 0.0},
            )
            for idx, value in enumerate(scores)
        ],
    )
    return recompute_team(team, ATTACK_ONLY)


def _teams() -> list[Team]:
    return [_team("a", 8, 6, 4), _team("b", 7, 5, 3), _team("c", 2)]


def test_swap_moves_player_and_rescores_both_teams():
    teams = _teams()
    untouched = copy.deepcopy(teams[2])

    assert swap_player(teams, "a1", 0, 1, ATTACK_ONLY) is True

    assert teams[0].player_ids() == ["a0", "a2"]
    assert teams[1].player_ids() == ["b0", "b1", "b2", "a1"]
    assert teams[0].total_score == pytest.approx(12.0)
    assert teams[1].total_score == pytest.approx(21.0)
    assert teams[1].skill_averages["attack"] == pytest.approx(21.0 / 4)
    for team in teams[:2]:
        fresh = recompute_team(copy.deepcopy(team), ATTACK_ONLY)
        assert team.total_score == pytest.approx(fresh.total_score)
        assert team.skill_averages == pytest.approx(fresh.skill_averages)
    assert teams[2] == untouched


@pytest.mark.parametrize(
    "player_id, from_index, to_index",
    [
        ("a1", 0, 0),
        ("a1", -1, 1),
        ("a1", 0, 3),
        ("a1", 5, 1),
        ("b1", 0, 1),
        ("zz", 0, 1),
    ],
)
def test_invalid_swaps_are_rejected_without_mutation(player_id, from_index, to_index):
    teams = _teams()
    before = copy.deepcopy(teams)

    assert swap_player(teams, player_id, from_index, to_index, ATTACK_ONLY) is False
    assert teams == before


def test_locked_player_cannot_be_swapped():
    teams = _teams()
    teams[0].players[1].locked = True
    before = copy.deepcopy(teams)

    assert swap_players(teams, "a1", 0, 1, ATTACK_ONLY) is False
    assert teams == before


def test_set_lock_finds_player_on_any_team():
    teams = _teams()
    totals = [team.total_score for team in teams]

    assert set_lock(teams, "c0", True) is True
    assert teams[2].players[0].locked is True
    assert lock_player(teams, "c0", False) is True
    assert teams[2].players[0].locked is False
    assert [team.total_score for team in teams] == totals


def test_set_lock_unknown_player():
    teams = _teams()
    before = copy.deepcopy(teams)

    assert set_lock(teams, "missing", True) is False
    assert teams == before
