import pytest

from teambalance.engine import ExhaustiveSelector, recompute_team, update_team_scores
from teambalance.models import PlayerSlot, SkillWeights, Team


ATTACK_ONLY = SkillWeights(serve=0, set=0, block=0, receive=0, attack=1.0, defense=0)


def _slot(player_id: str, attack: float, block: float = 0.0) -> PlayerSlot:
    return PlayerSlot(
        player_id=player_id,
        name=player_id,
        score=attack,
        skills={"serve": 0.0, "set": 0.0, "block": block, "receive": 0.0, "attack": attack, "defense": 0.0},
    )


def test_empty_team_resets_to_zero():
    team = Team(team_id="t1", name="One", total_score=42.0)
    team.skill_averages["attack"] = 9.0

    recompute_team(team, ATTACK_ONLY)

    assert team.total_score == 0.0
    assert set(team.skill_averages.values()) == {0.0}


def test_small_roster_uses_every_player():
    team = Team(team_id="t1", name="One", players=[_slot("a", 6, block=2), _slot("b", 4, block=4), _slot("c", 2)])

    recompute_team(team, ATTACK_ONLY)

    assert team.total_score == pytest.approx(12.0)
    assert team.skill_averages["attack"] == pytest.approx(4.0)
    assert team.skill_averages["block"] == pytest.approx(2.0)


def test_six_players_are_all_scored():
    team = Team(team_id="t1", name="One", players=[_slot(f"p{i}", i) for i in range(1, 7)])
    recompute_team(team, ATTACK_ONLY)
    assert team.total_score == pytest.approx(21.0)


def test_seventh_player_is_a_substitute_for_scoring_only():
    players = [_slot(f"p{i}", i) for i in range(7, 0, -1)]
    team = Team(team_id="t1", name="One", players=list(players))

    recompute_team(team, ATTACK_ONLY)

    assert len(team.players) == 7
    assert team.total_score == pytest.approx(27.0)
    assert team.skill_averages["attack"] == pytest.approx(4.5)


def test_selector_can_be_swapped_out():
    team = Team(team_id="t1", name="One", players=[_slot(f"p{i}", i) for i in range(1, 8)])

    recompute_team(team, ATTACK_ONLY)
    assert team.total_score == pytest.approx(21.0)

    recompute_team(team, ATTACK_ONLY, ExhaustiveSelector())
    assert team.total_score == pytest.approx(27.0)


def test_scores_follow_current_weights_not_slot_snapshot():
    team = Team(team_id="t1", name="One", players=[_slot("a", 6, block=2)])
    block_only = SkillWeights(serve=0, set=0, block=1.0, receive=0, attack=0, defense=0)

    update_team_scores(team, block_only)

    assert team.total_score == pytest.approx(2.0)
