import copy
import time

import pytest

from teambalance.config import EngineSettings
from teambalance.engine import optimize_team_balance, recompute_team, score_spread
from teambalance.models import PlayerSlot, SkillWeights, Team


ATTACK_ONLY = SkillWeights(serve=0, set=0, block=0, receive=0, attack=1.0, defense=0)


def _team(team_id: str, *scores: float) -> Team:
    team = Team(
        team_id=team_id,
        name=team_id,
        players=[
            PlayerSlot(
                player_id=f"{team_id}-{idx}",
                name=f"{team_id} {idx}",
                score=value,
                skills={"serve": 0.0, "set": 0.0, "block": 0.0, "receive": 0.0, "attack": value, "defense": 0.0},
            )
            for idx, value in enumerate(scores)
        ],
    )
    return recompute_team(team, ATTACK_ONLY)


def _lopsided() -> list[Team]:
    return [_team("a", 10, 9, 8), _team("b", 1, 2, 3)]


def test_balanced_draft_needs_one_pass():
    teams = [_team("a", 10, 7, 6), _team("b", 9, 8, 5)]
    before = copy.deepcopy(teams)

    outcome = optimize_team_balance(teams, ATTACK_ONLY, settings=EngineSettings())

    assert outcome.iterations == 1
    assert outcome.stopped_by == "converged"
    assert outcome.accepted_swaps == 0
    assert outcome.spread == pytest.approx(1.0)
    assert teams == before


def test_swaps_reduce_spread_and_conserve_players():
    teams = _lopsided()
    ids_before = sorted(pid for team in teams for pid in team.player_ids())

    outcome = optimize_team_balance(teams, ATTACK_ONLY, settings=EngineSettings())

    assert outcome.spread < 21.0
    assert outcome.spread == pytest.approx(score_spread(teams))
    assert outcome.accepted_swaps >= 1
    assert sorted(pid for team in teams for pid in team.player_ids()) == ids_before
    assert [len(team.players) for team in teams] == [3, 3]
    assert sum(team.total_score for team in teams) == pytest.approx(33.0)


def test_cached_scores_match_fresh_recompute():
    teams = _lopsided()
    optimize_team_balance(teams, ATTACK_ONLY, settings=EngineSettings())

    for team in teams:
        fresh = recompute_team(copy.deepcopy(team), ATTACK_ONLY)
        assert team.total_score == pytest.approx(fresh.total_score)
        assert team.skill_averages == pytest.approx(fresh.skill_averages)


def test_results_are_deterministic():
    first = _lopsided()
    second = _lopsided()

    optimize_team_balance(first, ATTACK_ONLY, settings=EngineSettings())
    optimize_team_balance(second, ATTACK_ONLY, settings=EngineSettings())

    assert first == second


def test_locked_players_stay_put():
    teams = _lopsided()
    teams[0].players[0].locked = True
    teams[1].players[2].locked = True

    optimize_team_balance(teams, ATTACK_ONLY, settings=EngineSettings())

    assert "a-0" in teams[0].player_ids()
    assert "b-2" in teams[1].player_ids()


def test_fully_locked_teams_are_left_alone():
    teams = _lopsided()
    for team in teams:
        for slot in team.players:
            slot.locked = True
    before = copy.deepcopy(teams)

    outcome = optimize_team_balance(teams, ATTACK_ONLY, settings=EngineSettings())

    assert outcome.iterations == 1
    assert teams == before


def test_iteration_cap_is_checked_between_passes():
    teams = _lopsided()

    outcome = optimize_team_balance(teams, ATTACK_ONLY, settings=EngineSettings(max_iterations=1))

    assert outcome.iterations == 1
    assert outcome.stopped_by == "iterations"
    assert outcome.spread < 21.0


def test_zero_iteration_budget_leaves_teams_scored_and_untouched():
    teams = _lopsided()
    before = copy.deepcopy(teams)

    outcome = optimize_team_balance(teams, ATTACK_ONLY, settings=EngineSettings(max_iterations=0))

    assert outcome.iterations == 0
    assert outcome.stopped_by == "iterations"
    assert teams == before


def test_expired_deadline_returns_without_a_pass():
    teams = _lopsided()
    before = copy.deepcopy(teams)

    outcome = optimize_team_balance(
        teams,
        ATTACK_ONLY,
        settings=EngineSettings(time_limit_ms=50),
        started_at=time.perf_counter() - 1.0,
    )

    assert outcome.iterations == 0
    assert outcome.stopped_by == "time"
    assert outcome.elapsed_ms > 50
    assert teams == before


def test_deadline_not_yet_exceeded_allows_a_pass():
    teams = _lopsided()

    outcome = optimize_team_balance(
        teams,
        ATTACK_ONLY,
        settings=EngineSettings(time_limit_ms=60_000, max_iterations=1),
        started_at=time.perf_counter(),
    )

    assert outcome.iterations == 1
    assert outcome.stopped_by == "iterations"


def test_single_team_has_nothing_to_swap():
    teams = [_team("a", 4, 5, 6)]

    outcome = optimize_team_balance(teams, ATTACK_ONLY, settings=EngineSettings())

    assert outcome.iterations == 1
    assert outcome.spread == 0.0


def test_iterations_never_exceed_cap():
    teams = [_team("a", 10, 9, 8, 7), _team("b", 1, 1, 2, 2), _team("c", 5, 5, 5, 4)]

    outcome = optimize_team_balance(teams, ATTACK_ONLY, settings=EngineSettings(max_iterations=200))

    assert 1 <= outcome.iterations <= 200
