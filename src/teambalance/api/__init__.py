"""REST API for the team balancing engine.

Endpoints are stateless: callers send the current teams with every edit and
get the updated teams back.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Iterable

from fastapi import FastAPI, HTTPException

from teambalance.api.schemas import (
    GenerateRequest,
    GenerateResponse,
    LockRequest,
    MutationResponse,
    PresetResponse,
    RescoreRequest,
    ReshuffleRequest,
    ReshuffleResponse,
    SwapRequest,
    TeamPayload,
)
from teambalance.config import get_preset, iter_presets, load_settings
from teambalance.engine import (
    NoEligiblePlayersError,
    generate_teams,
    recompute_team,
    reshuffle,
    score_spread,
    set_lock,
    swap_player,
)
from teambalance.models import PlayerSlot, SkillWeights, Team


def _team_to_payload(team: Team) -> TeamPayload:
    return TeamPayload.model_validate(asdict(team))


def _payload_to_team(payload: TeamPayload) -> Team:
    return Team(
        team_id=payload.team_id,
        name=payload.name,
        players=[PlayerSlot(**slot.model_dump()) for slot in payload.players],
        total_score=payload.total_score,
        skill_averages=dict(payload.skill_averages),
    )


def _to_teams(payloads: Iterable[TeamPayload]) -> list[Team]:
    return [_payload_to_team(payload) for payload in payloads]


def _resolve_weights(weights: SkillWeights | None, preset: str | None = None) -> SkillWeights:
    if weights is not None:
        return weights
    if preset:
        try:
            return get_preset(preset).weights
        except KeyError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
    return SkillWeights()


def create_app() -> FastAPI:
    app = FastAPI(title="teambalance")
    app.state.settings = load_settings()

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/presets", response_model=list[PresetResponse])
    async def presets() -> list[PresetResponse]:
        return [
            PresetResponse(key=preset.key, label=preset.label, weights=preset.weights)
            for preset in iter_presets()
        ]

    @app.post("/teams", response_model=GenerateResponse)
    async def generate(request: GenerateRequest) -> GenerateResponse:
        weights = _resolve_weights(request.skill_weights, request.preset)
        try:
            result = generate_teams(
                request.players,
                request.number_of_teams,
                players_per_team=request.players_per_team,
                skill_weights=weights,
                random_seed=request.random_seed,
                settings=app.state.settings,
            )
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        return GenerateResponse(
            teams=[_team_to_payload(team) for team in result.teams],
            total_score_difference=result.total_score_difference,
            skill_balance_score=result.skill_balance_score,
            iterations=result.iterations,
            execution_time_ms=result.execution_time_ms,
            stopped_by=result.optimization.stopped_by if result.optimization else "converged",
            random_seed=result.random_seed,
        )

    @app.post("/teams/swap", response_model=MutationResponse)
    async def swap(request: SwapRequest) -> MutationResponse:
        teams = _to_teams(request.teams)
        ok = swap_player(
            teams,
            request.player_id,
            request.from_index,
            request.to_index,
            _resolve_weights(request.skill_weights),
        )
        return MutationResponse(
            ok=ok,
            teams=[_team_to_payload(team) for team in teams],
            total_score_difference=score_spread(teams),
        )

    @app.post("/teams/lock", response_model=MutationResponse)
    async def lock(request: LockRequest) -> MutationResponse:
        teams = _to_teams(request.teams)
        ok = set_lock(teams, request.player_id, request.locked)
        return MutationResponse(
            ok=ok,
            teams=[_team_to_payload(team) for team in teams],
            total_score_difference=score_spread(teams),
        )

    @app.post("/teams/rescore", response_model=MutationResponse)
    async def rescore(request: RescoreRequest) -> MutationResponse:
        teams = _to_teams(request.teams)
        weights = _resolve_weights(request.skill_weights)
        for team in teams:
            recompute_team(team, weights)
        return MutationResponse(
            ok=True,
            teams=[_team_to_payload(team) for team in teams],
            total_score_difference=score_spread(teams),
        )

    @app.post("/teams/reshuffle", response_model=ReshuffleResponse)
    async def reshuffle_teams(request: ReshuffleRequest) -> ReshuffleResponse:
        previous = _to_teams(request.teams)
        number_of_teams = request.number_of_teams or len(previous)
        if number_of_teams < 1:
            raise HTTPException(status_code=400, detail="number_of_teams is required when no teams are given")
        try:
            result = reshuffle(
                request.players,
                previous,
                number_of_teams,
                players_per_team=request.players_per_team,
                skill_weights=_resolve_weights(request.skill_weights),
                seed=request.seed,
                settings=app.state.settings,
            )
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return ReshuffleResponse(
            teams=[_team_to_payload(team) for team in result.teams],
            moved_players=result.moved_players,
            attempts=result.attempts,
            forced=result.forced,
            total_score_difference=score_spread(result.teams),
        )

    return app
