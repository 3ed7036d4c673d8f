from __future__ import annotations

from typing import Dict, List, Literal

from pydantic import BaseModel, Field

from teambalance.models import PlayerRecord, SkillWeights


class SkillValues(BaseModel):
    serve: float = Field(..., ge=0.0)
    set: float = Field(..., ge=0.0)
    block: float = Field(..., ge=0.0)
    receive: float = Field(..., ge=0.0)
    attack: float = Field(..., ge=0.0)
    defense: float = Field(..., ge=0.0)


class PlayerSlotPayload(BaseModel):
    player_id: str
    name: str
    score: float
    skills: SkillValues
    locked: bool = False
    photo: str | None = None


class TeamPayload(BaseModel):
    team_id: str
    name: str
    players: List[PlayerSlotPayload]
    total_score: float
    skill_averages: Dict[str, float]


class GenerateRequest(BaseModel):
    players: List[PlayerRecord]
    number_of_teams: int = Field(default=2, ge=1)
    players_per_team: int | None = Field(default=None, ge=1)
    skill_weights: SkillWeights | None = None
    preset: str | None = None
    random_seed: int | None = None


class GenerateResponse(BaseModel):
    teams: List[TeamPayload]
    total_score_difference: float
    skill_balance_score: float
    iterations: int
    execution_time_ms: float
    stopped_by: Literal["converged", "iterations", "time"]
    random_seed: int | None = None


class SwapRequest(BaseModel):
    teams: List[TeamPayload]
    player_id: str
    from_index: int
    to_index: int
    skill_weights: SkillWeights | None = None


class LockRequest(BaseModel):
    teams: List[TeamPayload]
    player_id: str
    locked: bool = True


class RescoreRequest(BaseModel):
    teams: List[TeamPayload]
    skill_weights: SkillWeights | None = None


class MutationResponse(BaseModel):
    ok: bool
    teams: List[TeamPayload]
    total_score_difference: float


class ReshuffleRequest(BaseModel):
    players: List[PlayerRecord]
    teams: List[TeamPayload]
    number_of_teams: int | None = Field(default=None, ge=1)
    players_per_team: int | None = Field(default=None, ge=1)
    skill_weights: SkillWeights | None = None
    seed: int | None = None


class ReshuffleResponse(BaseModel):
    teams: List[TeamPayload]
    moved_players: int
    attempts: int
    forced: bool
    total_score_difference: float


class PresetResponse(BaseModel):
    key: str
    label: str
    weights: SkillWeights
