"""Pydantic models for API I/O."""

from .teams import (
    GenerateRequest,
    GenerateResponse,
    LockRequest,
    MutationResponse,
    PlayerSlotPayload,
    PresetResponse,
    RescoreRequest,
    ReshuffleRequest,
    ReshuffleResponse,
    SkillValues,
    SwapRequest,
    TeamPayload,
)

__all__ = [
    "GenerateRequest",
    "GenerateResponse",
    "LockRequest",
    "MutationResponse",
    "PlayerSlotPayload",
    "PresetResponse",
    "RescoreRequest",
    "ReshuffleRequest",
    "ReshuffleResponse",
    "SkillValues",
    "SwapRequest",
    "TeamPayload",
]
