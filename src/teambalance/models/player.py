"""Canonical player and weight models used by the balancing engine."""

from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


SKILL_NAMES = ("serve", "set", "block", "receive", "attack", "defense")

Availability = Literal["available", "unavailable"]


class PlayerRecord(BaseModel):
    """Rated player as supplied by the roster store.

    Skill values are expected on a 0-10 scale; clamping is the caller's job.
    """

    player_id: str = Field(..., min_length=1)
    name: str
    serve: float = Field(..., ge=0.0)
    set: float = Field(..., ge=0.0)
    block: float = Field(..., ge=0.0)
    receive: float = Field(..., ge=0.0)
    attack: float = Field(..., ge=0.0)
    defense: float = Field(..., ge=0.0)
    availability: Availability = "available"
    teams: List[str] = Field(default_factory=list)
    notes: Optional[str] = None
    photo: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @property
    def skills(self) -> Dict[str, float]:
        return {name: float(getattr(self, name)) for name in SKILL_NAMES}

    @property
    def is_available(self) -> bool:
        return self.availability == "available"


class SkillWeights(BaseModel):
    """Per-skill weights for the linear player score.

    Weights conventionally sum to 1.0 but nothing here enforces it; use
    :meth:`normalized` when absolute scores matter.
    """

    serve: float = Field(default=0.15, ge=0.0)
    set: float = Field(default=0.15, ge=0.0)
    block: float = Field(default=0.15, ge=0.0)
    receive: float = Field(default=0.15, ge=0.0)
    attack: float = Field(default=0.25, ge=0.0)
    defense: float = Field(default=0.15, ge=0.0)

    model_config = ConfigDict(frozen=True)

    def as_dict(self) -> Dict[str, float]:
        return {name: float(getattr(self, name)) for name in SKILL_NAMES}

    @property
    def total(self) -> float:
        return sum(self.as_dict().values())

    def normalized(self) -> "SkillWeights":
        total = self.total
        if total <= 0:
            raise ValueError("cannot normalize weights that sum to zero")
        return SkillWeights(**{name: value / total for name, value in self.as_dict().items()})
