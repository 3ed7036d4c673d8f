"""Balanced team generation for rated player pools."""

from .engine import GenerationResult, NoEligiblePlayersError, generate_teams
from .models import PlayerRecord, PlayerSlot, SkillWeights, Team

__all__ = [
    "GenerationResult",
    "NoEligiblePlayersError",
    "PlayerRecord",
    "PlayerSlot",
    "SkillWeights",
    "Team",
    "generate_teams",
]
