"""Player, weight and team models shared by the engine and API layers."""

from .player import SKILL_NAMES, Availability, PlayerRecord, SkillWeights
from .team import PlayerSlot, Team, empty_skill_averages

__all__ = [
    "SKILL_NAMES",
    "Availability",
    "PlayerRecord",
    "PlayerSlot",
    "SkillWeights",
    "Team",
    "empty_skill_averages",
]
