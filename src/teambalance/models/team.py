"""Mutable team aggregates produced and refined by the engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .player import SKILL_NAMES, PlayerRecord


def empty_skill_averages() -> Dict[str, float]:
    return {name: 0.0 for name in SKILL_NAMES}


@dataclass
class PlayerSlot:
    """Snapshot of a player embedded by value in a team."""

    player_id: str
    name: str
    score: float
    skills: Dict[str, float]
    locked: bool = False
    photo: Optional[str] = None

    @classmethod
    def from_record(cls, record: PlayerRecord, score: float) -> "PlayerSlot":
        return cls(
            player_id=record.player_id,
            name=record.name,
            score=score,
            skills=record.skills,
            locked=False,
            photo=record.photo,
        )


@dataclass
class Team:
    """Team roster with cached aggregate scores.

    ``total_score`` and ``skill_averages`` are derived from ``players`` and are
    only refreshed by :func:`teambalance.engine.recompute_team`.
    """

    team_id: str
    name: str
    players: List[PlayerSlot] = field(default_factory=list)
    total_score: float = 0.0
    skill_averages: Dict[str, float] = field(default_factory=empty_skill_averages)

    def player_ids(self) -> List[str]:
        return [slot.player_id for slot in self.players]

    def find(self, player_id: str) -> Optional[PlayerSlot]:
        for slot in self.players:
            if slot.player_id == player_id:
                return slot
        return None
