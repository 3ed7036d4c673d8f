"""Persist and load match templates."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from teambalance.models import SkillWeights


@dataclass
class MatchTemplate:
    name: str
    number_of_teams: int
    players_per_team: Optional[int] = None
    skill_weights: SkillWeights = field(default_factory=SkillWeights)

    @classmethod
    def load(cls, path: Path) -> "MatchTemplate":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            name=data.get("name", path.stem),
            number_of_teams=int(data.get("number_of_teams", 2)),
            players_per_team=data.get("players_per_team"),
            skill_weights=SkillWeights.model_validate(data.get("skill_weights", {})),
        )

    def save(self, path: Path) -> None:
        payload = {
            "name": self.name,
            "number_of_teams": self.number_of_teams,
            "players_per_team": self.players_per_team,
            "skill_weights": self.skill_weights.as_dict(),
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
